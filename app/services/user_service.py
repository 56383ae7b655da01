"""User business logic"""
from typing import List
from app.db.repositories.user import UserRepository
from app.models.schemas import UserCreate, UserUpdate
from app.models.user import User
from app.utils.exceptions import UserNotFoundError
from app.utils.logger import get_logger

logger = get_logger("service")


class UserService:
    """
    CRUD operations over user records.

    The repository is supplied at construction. Storage errors (for example
    a duplicate firstname) propagate unchanged; the only error raised here is
    ``UserNotFoundError``.
    """

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def create(self, data: UserCreate) -> User:
        user = self.repository.create(data.model_dump())
        saved = await self.repository.save(user)
        logger.info(f"Created user {saved.id}")
        return saved

    async def find_all(self) -> List[User]:
        return await self.repository.find()

    async def find_one(self, user_id: int) -> User:
        user = await self.repository.find_one(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def update(self, user_id: int, data: UserUpdate) -> User:
        """Overwrite only the fields present in ``data``; the rest are kept"""
        user = await self.find_one(user_id)
        changes = data.model_dump(exclude_unset=True)
        for field, value in changes.items():
            setattr(user, field, value)
        saved = await self.repository.save(user)
        logger.info(f"Updated user {user_id} ({', '.join(sorted(changes)) or 'no fields'})")
        return saved

    async def remove(self, user_id: int) -> None:
        affected = await self.repository.delete(user_id)
        if not affected:
            raise UserNotFoundError(user_id)
        logger.info(f"Removed user {user_id}")
