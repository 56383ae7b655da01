"""Storage access for user records"""
from typing import Any, Dict, List, Optional, Protocol
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.models.user import MAX_ID, users_table
from app.models.user import User


def storable_id(user_id: int) -> bool:
    """Ids outside the INTEGER range cannot match any row"""
    return -MAX_ID - 1 <= user_id <= MAX_ID


class UserRepository(Protocol):
    """Capability the user service needs from storage"""

    def create(self, fields: Dict[str, Any]) -> User:
        ...

    async def save(self, user: User) -> User:
        ...

    async def find(self) -> List[User]:
        ...

    async def find_one(self, user_id: int) -> Optional[User]:
        ...

    async def delete(self, user_id: int) -> int:
        ...


class SqlAlchemyUserRepository:
    """UserRepository backed by an AsyncSession.

    Every write commits immediately; storage errors such as
    ``IntegrityError`` are rolled back and re-raised unchanged.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    def create(self, fields: Dict[str, Any]) -> User:
        """Build an unsaved entity; no I/O"""
        return User(**fields)

    async def save(self, user: User) -> User:
        self.session.add(user)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return user

    async def find(self) -> List[User]:
        result = await self.session.execute(select(User))
        return list(result.scalars().all())

    async def find_one(self, user_id: int) -> Optional[User]:
        if not storable_id(user_id):
            return None
        return await self.session.get(User, user_id)

    async def delete(self, user_id: int) -> int:
        """Delete by id and return the number of affected rows"""
        if not storable_id(user_id):
            return 0
        try:
            result = await self.session.execute(
                delete(users_table).where(users_table.c.id == user_id)
            )
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return result.rowcount
