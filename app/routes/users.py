"""User CRUD endpoints"""
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
from app.db.repositories.user import SqlAlchemyUserRepository
from app.db.session import get_session
from app.models.schemas import ErrorResponse, UserCreate, UserRead, UserUpdate
from app.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])

NOT_FOUND = {404: {"model": ErrorResponse, "description": "No user with this ID"}}
CONFLICT = {409: {"model": ErrorResponse, "description": "Duplicate firstname or lastname"}}


def get_user_service(session: AsyncSession = Depends(get_session)) -> UserService:
    """Build a service over the request's database session"""
    return UserService(SqlAlchemyUserRepository(session))


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    responses=CONFLICT,
    summary="Create User"
)
async def create_user(data: UserCreate, service: UserService = Depends(get_user_service)):
    """
    Create a user. The ID is assigned by storage; an `id` in the body is ignored.
    """
    return await service.create(data)


@router.get("", response_model=List[UserRead], summary="List Users")
async def list_users(service: UserService = Depends(get_user_service)):
    """Return every stored user, unordered and unpaginated."""
    return await service.find_all()


@router.get("/{user_id}", response_model=UserRead, responses=NOT_FOUND, summary="Get User")
async def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    return await service.find_one(user_id)


@router.patch(
    "/{user_id}",
    response_model=UserRead,
    responses={**NOT_FOUND, **CONFLICT},
    summary="Update User"
)
async def update_user(user_id: int, data: UserUpdate, service: UserService = Depends(get_user_service)):
    """
    Partially update a user.

    Only the fields present in the body are overwritten.
    """
    return await service.update(user_id, data)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
    summary="Delete User"
)
async def delete_user(user_id: int, service: UserService = Depends(get_user_service)):
    await service.remove(user_id)
