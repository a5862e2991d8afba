"""
User endpoints, mounted under ``/integrations/auth``.

Registration, lookup by id or login, listing, full replacement and
deletion.  The password is write-only.
"""

from typing import List

from fastapi import APIRouter, Query, status

from integrations_api.app.api.deps import UserServiceDep
from integrations_api.app.schemas.user import UserCreate, UserRead

router = APIRouter()


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register_user(body: UserCreate, service: UserServiceDep) -> UserRead:
    """Register a user; 400 if the login is already taken."""
    return await service.create(body)


# Declared before ``/{user_id}`` so the literal path wins.
@router.get("/login/search", response_model=UserRead)
async def get_user_by_login(service: UserServiceDep, login: str = Query(...)) -> UserRead:
    return await service.get_by_login(login)


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: int, service: UserServiceDep) -> UserRead:
    return await service.get_by_id(user_id)


@router.get("", response_model=List[UserRead])
async def list_users(service: UserServiceDep) -> List[UserRead]:
    """Return every user; 404 when there are none."""
    return await service.get_all()


@router.put("/{user_id}", response_model=UserRead)
async def update_user(user_id: int, body: UserCreate, service: UserServiceDep) -> UserRead:
    return await service.update(user_id, body)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: int, service: UserServiceDep) -> None:
    await service.delete(user_id)
