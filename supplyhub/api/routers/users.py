# supplyhub/api/routers/users.py
from typing import List

from fastapi import APIRouter, Depends, Query

from supplyhub.api.deps import bad_request, get_marketplace, not_found
from supplyhub.domain.errors import NotFoundError, ValidationError
from supplyhub.domain.schemas import Role, User, UserCreate, UserUpdate
from supplyhub.marketplace import Marketplace

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/", response_model=List[User])
async def list_users(role: Role | None = Query(None), mp: Marketplace = Depends(get_marketplace)):
    if role:
        return await mp.users.get_by_role(role)
    return await mp.users.get_all()


@router.get("/{user_id}", response_model=User)
async def get_user(user_id: int, mp: Marketplace = Depends(get_marketplace)):
    try:
        return await mp.users.get_by_id(user_id)
    except NotFoundError as e:
        raise not_found(e)


@router.post("/", response_model=User, status_code=201)
async def create_user(payload: UserCreate, mp: Marketplace = Depends(get_marketplace)):
    try:
        return await mp.users.create(payload)
    except ValidationError as e:
        raise bad_request(e)


@router.patch("/{user_id}", response_model=User)
async def update_user(user_id: int, payload: UserUpdate, mp: Marketplace = Depends(get_marketplace)):
    try:
        return await mp.users.update(user_id, payload)
    except NotFoundError as e:
        raise not_found(e)
    except ValidationError as e:
        raise bad_request(e)


@router.delete("/{user_id}", response_model=User)
async def delete_user(user_id: int, mp: Marketplace = Depends(get_marketplace)):
    try:
        return await mp.users.delete(user_id)
    except NotFoundError as e:
        raise not_found(e)
