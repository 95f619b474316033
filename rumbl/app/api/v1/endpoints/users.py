"""
User endpoints for API v1.

Read-only JSON views over ``UserService``.  Misses are reported as
404 errors with the detail ``"User not found"``.
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from rumbl.app.schemas.user import User
from rumbl.app.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=List[User])
async def list_users() -> List[User]:
    """Return all users in their fixed order."""
    return await UserService.list_users()


@router.get("/search", response_model=User)
async def search_user(
    id: Optional[str] = Query(None),
    name: Optional[str] = Query(None),
    username: Optional[str] = Query(None),
) -> User:
    """Return the first user matching every supplied query parameter.

    At least one of ``id``, ``name`` or ``username`` is required.
    """
    criteria = {
        key: value
        for key, value in {"id": id, "name": name, "username": username}.items()
        if value is not None
    }
    if not criteria:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="At least one search parameter is required",
        )
    user = await UserService.get_user_by(criteria)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.get("/{user_id}", response_model=User)
async def read_user(user_id: str) -> User:
    """Return a single user by id."""
    user = await UserService.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
