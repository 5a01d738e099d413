"""User endpoints."""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from bloglist.models.user import UserRead
from bloglist.services.identity import register_user
from bloglist.services.security import BcryptHasher, get_password_hasher
from bloglist.services.storage import RecordStore, get_user_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserRead])
async def list_users(store: RecordStore = Depends(get_user_store)):
    """Get every user. Credential hashes are never returned."""
    return [UserRead(**doc) for doc in await store.find_all()]


@router.post("", response_model=UserRead)
async def create_user(
    payload: dict[str, Any] = Body(...),
    store: RecordStore = Depends(get_user_store),
    hasher: BcryptHasher = Depends(get_password_hasher),
):
    """Register a user from ``{username, name, password}``."""
    draft = await register_user(
        store,
        username=payload.get("username"),
        name=payload.get("name"),
        password=payload.get("password"),
        hasher=hasher,
    )
    stored = await store.insert(draft.model_dump())
    logger.info("Registered user %s (%s)", stored["username"], stored["id"])
    return UserRead(**stored)
