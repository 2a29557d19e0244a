"""User endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from designcheck.deps import get_store
from designcheck.logic.store import EntityStore
from designcheck.logic.users import create_user, get_user
from designcheck.models.requests import UserCreate
from designcheck.models.responses import UserPublic

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/users", status_code=201, response_model=UserPublic, summary="Create a user")
def post_user(payload: UserCreate, store: EntityStore = Depends(get_store)):
    return UserPublic.model_validate(create_user(store, payload).model_dump())


@router.get("/users/{user_id}", response_model=UserPublic, summary="Get a user")
def read_user(user_id: int, store: EntityStore = Depends(get_store)):
    return UserPublic.model_validate(get_user(store, user_id).model_dump())


__all__ = ["router"]
