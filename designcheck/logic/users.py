"""User commands with uniqueness on username and email."""

from __future__ import annotations

import logging

from designcheck.logic.errors import ConflictError, NotFoundError
from designcheck.logic.store import EntityStore
from designcheck.models.entities import User
from designcheck.models.requests import UserCreate

logger = logging.getLogger(__name__)


def create_user(store: EntityStore, payload: UserCreate) -> User:
    with store.atomic():
        if store.users.find(username=payload.username):
            raise ConflictError(f"username {payload.username!r} already exists", code="USER_USERNAME_TAKEN")
        if store.users.find(email=payload.email):
            raise ConflictError(f"email {payload.email!r} already exists", code="USER_EMAIL_TAKEN")
        user = store.users.create(payload.model_dump())
    logger.info("user_created id=%s username=%s", user.id, user.username)
    return user


def get_user(store: EntityStore, user_id: int) -> User:
    user = store.users.get(user_id)
    if user is None:
        raise NotFoundError("User", user_id)
    return user


def get_user_by_username(store: EntityStore, username: str) -> User | None:
    found = store.users.find(username=username)
    return found[0] if found else None
