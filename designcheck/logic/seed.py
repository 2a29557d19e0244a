"""Demo data loaded at startup: one user and three sample projects."""

from __future__ import annotations

import logging

from designcheck.logic.store import EntityStore
from designcheck.logic.users import get_user_by_username

logger = logging.getLogger(__name__)

DEMO_USER = {
    "username": "johndoe",
    "password": "password123",
    "email": "john@example.com",
    "display_name": "John Doe",
}

DEMO_PROJECTS = [
    {
        "name": "E-commerce Dashboard",
        "description": "An e-commerce dashboard project with user management and product features",
    },
    {
        "name": "Mobile Banking App",
        "description": "A mobile banking application with account management and transactions",
    },
    {
        "name": "HR Management System",
        "description": "Human Resources management system with employee records and time tracking",
    },
]


def seed_demo_data(store: EntityStore) -> int:
    """Create the demo user and projects unless the user already exists.

    Returns the demo user's id.
    """
    with store.atomic():
        existing = get_user_by_username(store, DEMO_USER["username"])
        if existing is not None:
            return existing.id
        user = store.users.create(DEMO_USER)
        for project in DEMO_PROJECTS:
            store.projects.create({**project, "user_id": user.id})
    logger.info("demo_data_seeded user=%s projects=%s", user.id, len(DEMO_PROJECTS))
    return user.id


__all__ = ["DEMO_USER", "DEMO_PROJECTS", "seed_demo_data"]
