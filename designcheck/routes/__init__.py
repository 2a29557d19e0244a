"""APIRouter registration for the design validation service."""

from __future__ import annotations

from fastapi import APIRouter

from designcheck.routes.cases import router as cases_router
from designcheck.routes.design_references import router as design_references_router
from designcheck.routes.documents import router as documents_router
from designcheck.routes.projects import router as projects_router
from designcheck.routes.users import router as users_router
from designcheck.routes.validations import router as validations_router

api_router = APIRouter()
api_router.include_router(users_router, tags=["Users"])
api_router.include_router(projects_router, tags=["Projects"])
api_router.include_router(documents_router, tags=["Documents"])
api_router.include_router(design_references_router, tags=["DesignReferences"])
api_router.include_router(validations_router, tags=["Validations"])
api_router.include_router(cases_router, tags=["TestCases", "Export"])

__all__ = ["api_router"]
