"""
Top‑level router for the integrations API.

Aggregates the resource routers under ``/integrations``.  Users are
exposed under ``/auth`` for compatibility with existing clients.
"""

from fastapi import APIRouter

from .endpoints import assignors, payables, users

router = APIRouter(prefix="/integrations")

router.include_router(users.router, prefix="/auth", tags=["users"])
router.include_router(payables.router, prefix="/payable", tags=["payables"])
router.include_router(assignors.router, prefix="/assignor", tags=["assignors"])
