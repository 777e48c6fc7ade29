"""
Top‑level API router.

Aggregates the domain routers; the application mounts it under
``/api``.
"""

from fastapi import APIRouter

from .endpoints import contacts, health


router = APIRouter()

router.include_router(contacts.router, prefix="/contacts", tags=["contact"])
router.include_router(health.router, prefix="/health", tags=["health"])
