"""Liveness endpoint."""

from typing import Dict

from fastapi import APIRouter

router = APIRouter()


@router.get("", response_model=Dict[str, str])
async def health() -> Dict[str, str]:
    """Return ``{"status": "ok"}`` while the process is serving requests."""
    return {"status": "ok"}
