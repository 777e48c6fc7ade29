"""
FastAPI dependencies for the API layer.

The contact store is created once per application by ``build_repository``
and kept on ``app.state``; every request gets a ``ContactService`` bound
to it.  Tests can replace ``get_contact_service`` through
``app.dependency_overrides``.
"""

from typing import Optional

from fastapi import Request

from contact_directory_api.app.core.config import settings
from contact_directory_api.app.repositories import (
    CachedContactRepository,
    ContactRepository,
    ContactStore,
)
from contact_directory_api.app.services.contact_service import ContactService


def build_repository(db_path: Optional[str] = None, cache_enabled: Optional[bool] = None) -> ContactStore:
    """Create the contact store, wrapped in a read cache when enabled."""
    repository: ContactStore = ContactRepository(db_path or settings.database_url)
    if cache_enabled is None:
        cache_enabled = settings.contacts_cache_enabled
    if cache_enabled:
        repository = CachedContactRepository(repository)
    return repository


def get_contact_service(request: Request) -> ContactService:
    """Return a service bound to the application's contact store."""
    return ContactService(request.app.state.contact_repository, page_size=settings.contacts_page_size)
