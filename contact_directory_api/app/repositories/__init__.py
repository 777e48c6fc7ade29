"""
Record stores for contacts.

``ContactRepository`` keeps contacts in SQLite; ``CachedContactRepository``
wraps any store with a read cache.  Both implement ``ContactStore``,
which is all the service layer depends on.
"""

from .base import ContactStore
from .cache import CachedContactRepository
from .contact_repository import ContactRepository

__all__ = ["ContactStore", "ContactRepository", "CachedContactRepository"]
