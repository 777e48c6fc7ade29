"""
Read cache in front of a contact store.

Only lookups by id are cached.  Every write through the cache
invalidates (or reseeds) the affected id once the wrapped store has
accepted it.  Listing and duplicate queries always go to the wrapped store.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional

from contact_directory_api.app.repositories.base import ContactStore
from contact_directory_api.app.schemas.contact import Address, Contact


logger = logging.getLogger(__name__)


class CachedContactRepository(ContactStore):
    """Wrap ``store`` with an in-process cache of records keyed by id.

    Cached records are copied on the way in and on the way out, so
    callers may mutate what they receive.
    """

    def __init__(self, store: ContactStore) -> None:
        self.store = store
        self._records: Dict[int, Contact] = {}
        self._lock = threading.Lock()

    def get_by_id(self, contact_id: int) -> Optional[Contact]:
        with self._lock:
            cached = self._records.get(contact_id)
        if cached is not None:
            logger.debug("Cache hit for contact %s", contact_id)
            return cached.model_copy()
        contact = self.store.get_by_id(contact_id)
        if contact is not None:
            with self._lock:
                self._records[contact_id] = contact.model_copy()
        return contact

    def exists_by_id(self, contact_id: int) -> bool:
        with self._lock:
            if contact_id in self._records:
                return True
        return self.store.exists_by_id(contact_id)

    def find_all(self, limit: int, offset: int) -> List[Contact]:
        return self.store.find_all(limit, offset)

    def find_all_by_name(self, name: str, limit: int, offset: int) -> List[Contact]:
        return self.store.find_all_by_name(name, limit, offset)

    def find_duplicate(self, name: str, phone: Optional[str]) -> Optional[Contact]:
        return self.store.find_duplicate(name, phone)

    def insert(self, contact: Contact) -> int:
        contact_id = self.store.insert(contact)
        with self._lock:
            self._records[contact_id] = contact.model_copy(update={"id": contact_id})
        return contact_id

    def update(self, contact: Contact) -> bool:
        updated = self.store.update(contact)
        self.invalidate(contact.id)
        return updated

    def update_address(self, contact_id: int, address: Address) -> bool:
        updated = self.store.update_address(contact_id, address)
        self.invalidate(contact_id)
        return updated

    def delete(self, contact_id: int) -> bool:
        deleted = self.store.delete(contact_id)
        self.invalidate(contact_id)
        return deleted

    def count(self) -> int:
        return self.store.count()

    def invalidate(self, contact_id: Optional[int] = None) -> None:
        """Drop one cached record, or all of them when ``contact_id`` is ``None``."""
        with self._lock:
            if contact_id is None:
                self._records.clear()
            else:
                self._records.pop(contact_id, None)
