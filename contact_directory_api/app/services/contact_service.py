"""
Business logic for contacts.

``ContactService`` enforces the rules around a contact record:
validation, identity assignment, duplicate detection and existence
checks.  It is constructed with a record store and holds no other
state, so one instance may serve concurrent requests; conflicting
writes are serialized by the store.

A new contact is a duplicate of a stored one when it carries the id
of an existing record, or when a stored record has the same name
(case-insensitive, surrounding whitespace ignored) and the same phone.
``update`` does not re-run the duplicate check.
"""

import logging
from typing import List, Optional

from contact_directory_api.app.core.config import settings
from contact_directory_api.app.core.exceptions import (
    BadResourceException,
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
)
from contact_directory_api.app.repositories.base import ContactStore
from contact_directory_api.app.schemas.contact import Address, Contact
from contact_directory_api.app.services.validation import validate_contact


logger = logging.getLogger(__name__)


class ContactService:
    """Service for managing contacts.

    ``page_size`` is used by the list operations when the caller does
    not pass one; it defaults to ``settings.contacts_page_size``.
    """

    def __init__(self, repository: ContactStore, page_size: Optional[int] = None) -> None:
        self.repository = repository
        self.page_size = page_size or settings.contacts_page_size

    def _page_bounds(self, page_number: int, page_size: Optional[int]) -> tuple[int, int]:
        """Translate a 1-based page into ``(limit, offset)``.

        Non-positive page numbers are floored to 1; a missing or
        non-positive page size falls back to ``self.page_size``.
        """
        size = page_size if page_size and page_size > 0 else self.page_size
        number = max(page_number or 1, 1)
        return size, (number - 1) * size

    def _validate(self, contact: Optional[Contact]) -> None:
        violations = validate_contact(contact)
        if violations:
            details = "; ".join(str(v) for v in violations)
            raise BadResourceException(f"Failed to save contact: {details}", violations)

    def list_all(self, page_number: int = 1, page_size: Optional[int] = None) -> List[Contact]:
        """Return one page of all contacts ordered by id."""
        limit, offset = self._page_bounds(page_number, page_size)
        return self.repository.find_all(limit, offset)

    def list_by_name(self, name: str, page_number: int = 1, page_size: Optional[int] = None) -> List[Contact]:
        """Return one page of the contacts whose name contains ``name``."""
        limit, offset = self._page_bounds(page_number, page_size)
        return self.repository.find_all_by_name(name, limit, offset)

    def find_by_id(self, contact_id: int) -> Contact:
        """Return a contact or raise ``ResourceNotFoundException``."""
        contact = self.repository.get_by_id(contact_id)
        if contact is None:
            raise ResourceNotFoundException(f"Cannot find Contact with id: {contact_id}")
        return contact

    def count(self) -> int:
        return self.repository.count()

    def create(self, contact: Optional[Contact]) -> Contact:
        """Validate and store a new contact.

        The store assigns the id, which is written back onto
        ``contact`` before it is returned.  Raises
        ``BadResourceException`` on invalid input and
        ``ResourceAlreadyExistsException`` on a duplicate; the store is
        unchanged in both cases.
        """
        self._validate(contact)
        if contact.id is not None and self.repository.exists_by_id(contact.id):
            raise ResourceAlreadyExistsException(f"Contact with id: {contact.id} already exists")
        duplicate = self.repository.find_duplicate(contact.name, contact.phone)
        if duplicate is not None:
            raise ResourceAlreadyExistsException(
                f"Contact '{contact.name}' with phone {contact.phone} already exists with id: {duplicate.id}"
            )
        contact.id = self.repository.insert(contact)
        logger.info("Created contact %s", contact.id)
        return contact

    def update(self, contact: Optional[Contact]) -> None:
        """Replace every field of an existing contact.

        Raises ``ResourceNotFoundException`` when ``contact.id`` is
        unknown and ``BadResourceException`` on invalid input.
        """
        if contact is None:
            raise BadResourceException("Contact to update must not be null")
        if contact.id is None or not self.repository.exists_by_id(contact.id):
            raise ResourceNotFoundException(f"Cannot find Contact with id: {contact.id}")
        self._validate(contact)
        self.repository.update(contact)
        logger.info("Updated contact %s", contact.id)

    def update_address(self, contact_id: int, address: Address) -> None:
        """Overwrite the address fields of a contact; other fields are kept.

        The address is stored as given, without field validation.  Only
        the address columns are written, so a concurrent ``update`` of
        the other fields is never reverted.
        """
        if address is None:
            raise BadResourceException("Address to update must not be null")
        if not self.repository.update_address(contact_id, address):
            raise ResourceNotFoundException(f"Cannot find Contact with id: {contact_id}")
        logger.info("Updated address of contact %s", contact_id)

    def delete_by_id(self, contact_id: int) -> None:
        """Permanently remove a contact or raise ``ResourceNotFoundException``."""
        if not self.repository.exists_by_id(contact_id):
            raise ResourceNotFoundException(f"Cannot find Contact with id: {contact_id}")
        self.repository.delete(contact_id)
        logger.info("Deleted contact %s", contact_id)
