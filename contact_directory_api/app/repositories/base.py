"""Abstract record store interface for contacts."""

from abc import ABC, abstractmethod
from typing import List, Optional

from contact_directory_api.app.schemas.contact import Address, Contact


class ContactStore(ABC):
    """Keyed storage for contact records."""

    @abstractmethod
    def get_by_id(self, contact_id: int) -> Optional[Contact]:
        """Return the contact with ``contact_id`` or ``None`` if absent."""

    @abstractmethod
    def exists_by_id(self, contact_id: int) -> bool:
        """Return ``True`` if a contact with ``contact_id`` exists."""

    @abstractmethod
    def find_all(self, limit: int, offset: int) -> List[Contact]:
        """Return a slice of all contacts ordered by id."""

    @abstractmethod
    def find_all_by_name(self, name: str, limit: int, offset: int) -> List[Contact]:
        """Return a slice of contacts whose name contains ``name``, ordered by id.

        Matching is case-insensitive; wildcard characters in ``name``
        are matched literally.
        """

    @abstractmethod
    def find_duplicate(self, name: str, phone: Optional[str]) -> Optional[Contact]:
        """Return a contact with the same name and phone, if any.

        Names compare case-insensitively, ignoring surrounding
        whitespace.  Phones compare exactly, and two missing phones
        are equal.
        """

    @abstractmethod
    def insert(self, contact: Contact) -> int:
        """Persist a new contact and return its generated id.

        ``contact.id`` is ignored.
        """

    @abstractmethod
    def update(self, contact: Contact) -> bool:
        """Replace every field of the record with ``contact.id``.

        Returns ``False`` if no such record exists.
        """

    @abstractmethod
    def update_address(self, contact_id: int, address: Address) -> bool:
        """Overwrite only the address columns of a record.

        Returns ``False`` if no such record exists.
        """

    @abstractmethod
    def delete(self, contact_id: int) -> bool:
        """Delete a record; returns ``False`` if it did not exist."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored contacts."""
