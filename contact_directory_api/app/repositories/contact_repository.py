"""
SQLite record store for contacts.

Each call opens its own connection and closes it before returning, so
a repository instance can be shared between requests.  All queries
use parameterized statements.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from contact_directory_api.app.core.db import get_connection
from contact_directory_api.app.repositories.base import ContactStore
from contact_directory_api.app.schemas.contact import Address, Contact


logger = logging.getLogger(__name__)

_COLUMNS = "id, name, phone, email, address1, address2, address3, postal_code, note"

# SQLite INTEGER is a signed 64-bit value.
MAX_INTEGER = 2**63 - 1
MIN_INTEGER = -(2**63)


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so ``value`` matches literally (ESCAPE '\\')."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def fits_integer(value: int) -> bool:
    """Return ``True`` if ``value`` can be bound as an SQLite INTEGER."""
    return MIN_INTEGER <= value <= MAX_INTEGER


class ContactRepository(ContactStore):
    """Contact store backed by the ``contact`` table.

    ``db_path`` defaults to ``settings.database_url``.  The schema must
    have been created with ``core.db.init_db``.
    Ids that do not fit an SQLite INTEGER are treated as absent, and
    offsets past that range yield empty pages.
    """

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path

    def get_by_id(self, contact_id: int) -> Optional[Contact]:
        if not fits_integer(contact_id):
            return None
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM contact WHERE id = ?",
                (contact_id,),
            ).fetchone()
            if not row:
                return None
            return self._row_to_contact(row)
        finally:
            conn.close()

    def exists_by_id(self, contact_id: int) -> bool:
        if not fits_integer(contact_id):
            return False
        conn = get_connection(self.db_path)
        try:
            row = conn.execute("SELECT 1 FROM contact WHERE id = ?", (contact_id,)).fetchone()
            return row is not None
        finally:
            conn.close()

    def find_all(self, limit: int, offset: int) -> List[Contact]:
        if offset > MAX_INTEGER:
            return []
        conn = get_connection(self.db_path)
        try:
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM contact ORDER BY id ASC LIMIT ? OFFSET ?",
                (min(limit, MAX_INTEGER), offset),
            ).fetchall()
            return [self._row_to_contact(row) for row in rows]
        finally:
            conn.close()

    def find_all_by_name(self, name: str, limit: int, offset: int) -> List[Contact]:
        if offset > MAX_INTEGER:
            return []
        conn = get_connection(self.db_path)
        try:
            # LIKE is case-insensitive for ASCII letters in SQLite.
            rows = conn.execute(
                f"""
                SELECT {_COLUMNS} FROM contact
                WHERE name LIKE ? ESCAPE '\\'
                ORDER BY id ASC LIMIT ? OFFSET ?
                """,
                (f"%{escape_like(name)}%", min(limit, MAX_INTEGER), offset),
            ).fetchall()
            return [self._row_to_contact(row) for row in rows]
        finally:
            conn.close()

    def find_duplicate(self, name: str, phone: Optional[str]) -> Optional[Contact]:
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(
                f"""
                SELECT {_COLUMNS} FROM contact
                WHERE trim(name) = trim(?) COLLATE NOCASE AND phone IS ?
                ORDER BY id ASC LIMIT 1
                """,
                (name, phone),
            ).fetchone()
            if not row:
                return None
            return self._row_to_contact(row)
        finally:
            conn.close()

    def insert(self, contact: Contact) -> int:
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO contact (name, phone, email, address1, address2, address3, postal_code, note)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    contact.name,
                    contact.phone,
                    contact.email,
                    contact.address1,
                    contact.address2,
                    contact.address3,
                    contact.postal_code,
                    contact.note,
                ),
            )
            contact_id = cursor.lastrowid
            conn.commit()
            logger.debug("Inserted contact row %s", contact_id)
            return contact_id
        finally:
            conn.close()

    def update(self, contact: Contact) -> bool:
        if contact.id is None or not fits_integer(contact.id):
            return False
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                UPDATE contact
                SET name = ?, phone = ?, email = ?, address1 = ?, address2 = ?, address3 = ?,
                    postal_code = ?, note = ?, updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
                """,
                (
                    contact.name,
                    contact.phone,
                    contact.email,
                    contact.address1,
                    contact.address2,
                    contact.address3,
                    contact.postal_code,
                    contact.note,
                    contact.id,
                ),
            )
            affected = cursor.rowcount
            conn.commit()
            return affected > 0
        finally:
            conn.close()

    def update_address(self, contact_id: int, address: Address) -> bool:
        if not fits_integer(contact_id):
            return False
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                UPDATE contact
                SET address1 = ?, address2 = ?, address3 = ?, postal_code = ?,
                    updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
                """,
                (address.address1, address.address2, address.address3, address.postal_code, contact_id),
            )
            affected = cursor.rowcount
            conn.commit()
            return affected > 0
        finally:
            conn.close()

    def delete(self, contact_id: int) -> bool:
        if not fits_integer(contact_id):
            return False
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM contact WHERE id = ?", (contact_id,))
            affected = cursor.rowcount
            conn.commit()
            return affected > 0
        finally:
            conn.close()

    def count(self) -> int:
        conn = get_connection(self.db_path)
        try:
            row = conn.execute("SELECT COUNT(*) AS count FROM contact").fetchone()
            return row["count"]
        finally:
            conn.close()

    @staticmethod
    def _row_to_contact(row: sqlite3.Row) -> Contact:
        """Convert a database row to a ``Contact``."""
        return Contact(
            id=row["id"],
            name=row["name"],
            phone=row["phone"],
            email=row["email"],
            address1=row["address1"],
            address2=row["address2"],
            address3=row["address3"],
            postal_code=row["postal_code"],
            note=row["note"],
        )
