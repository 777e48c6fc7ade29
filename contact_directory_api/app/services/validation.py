"""
Field validation for contacts.

``validate_contact`` checks a contact against ``ContactConstraints``,
the constrained form of a contact record, and returns every violation
it finds in field order.  An empty list means the contact is valid.
E‑mail syntax is checked by pydantic's ``EmailStr`` (backed by
``email-validator``) without any DNS lookups.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, EmailStr, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from contact_directory_api.app.schemas.contact import Contact


PHONE_PATTERN = r"^\+?[0-9. ()-]{7,25}$"


@dataclass(frozen=True)
class Violation:
    """A single constraint violation."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ContactConstraints(BaseModel):
    """Field constraints of a stored contact, keyed by wire name."""

    name: str = Field(..., max_length=100)
    phone: Optional[str] = Field(None, max_length=25, pattern=PHONE_PATTERN)
    email: Optional[EmailStr] = Field(None, max_length=100)
    address1: Optional[str] = Field(None, max_length=50)
    address2: Optional[str] = Field(None, max_length=50)
    address3: Optional[str] = Field(None, max_length=50)
    postal_code: Optional[str] = Field(None, alias="postalCode", max_length=20)
    note: Optional[str] = Field(None, max_length=4000)

    @field_validator("name", mode="before")
    @classmethod
    def name_not_blank(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise PydanticCustomError("blank", "must not be blank")
        return value

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_absent(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


def _message(error: Dict[str, Any]) -> str:
    kind = error["type"]
    if kind in ("string_too_long", "too_long"):
        return f"size must be between 0 and {error['ctx']['max_length']}"
    if kind == "string_pattern_mismatch":
        return "must be a valid phone number"
    if kind == "value_error":
        # Only EmailStr raises plain value errors here.
        return "must be a well-formed email address"
    return error["msg"]


def validate_contact(contact: Optional[Contact]) -> List[Violation]:
    """Return the constraint violations of ``contact``."""
    if contact is None:
        return [Violation("contact", "must not be null")]
    try:
        ContactConstraints.model_validate(contact.model_dump(by_alias=True))
    except ValidationError as exc:
        return [
            Violation(".".join(str(loc) for loc in error["loc"]), _message(error))
            for error in exc.errors()
        ]
    return []
