"""
Pydantic models for contact data.

``Contact`` is the record exchanged by every operation; ``Address`` is
the sub-object accepted by the partial address update.  On the wire
the postal code is called ``postalCode``; in Python it is
``postal_code``.  Both names are accepted on input.

The models only enforce types.  Length, pattern and e‑mail rules are
checked by ``services.validation`` so that violations can be reported
as a ``BadResourceException`` instead of a framework error.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Address(BaseModel):
    """Address lines and postal code of a contact."""

    address1: Optional[str] = Field(None, examples=["888 Constantine Ave, #54"])
    address2: Optional[str] = Field(None, examples=["San Angeles"])
    address3: Optional[str] = Field(None, examples=["Florida"])
    postal_code: Optional[str] = Field(None, alias="postalCode", examples=["32106"])

    model_config = {
        "populate_by_name": True,
    }


class Contact(BaseModel):
    """A contact record.

    ``id`` is ``None`` until the store assigns one on creation.
    """

    id: Optional[int] = Field(None, examples=[1])
    name: Optional[str] = Field(None, examples=["Jessica Abigail"])
    phone: Optional[str] = Field(None, examples=["62482211"])
    email: Optional[str] = Field(None, examples=["jessica@ngilang.com"])
    address1: Optional[str] = Field(None, examples=["888 Constantine Ave, #54"])
    address2: Optional[str] = Field(None, examples=["San Angeles"])
    address3: Optional[str] = Field(None, examples=["Florida"])
    postal_code: Optional[str] = Field(None, alias="postalCode", examples=["32106"])
    note: Optional[str] = Field(None, examples=["Meet her at Spring Boot Conference"])

    model_config = {
        "populate_by_name": True,
    }
