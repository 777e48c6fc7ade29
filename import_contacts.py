#!/usr/bin/env python3
"""
Import contacts from a JSON file into the Contact Directory SQLite database.

The file must hold a JSON array of contact objects using the API field
names (``name``, ``phone``, ``email``, ``address1``, ``postalCode``, ...).
Every record goes through the same validation and duplicate checks as
``POST /api/contacts``; rejected records are reported and skipped.

Usage:
    python import_contacts.py --db ./contact_directory_api/contacts.db --file contacts.json
"""

import argparse
import json
import os
import sys
from typing import List, Optional

from pydantic import ValidationError

from contact_directory_api.app.core.db import init_db
from contact_directory_api.app.core.exceptions import (
    BadResourceException,
    ResourceAlreadyExistsException,
)
from contact_directory_api.app.repositories import ContactRepository
from contact_directory_api.app.schemas.contact import Contact
from contact_directory_api.app.services.contact_service import ContactService


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Import contacts from a JSON file (SQLite).")
    ap.add_argument("--db", required=True, help="Path to SQLite DB file (created if missing)")
    ap.add_argument("--file", required=True, help="JSON file holding an array of contacts")
    args = ap.parse_args(argv)

    if not os.path.exists(args.file):
        print(f"[!] File not found: {args.file}", file=sys.stderr)
        return 1

    with open(args.file, "r", encoding="utf-8") as f:
        try:
            records = json.load(f)
        except json.JSONDecodeError as exc:
            print(f"[!] Invalid JSON in {args.file}: {exc}", file=sys.stderr)
            return 1
    if not isinstance(records, list):
        print("[!] Expected a JSON array of contacts", file=sys.stderr)
        return 1

    db_path = os.path.abspath(args.db)
    init_db(db_path)
    service = ContactService(ContactRepository(db_path))

    imported = 0
    for index, record in enumerate(records, start=1):
        try:
            contact = service.create(Contact.model_validate(record))
        except (ValidationError, BadResourceException, ResourceAlreadyExistsException) as exc:
            print(f"[-] Skipped record {index}: {exc}", file=sys.stderr)
            continue
        imported += 1
        print(f"[+] Imported {contact.name} as id {contact.id}")

    print(f"[+] {imported} of {len(records)} contacts imported")
    return 0


if __name__ == "__main__":
    sys.exit(main())
