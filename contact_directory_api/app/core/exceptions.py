"""
Error taxonomy shared by the service and transport layers.

The service raises these exceptions when a caller's input cannot be
honoured; the API layer translates each one to an HTTP status code.
None of them is fatal to the process, and the record store is left
unchanged whenever one is raised.
"""

from typing import Iterable, List, Optional


class ContactDirectoryError(Exception):
    """Base class for errors caused by caller input."""


class BadResourceException(ContactDirectoryError):
    """Input fails a field-level or structural validation rule.

    ``violations`` holds the individual problems found, each an object
    with ``field`` and ``message`` attributes.
    """

    def __init__(self, message: str, violations: Optional[Iterable] = None) -> None:
        super().__init__(message)
        self.violations: List = list(violations or [])


class ResourceAlreadyExistsException(ContactDirectoryError):
    """A create operation collides with an existing record."""


class ResourceNotFoundException(ContactDirectoryError):
    """An operation targets an id absent from the store."""
