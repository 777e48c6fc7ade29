"""
Application package initializer.

The project is split into layers: ``api`` maps HTTP requests to
service calls, ``services`` holds the business rules for contacts,
``repositories`` talks to SQLite and ``schemas`` defines the payloads
exchanged between them.  ``core`` carries configuration, logging,
database setup and the error taxonomy shared by every layer.
"""

from .main import app  # noqa: F401
