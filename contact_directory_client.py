"""Contact Directory API client.

This module defines a small client wrapper around the contact
directory REST API.  The client uses the ``requests`` library
internally to make HTTP calls and always talks JSON.

The client exposes high‑level methods for every operation:

* :meth:`list_contacts` – return a page of contacts, optionally filtered by name.
* :meth:`get_contact` – fetch a single contact by its identifier.
* :meth:`create_contact` – add a new contact.
* :meth:`update_contact` – replace an existing contact.
* :meth:`update_address` – change only the address of a contact.
* :meth:`delete_contact` – remove a contact.

Every method returns a tuple ``(result, error)``.  On success
``error`` is ``None``; on failure ``result`` is empty and ``error`` is
a dictionary with keys ``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class ContactDirectoryAPI:
    """Client for interacting with the contact directory API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            api_prefix: Path under which the API is mounted.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds for each request.
        """
        self.base_url = base_url.rstrip("/") + api_prefix.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[requests.Response], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(response, error)``.  ``response`` is the
            successful response; on failure it is ``None`` and
            ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Contact operations
    # ------------------------------------------------------------------
    def list_contacts(self, page: int = 1, name: Optional[str] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve one page of contacts, filtered by name if given."""
        params: Dict[str, Any] = {"page": page}
        if name:
            params["name"] = name
        response, error = self._request("GET", "/contacts", params=params)
        if error:
            return [], error
        data = response.json()
        return (data if isinstance(data, list) else []), None

    def get_contact(self, contact_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single contact by ID."""
        response, error = self._request("GET", f"/contacts/{contact_id}")
        if error:
            return None, error
        return response.json(), None

    def create_contact(self, contact: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a contact and return it with its assigned ``id``."""
        response, error = self._request("POST", "/contacts", json_body=contact)
        if error:
            return None, error
        return response.json(), None

    def update_contact(self, contact_id: int, contact: Dict[str, Any]) -> Tuple[bool, Optional[Error]]:
        """Replace every field of an existing contact."""
        _, error = self._request("PUT", f"/contacts/{contact_id}", json_body=contact)
        return error is None, error

    def update_address(self, contact_id: int, address: Dict[str, Any]) -> Tuple[bool, Optional[Error]]:
        """Change only the address fields of an existing contact."""
        _, error = self._request("PATCH", f"/contacts/{contact_id}", json_body=address)
        return error is None, error

    def delete_contact(self, contact_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete a contact."""
        _, error = self._request("DELETE", f"/contacts/{contact_id}")
        return error is None, error
