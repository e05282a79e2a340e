"""Group registry API client.

This module defines a small client wrapper around the Group Registry
REST API.  The client uses the ``requests`` library internally to make
HTTP calls and exposes one method per route:

* :meth:`list_students` – return every seeded student.
* :meth:`list_groups` – return every group summary.
* :meth:`create_group` – create a group from student names.
* :meth:`delete_group` – delete a group by ID.
* :meth:`get_group` – fetch a group with its members resolved.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a
dictionary with keys ``status_code`` and ``message``.  The server
reports errors as plain text, which becomes the message.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3902"


class GroupRegistryAPI:
    """Client for interacting with the group registry API."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        api_prefix: str = "/api",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:3902``.
            api_prefix: Path the API is mounted under.
            session: Optional requests session.  Any object with a
                compatible ``request`` method works, which lets tests pass
                an in‑process test client.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/") + "/" + api_prefix.strip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``DELETE``).
            path: Path relative to the API prefix (e.g. ``/groups``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body,
            or ``None`` for an empty response.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            message = response.text.strip() or f"HTTP {response.status_code}"
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}
        if response.content:
            return response.json(), None
        return None, None

    # ------------------------------------------------------------------
    # Student operations
    # ------------------------------------------------------------------
    def list_students(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all students."""
        data, error = self._request("GET", "/students")
        if error:
            return [], error
        return data or [], None

    # ------------------------------------------------------------------
    # Group operations
    # ------------------------------------------------------------------
    def list_groups(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all group summaries."""
        data, error = self._request("GET", "/groups")
        if error:
            return [], error
        return data or [], None

    def create_group(
        self, group_name: str, members: Sequence[str]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Create a group.

        Args:
            group_name: Display name of the new group.
            members: Student names; every one must match a student.
        Returns:
            A tuple ``(group, error)``.  ``group`` holds member ids.
        """
        payload = {"groupName": group_name, "members": list(members)}
        return self._request("POST", "/groups", json_body=payload)

    def delete_group(self, group_id: int) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Delete a group.  Succeeds even if the group does not exist."""
        _, error = self._request("DELETE", f"/groups/{group_id}")
        if error:
            return False, error
        return True, None

    def get_group(self, group_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve a group with members resolved to student records."""
        return self._request("GET", f"/groups/{group_id}")
