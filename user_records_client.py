"""User Records API client.

A thin wrapper around the User Records HTTP API using the ``requests``
library.  It exposes one method per operation:

* :meth:`list_users` – return every stored user.
* :meth:`get_user` – fetch a single user by email.
* :meth:`create_user` – create a new user.
* :meth:`update_user` – change the first and/or last name of a user.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or an empty list for
:meth:`list_users`) and ``error`` is a dictionary with the keys
``status_code`` and ``message``.  ``status_code`` is ``None`` when the
server could not be reached at all.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]


class UserRecordsClient:
    """Client for the User Records API."""

    LIST_PATH = "/example/get/users/all"
    GET_PATH = "/example/get/user"
    CREATE_PATH = "/example/create/user"
    UPDATE_PATH = "/example/update/user"

    def __init__(
        self,
        base_url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        """Return the server's ``detail`` text, or the raw body if it has none."""
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("detail"):
            return str(body["detail"])
        return response.text or f"HTTP {response.status_code}"

    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Send one request and return ``(data, error)``."""
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("%s %s unreachable: %s", method, url, exc)
            return None, {"status_code": None, "message": str(exc)}

        if not response.ok:
            message = self._error_message(response)
            logger.warning("%s %s -> %s: %s", method, url, response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}
        return (response.json() if response.content else None), None

    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve all users.  The list is empty on failure."""
        data, error = self._request("GET", self.LIST_PATH)
        if error:
            return [], error
        return data or [], None

    def get_user(self, email: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve the user registered under ``email``."""
        return self._request("GET", self.GET_PATH, params={"email": email})

    def create_user(
        self, first_name: str, last_name: str, email: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Create a user.  A duplicate email yields an error with status 409."""
        payload = {"firstName": first_name, "lastName": last_name, "email": email}
        return self._request("POST", self.CREATE_PATH, json_body=payload)

    def update_user(
        self,
        email: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Update the names of an existing user.

        Only the name fields that are not ``None`` are sent; the server
        keeps the stored value for the others.
        """
        payload: Dict[str, Any] = {"email": email}
        if first_name is not None:
            payload["firstName"] = first_name
        if last_name is not None:
            payload["lastName"] = last_name
        return self._request("PUT", self.UPDATE_PATH, json_body=payload)
