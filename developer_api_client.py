"""Developer API client.

A small synchronous wrapper around the developer REST endpoints built
on the ``requests`` library.  It is meant for scripts and other
services that need to read or maintain developer records:

* :meth:`DeveloperAPI.list_developers` – return every developer.
* :meth:`DeveloperAPI.get_developer` – fetch one developer by id.
* :meth:`DeveloperAPI.create_developer` – store a new developer.
* :meth:`DeveloperAPI.update_developer` – overwrite a developer.
* :meth:`DeveloperAPI.delete_developer` – remove a developer.

Every method returns a ``(data, error)`` tuple instead of raising.  On
success ``error`` is ``None``; on failure ``error`` is a dictionary
with ``status_code`` and ``message`` keys.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]


class DeveloperAPI:
    """Client for the developer resource."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "",
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            prefix: Path prefix the service mounts its routes under
                (``API_PREFIX`` on the server side).
            timeout: Per-request timeout in seconds.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/") + prefix.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request and decode the JSON response.

        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body
            on success; ``error`` describes the failure otherwise.
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
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("detail") or err_json.get("message") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _payload(name: Optional[str], fav_lang: Optional[str]) -> Dict[str, Optional[str]]:
        return {"name": name, "fav_lang": fav_lang}

    # ------------------------------------------------------------------
    # Developer operations
    # ------------------------------------------------------------------
    def list_developers(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve all developers as ``{"name", "fav_lang"}`` dictionaries."""
        data, error = self._request("GET", "/developers")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def get_developer(self, developer_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve the full record of a single developer."""
        return self._request("GET", f"/developers/{developer_id}")

    def create_developer(
        self, name: Optional[str], fav_lang: Optional[str]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Create a developer.  ``data`` is the server's confirmation message."""
        return self._request("POST", "/developers", json_body=self._payload(name, fav_lang))

    def update_developer(
        self, developer_id: Any, name: Optional[str], fav_lang: Optional[str]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Replace both fields of an existing developer."""
        return self._request(
            "PUT", f"/developers/{developer_id}", json_body=self._payload(name, fav_lang)
        )

    def delete_developer(self, developer_id: Any) -> Tuple[bool, Optional[ApiError]]:
        """Delete a developer.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/developers/{developer_id}")
        return error is None, error
