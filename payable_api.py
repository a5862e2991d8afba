"""Payable API client.

Thin wrapper around the ``/integrations/payable`` endpoints using the
``requests`` library.  Every call sends ``Authorization: Bearer
<token>`` where the token is passed in by the caller, so a refreshed
token is used as soon as it is available.  ``read_stored_token``
loads the current token from the client's JSON storage file (key
``token``); call it again whenever a fresh credential is needed.

The client does not inspect status codes: every completed response is
parsed as JSON and handed back, error bodies included.  Only
:meth:`PayableApi.delete_payable` swallows failures; it logs them and
returns ``None``.

Example::

    api = PayableApi()
    token = read_stored_token()
    api.create_payable({"id": "p1", "value": 10.5,
                        "emission_date": "2024-01-31", "assignor": "a1"},
                       token=token)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import requests

from integrations_api.app.core.config import settings

logger = logging.getLogger(__name__)

PAYABLE_PATH = "/integrations/payable"
TOKEN_STORAGE_KEY = "token"


def read_stored_token(path: Optional[str] = None) -> Optional[str]:
    """Return the token stored under ``token`` in the JSON storage file.

    Args:
        path: Storage file location.  Defaults to ``settings.token_file``.
    Returns:
        The token, or ``None`` when the file or the key is missing.
    """
    storage = Path(path or settings.token_file)
    if not storage.exists():
        return None
    try:
        with storage.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Could not read token storage %s: %s", storage, exc)
        return None
    if not isinstance(data, dict):
        return None
    return data.get(TOKEN_STORAGE_KEY)


class PayableApi:
    """Client for the payable resource of the integrations API."""

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Server root, e.g. ``http://localhost:3000``.
                Defaults to ``settings.client_base_url``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = (base_url or settings.client_base_url).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _url(self, payable_id: Optional[str] = None) -> str:
        url = f"{self.base_url}{PAYABLE_PATH}"
        if payable_id is not None:
            url = f"{url}/{payable_id}"
        return url

    @staticmethod
    def _headers(token: Optional[str]) -> Dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    def _send(
        self,
        method: str,
        url: str,
        *,
        token: Optional[str],
        json_body: Any | None = None,
    ) -> requests.Response:
        logger.debug("Sending %s request to %s", method, url)
        return self.session.request(
            method=method,
            url=url,
            json=json_body,
            headers=self._headers(token),
            timeout=self.timeout,
        )

    # ------------------------------------------------------------------
    # Payable operations
    # ------------------------------------------------------------------
    def create_payable(self, data: Dict[str, Any], *, token: Optional[str]) -> Any:
        """POST a new payable and return the parsed response body."""
        response = self._send("POST", self._url(), token=token, json_body=data)
        return response.json()

    def list_payables(self, *, token: Optional[str]) -> Any:
        """Return the parsed body of ``GET /integrations/payable``."""
        response = self._send("GET", self._url(), token=token)
        return response.json()

    def get_payable(self, payable_id: str, *, token: Optional[str]) -> Any:
        response = self._send("GET", self._url(payable_id), token=token)
        return response.json()

    def update_payable(self, payable_id: str, data: Dict[str, Any], *, token: Optional[str]) -> Any:
        """PUT replacement data for a payable and return the parsed body."""
        response = self._send("PUT", self._url(payable_id), token=token, json_body=data)
        return response.json()

    def delete_payable(self, payable_id: str, *, token: Optional[str]) -> None:
        """Delete a payable.  Failures are logged and never raised."""
        try:
            self._send("DELETE", self._url(payable_id), token=token)
        except requests.RequestException as exc:
            logger.error("Deleting payable %s failed: %s", payable_id, exc)
