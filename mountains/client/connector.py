"""
HTTP client for the Mountain Service.

`MountainConnector` mirrors the server routes one method per query.  Every
method returns either a `ConnectorResponse` or ``None``; callers never see a
transport exception.  ``None`` covers unexpected status codes, connection
failures and undecodable bodies alike, and the specific cause is logged at
WARNING on this module's logger.

Usage:
    connector = MountainConnector("http://localhost:8080/")
    result = connector.get_by_country("Nepal")
    if result is not None:
        for mountain in result.mountains:
            ...

Note that ``add_mountains`` returns a response for 409 as well as 200/201;
inspect ``status_code`` to learn whether the batch was stored.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import requests
from pydantic import TypeAdapter, ValidationError

from mountains.config import settings
from mountains.schemas.mountain import Mountain

logger = logging.getLogger(__name__)

_MOUNTAIN_LIST = TypeAdapter(list[Mountain])

_INSERT_STATUSES = frozenset({200, 201, 409})


@dataclass
class ConnectorResponse:
    """Decoded records plus the raw HTTP response they came from."""

    response: Any
    mountains: list[Mountain] = field(default_factory=list)

    @property
    def status_code(self) -> int:
        return self.response.status_code


class MountainConnector:
    """
    Client for the Mountain Service.

    Parameters
    ----------
    base_uri : str, optional
        Server root, e.g. ``"http://localhost:8080/"``.  A trailing slash is
        added when missing.  Defaults to ``settings.client_base_uri``.
    session : optional
        Object with the ``requests.Session`` interface used to send requests.
        A new ``requests.Session`` is created when omitted.
    timeout : float, optional
        Per-request timeout in seconds.  Defaults to ``settings.client_timeout``.
    """

    def __init__(
        self,
        base_uri: Optional[str] = None,
        session: Any = None,
        timeout: Optional[float] = None,
    ) -> None:
        base_uri = base_uri or settings.client_base_uri
        self.base_uri = base_uri if base_uri.endswith("/") else base_uri + "/"
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout if timeout is not None else settings.client_timeout

    # ── Internal helpers ──────────────────────────────────────────────────────

    def _send(self, method: str, path: str, **kwargs) -> Optional[Any]:
        """Issue one request.  Returns the response, or ``None`` on a transport failure."""
        url = self.base_uri + path
        try:
            return self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            return None

    def _query(self, params: Optional[dict] = None) -> Optional[ConnectorResponse]:
        response = self._send("GET", "mountains", params=params)
        if response is None:
            return None
        if response.status_code != 200:
            logger.warning("GET mountains %s returned %d", params, response.status_code)
            return None
        try:
            mountains = _MOUNTAIN_LIST.validate_python(response.json())
        except (ValueError, ValidationError) as exc:
            logger.warning("GET mountains %s returned an undecodable body: %s", params, exc)
            return None
        return ConnectorResponse(response=response, mountains=mountains)

    def _put(self, path: str, payload: Any) -> Optional[ConnectorResponse]:
        response = self._send("PUT", path, json=payload)
        if response is None:
            return None
        if response.status_code != 200:
            logger.warning("PUT %s returned %d", path, response.status_code)
            return None
        return ConnectorResponse(response=response)

    # ── Mutations ─────────────────────────────────────────────────────────────

    def add_mountains(self, mountains: list[Mountain]) -> Optional[ConnectorResponse]:
        """POST a batch.  200, 201 and 409 (duplicate) all return a response."""
        payload = [m.to_json() for m in mountains]
        response = self._send("POST", "", json=payload)
        if response is None:
            return None
        if response.status_code not in _INSERT_STATUSES:
            logger.warning("POST returned %d", response.status_code)
            return None
        return ConnectorResponse(response=response)

    def update_mountain(self, mountain_id: int, mountain: Mountain) -> Optional[ConnectorResponse]:
        """Replace the mountain with *mountain_id*.  ``None`` unless the server answers 200."""
        return self._put(f"mountains/update/{mountain_id}", mountain.to_json())

    def delete_mountain(self, mountain_id: int) -> Optional[ConnectorResponse]:
        """Delete the mountain with *mountain_id*.  ``None`` unless the server answers 200."""
        return self._put("mountains/delete", mountain_id)

    # ── Queries ───────────────────────────────────────────────────────────────

    def get_all(self) -> Optional[ConnectorResponse]:
        return self._query()

    def get_by_country(self, country: str) -> Optional[ConnectorResponse]:
        return self._query({"country": country})

    def get_by_country_and_range(self, country: str, range_: str) -> Optional[ConnectorResponse]:
        return self._query({"country": country, "range": range_})

    def get_by_hemisphere(self, is_northern: bool) -> Optional[ConnectorResponse]:
        return self._query({"north": "true" if is_northern else "false"})

    def get_by_country_altitude(self, country: str, altitude: int) -> Optional[ConnectorResponse]:
        return self._query({"country": country, "alt": altitude})

    def get_by_name(self, country: str, range_: str, name: str) -> Optional[ConnectorResponse]:
        return self._query({"country": country, "range": range_, "name": name})

    def get_by_id(self, mountain_id: int) -> Optional[ConnectorResponse]:
        return self._query({"id": mountain_id})
