"""
Adapter: Airtable table client.

Thin async handle bound to one Airtable table, speaking its REST API
through httpx. Supplies create / find / all / update / destroy keyed by
record id and turns every failure into a StorageError with an explicit
kind, so callers never inspect status codes or message text.
"""

import logging
from typing import Any, Optional, Sequence
from urllib.parse import quote

import httpx

from app.domain.catalog.errors import StorageError, StorageErrorKind

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.airtable.com/v0"
DEFAULT_TIMEOUT_SECONDS = 20.0
MAX_PAGE_SIZE = 100

_KIND_BY_STATUS = {
    401: StorageErrorKind.AUTH,
    403: StorageErrorKind.AUTH,
    404: StorageErrorKind.NOT_FOUND,
    429: StorageErrorKind.RATE_LIMITED,
}


def _error_from_response(response: httpx.Response) -> StorageError:
    """Build a StorageError from an Airtable error response.

    Airtable answers either ``{"error": {"type": ..., "message": ...}}``
    or ``{"error": "TYPE"}``.
    """
    try:
        body = response.json()
    except ValueError:
        body = {"error": response.text}

    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict):
        message = error.get("message") or error.get("type")
    else:
        message = error
    kind = _KIND_BY_STATUS.get(response.status_code, StorageErrorKind.BACKEND)
    return StorageError(
        kind=kind,
        message=str(message or response.reason_phrase or "Airtable request failed"),
        status_hint=response.status_code,
        details=error,
    )


class AirtableTable:
    """Client for a single Airtable table.

    Opens one httpx.AsyncClient per call; there is no retry logic.

    Args:
        api_key: Personal access token for the Airtable API.
        base_id: Id of the base holding the table.
        table_name: Table name or id.
        api_url: REST root, overridable for proxies and tests.
        timeout: Per-call timeout in seconds.
        transport: Optional httpx transport (tests use httpx.MockTransport).
    """

    def __init__(
        self,
        api_key: str,
        base_id: str,
        table_name: str,
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._table_url = (
            f"{api_url.rstrip('/')}/{quote(base_id, safe='')}/{quote(table_name, safe='')}"
        )
        self._headers = {
            "Authorization": f"Bearer {api_key}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        self._timeout = timeout
        self._transport = transport

    def _record_url(self, record_id: str) -> str:
        return f"{self._table_url}/{quote(record_id, safe='')}"

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            async with httpx.AsyncClient(
                headers=self._headers,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(method, url, **kwargs)
        except httpx.TransportError as exc:
            logger.error("Airtable %s %s unreachable: %s", method, url, exc)
            raise StorageError(
                kind=StorageErrorKind.UNREACHABLE,
                message=f"Airtable unreachable: {exc}",
            ) from exc

        if response.status_code >= 400:
            raise _error_from_response(response)
        return response.json()

    async def create(self, fields: dict[str, Any], typecast: bool = True) -> dict:
        """Create one record and return it (``{"id", "createdTime", "fields"}``)."""
        body = await self._request(
            "POST",
            self._table_url,
            json={"records": [{"fields": fields}], "typecast": typecast},
        )
        records = body.get("records") if isinstance(body, dict) else None
        return records[0] if records else body

    async def find(self, record_id: str) -> dict:
        """Return a single record by id."""
        return await self._request("GET", self._record_url(record_id))

    async def all(
        self,
        sort: Sequence[tuple[str, str]] = (),
        page_size: int = MAX_PAGE_SIZE,
    ) -> list[dict]:
        """Return every record of the table, following pagination.

        Args:
            sort: ``(field, direction)`` pairs, direction "asc" or "desc".
            page_size: Records per page (Airtable caps this at 100).
        """
        params: list[tuple[str, Any]] = [("pageSize", min(page_size, MAX_PAGE_SIZE))]
        for index, (field_name, direction) in enumerate(sort):
            params.append((f"sort[{index}][field]", field_name))
            params.append((f"sort[{index}][direction]", direction))

        records: list[dict] = []
        offset: Optional[str] = None
        while True:
            page_params = params + ([("offset", offset)] if offset else [])
            body = await self._request("GET", self._table_url, params=page_params)
            records.extend(body.get("records", []))
            offset = body.get("offset")
            if not offset:
                return records

    async def update(
        self, record_id: str, fields: dict[str, Any], typecast: bool = False
    ) -> dict:
        """Merge the given fields into a record and return the full record."""
        payload: dict[str, Any] = {"fields": fields}
        if typecast:
            payload["typecast"] = True
        return await self._request("PATCH", self._record_url(record_id), json=payload)

    async def destroy(self, record_id: str) -> dict:
        """Delete a record. Returns ``{"id", "deleted"}``."""
        return await self._request("DELETE", self._record_url(record_id))
