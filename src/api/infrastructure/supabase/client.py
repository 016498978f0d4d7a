"""Async HTTP client for the hosted database (PostgREST) and auth (GoTrue) APIs.

Only the handful of calls the edge needs are implemented: RPC invocation,
filtered table reads, the current-user lookup, and the refresh-token grant.
Every request carries the project ``apikey`` and a bearer token (the
visitor's access token when available, the anon key otherwise) so the
database's row-level security applies exactly as for the browser client.
"""

from __future__ import annotations

from typing import Any

import httpx

from infrastructure.settings import SupabaseSettings
from infrastructure.supabase.exceptions import (
    SupabaseAuthError,
    SupabaseRequestError,
)
from infrastructure.supabase.observability import (
    DefaultSupabaseClientProbe,
    SupabaseClientProbe,
)


class SupabaseClient:
    """Thin async wrapper over the provider's REST endpoints.

    When ``http_client`` is given it is reused across requests (and owned
    by the caller); otherwise a short-lived client is opened per call.
    """

    def __init__(
        self,
        settings: SupabaseSettings,
        http_client: httpx.AsyncClient | None = None,
        probe: SupabaseClientProbe | None = None,
    ):
        self._base_url = settings.base_url
        self._anon_key = settings.anon_key.get_secret_value()
        self._timeout = settings.timeout_seconds
        self._http_client = http_client
        self._probe = probe or DefaultSupabaseClientProbe()

    async def rpc(
        self,
        function: str,
        params: dict[str, Any],
        access_token: str | None = None,
    ) -> Any:
        """Call a database function and return its decoded JSON result."""
        path = f"/rest/v1/rpc/{function}"
        response = await self._request("POST", path, json=params, access_token=access_token)
        return self._json(response, path)

    async def select(
        self,
        table: str,
        columns: str,
        filters: dict[str, str],
        access_token: str | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """Read rows from a table with equality filters.

        Args:
            table: Table (or view) name.
            columns: PostgREST select expression, embeds included.
            filters: Column to value map, each applied as ``eq.``.
            access_token: Visitor access token for row-level security.
            limit: Optional maximum number of rows.

        Returns:
            The matching rows as dictionaries.
        """
        params = {"select": columns}
        params.update({column: f"eq.{value}" for column, value in filters.items()})
        if limit is not None:
            params["limit"] = str(limit)

        path = f"/rest/v1/{table}"
        response = await self._request("GET", path, params=params, access_token=access_token)
        rows = self._json(response, path)
        if not isinstance(rows, list):
            raise SupabaseRequestError(
                f"Unexpected response shape from {table}", response.status_code
            )
        return rows

    async def get_user(self, access_token: str) -> dict[str, Any]:
        """Return the user owning ``access_token``.

        Raises:
            SupabaseAuthError: If the token is expired, revoked or invalid.
            SupabaseRequestError: On transport or server failure.
        """
        response = await self._request("GET", "/auth/v1/user", access_token=access_token)
        return self._json(response, "/auth/v1/user")

    async def refresh_session(self, refresh_token: str) -> dict[str, Any]:
        """Exchange a refresh token for a new session.

        Returns:
            The new session (access_token, refresh_token, expires_at, user).
        """
        response = await self._request(
            "POST",
            "/auth/v1/token",
            params={"grant_type": "refresh_token"},
            json={"refresh_token": refresh_token},
        )
        return self._json(response, "/auth/v1/token")

    def _json(self, response: httpx.Response, path: str) -> Any:
        """Decode a successful response body.

        Raises:
            SupabaseRequestError: If the body is not JSON, as when a proxy
                answers with an HTML page.
        """
        try:
            return response.json()
        except ValueError as e:
            self._probe.response_malformed(path=path, status_code=response.status_code)
            raise SupabaseRequestError(
                f"Malformed JSON from {path}", response.status_code
            ) from e

    def _headers(self, access_token: str | None) -> dict[str, str]:
        return {
            "apikey": self._anon_key,
            "Authorization": f"Bearer {access_token or self._anon_key}",
            "Accept": "application/json",
        }

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        json: Any = None,
        access_token: str | None = None,
    ) -> httpx.Response:
        url = f"{self._base_url}{path}"
        headers = self._headers(access_token)

        try:
            if self._http_client is not None:
                response = await self._http_client.request(
                    method,
                    url,
                    params=params,
                    json=json,
                    headers=headers,
                    timeout=self._timeout,
                )
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.request(
                        method, url, params=params, json=json, headers=headers
                    )
        except httpx.HTTPError as e:
            self._probe.request_failed(method=method, path=path, error=e)
            raise SupabaseRequestError(f"{method} {path} failed: {e}") from e

        if response.status_code in (401, 403):
            message = _error_message(response)
            self._probe.request_rejected(
                method=method,
                path=path,
                status_code=response.status_code,
                message=message,
            )
            raise SupabaseAuthError(message, response.status_code)

        if response.is_error:
            message = _error_message(response)
            self._probe.request_rejected(
                method=method,
                path=path,
                status_code=response.status_code,
                message=message,
            )
            raise SupabaseRequestError(message, response.status_code)

        self._probe.request_completed(
            method=method, path=path, status_code=response.status_code
        )
        return response


def _error_message(response: httpx.Response) -> str:
    """Extract the provider's error message, falling back to the status line."""
    try:
        body = response.json()
    except ValueError:
        return f"HTTP {response.status_code}"

    if isinstance(body, dict):
        for key in ("message", "msg", "error_description", "error"):
            value = body.get(key)
            if value:
                return str(value)
    return f"HTTP {response.status_code}"
