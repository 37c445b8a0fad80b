# edumanage/client/query_client.py
"""Keyed query cache for reading the EduManage API.

Every GET is identified by a cache key built from its path and query
parameters. A fresh cached value is returned without touching the network,
and concurrent fetches of the same key share one in-flight request.
"""
import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import urlencode

import httpx

logger = logging.getLogger(__name__)

UNAUTHORIZED_THROW = "throw"
UNAUTHORIZED_RETURN_NULL = "return_null"


class ApiRequestError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, text: str):
        self.status_code = status_code
        self.text = text
        super().__init__(f"{status_code}: {text}")


@dataclass
class QueryState:
    data: Any = None
    error: Optional[BaseException] = None
    is_loading: bool = False
    updated_at: Optional[float] = None


def _param_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query_key(url: str, params: Optional[Dict[str, Any]] = None) -> str:
    """Path plus its non-null query parameters, in a stable order."""
    if not params:
        return url
    query = urlencode(sorted((k, _param_str(v)) for k, v in params.items() if v is not None))
    return f"{url}?{query}" if query else url


class QueryClient:
    def __init__(
        self,
        base_url: str = "",
        *,
        token: Optional[str] = None,
        stale_time: Optional[float] = None,
        on_unauthorized: str = UNAUTHORIZED_THROW,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = 5.0,
    ):
        # stale_time None means cached data never goes stale on its own
        self.stale_time = stale_time
        self.token = token
        self.on_unauthorized = on_unauthorized
        self._http = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)
        self._states: Dict[str, QueryState] = {}
        self._in_flight: Dict[str, asyncio.Task] = {}

    async def __aenter__(self) -> "QueryClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def aclose(self):
        await self._http.aclose()

    def _headers(self) -> Dict[str, str]:
        headers = {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _is_fresh(self, state: Optional[QueryState]) -> bool:
        if state is None or state.updated_at is None:
            return False
        if self.stale_time is None:
            return True
        return time.monotonic() - state.updated_at < self.stale_time

    async def fetch_query(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Return cached data for the key, fetching it if missing or stale."""
        key = build_query_key(url, params)
        state = self._states.get(key)
        if self._is_fresh(state):
            return state.data

        task = self._in_flight.get(key)
        if task is None:
            state = self._states.setdefault(key, QueryState())
            state.is_loading = True
            task = asyncio.ensure_future(self._run_query(key, state))
            self._in_flight[key] = task
        else:
            logger.debug(f"Joining in-flight request for {key}")
        # One caller being cancelled must not cancel the shared request
        return await asyncio.shield(task)

    async def _run_query(self, key: str, state: QueryState) -> Any:
        try:
            response = await self._http.get(key, headers=self._headers())
            if response.status_code == 401 and self.on_unauthorized == UNAUTHORIZED_RETURN_NULL:
                data = None
            else:
                await raise_if_not_ok(response)
                data = response.json()
        except Exception as exc:
            state.error = exc
            logger.warning(f"Query {key} failed: {exc}")
            raise
        else:
            state.data = data
            state.error = None
            state.updated_at = time.monotonic()
            return data
        finally:
            state.is_loading = False
            self._in_flight.pop(key, None)

    def get_query_state(self, url: str, params: Optional[Dict[str, Any]] = None) -> QueryState:
        return self._states.get(build_query_key(url, params)) or QueryState()

    def get_query_data(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.get_query_state(url, params).data

    def set_query_data(self, url: str, data: Any, params: Optional[Dict[str, Any]] = None):
        state = self._states.setdefault(build_query_key(url, params), QueryState())
        state.data = data
        state.error = None
        state.updated_at = time.monotonic()

    def invalidate_queries(self, prefix: Optional[str] = None) -> int:
        """Drop cached entries whose key starts with ``prefix`` (all when None)."""
        stale = [
            key for key in self._states
            if (prefix is None or key.startswith(prefix)) and key not in self._in_flight
        ]
        for key in stale:
            del self._states[key]
        return len(stale)

    def clear(self):
        self.invalidate_queries()

    async def api_request(self, url: str, method: str = "GET", body: Any = None) -> Any:
        """Uncached request, used for writes."""
        headers = self._headers()
        if body is not None:
            headers["Content-Type"] = "application/json"
        content = body if isinstance(body, str) else None
        response = await self._http.request(
            method,
            url,
            headers=headers,
            content=content,
            json=body if content is None and body is not None else None,
        )
        await raise_if_not_ok(response)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text


async def raise_if_not_ok(response: httpx.Response):
    if response.is_success:
        return
    await response.aread()
    text = response.text or response.reason_phrase
    raise ApiRequestError(response.status_code, text)
