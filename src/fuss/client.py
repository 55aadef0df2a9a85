"""
AsyncGraph / Graph — thin clients that build and make one Request per call.
"""

import asyncio
from typing import Any, Mapping, Optional

from fuss.request import Request
from fuss.session import Session
from fuss.transport.http import HttpClient


class AsyncGraph:
    """Async Graph API client (primary). Shares one HttpClient across requests."""

    def __init__(self, session: Session, http: Optional[HttpClient] = None):
        self._session = session
        self._owns_http = http is None
        self._http = http

    @property
    def session(self) -> Session:
        return self._session

    @property
    def http(self) -> HttpClient:
        # Created on first use; the token (and with it the app's timeout) is not fetched before then.
        if self._http is None:
            options = self._session.get_access_token().app.options
            self._http = HttpClient(timeout=options.timeout)
        return self._http

    def build(
        self,
        method: str,
        path: str,
        query: Optional[Mapping[str, Any]] = None,
        body: Optional[Mapping[str, Any]] = None,
    ) -> Request:
        request = Request(self._session, method, path, query, http=self.http)
        if body is not None:
            request.set_body(body)
        return request

    async def request(
        self,
        method: str,
        path: str,
        query: Optional[Mapping[str, Any]] = None,
        body: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        return await self.build(method, path, query, body).make()

    async def get(self, path: str, query: Optional[Mapping[str, Any]] = None) -> Any:
        return await self.request("GET", path, query)

    async def post(
        self, path: str, body: Optional[Mapping[str, Any]] = None, query: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        return await self.request("POST", path, query, body)

    async def delete(self, path: str, query: Optional[Mapping[str, Any]] = None) -> Any:
        return await self.request("DELETE", path, query)

    async def close(self) -> None:
        if self._owns_http and self._http is not None:
            await self._http.close()
            self._http = None

    async def __aenter__(self) -> "AsyncGraph":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


class Graph:
    """Sync wrapper around AsyncGraph. Runs the event loop internally."""

    def __init__(self, session: Session, **kwargs: Any):
        self._loop = asyncio.new_event_loop()
        self._async = AsyncGraph(session, **kwargs)

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @property
    def session(self) -> Session:
        return self._async.session

    def request(
        self,
        method: str,
        path: str,
        query: Optional[Mapping[str, Any]] = None,
        body: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        return self._run(self._async.request(method, path, query, body))

    def get(self, path: str, query: Optional[Mapping[str, Any]] = None) -> Any:
        return self._run(self._async.get(path, query))

    def post(
        self, path: str, body: Optional[Mapping[str, Any]] = None, query: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        return self._run(self._async.post(path, body, query))

    def delete(self, path: str, query: Optional[Mapping[str, Any]] = None) -> Any:
        return self._run(self._async.delete(path, query))

    def close(self) -> None:
        self._run(self._async.close())
        self._loop.close()

    def __enter__(self) -> "Graph":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
