"""
Request: one validated, signable Graph API call.

Inputs are checked when the request is built. The access token is fetched,
and the appsecret_proof computed, only when the URL is built by get_url()
or make().
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping, Optional
from urllib.parse import quote, urlencode

from fuss.errors import (
    IncompatibleMethodError,
    InvalidMethodError,
    InvalidPathError,
    RequestAlreadyMadeError,
    ReservedParameterError,
)
from fuss.models.options import AppOptions
from fuss.session import Session
from fuss.transport.http import HttpClient

logger = logging.getLogger(__name__)

METHODS = ("GET", "POST", "DELETE")
BODY_METHODS = ("POST",)
RESERVED_PARAMETERS = ("access_token", "appsecret_proof")

VERSION_PREFIX = re.compile(r"^(v\d+\.\d+)/")


class Request:
    def __init__(
        self,
        session: Session,
        method: str,
        path: str,
        query: Optional[Mapping[str, Any]] = None,
        http: Optional[HttpClient] = None,
    ):
        if method not in METHODS:
            raise InvalidMethodError()
        if "?" in path:
            raise InvalidPathError()
        query = dict(query or {})
        if any(name in query for name in RESERVED_PARAMETERS):
            raise ReservedParameterError()

        path = path.lstrip("/")
        version = None
        match = VERSION_PREFIX.match(path)
        if match:
            version = match.group(1)
            path = path[match.end():]

        self._session = session
        self._method = method
        self._path = path
        self._version = version
        self._query = query
        self._body: Optional[Mapping[str, Any]] = None
        self._http = http
        self._made = False

    @property
    def session(self) -> Session:
        return self._session

    @property
    def method(self) -> str:
        return self._method

    def get_method(self) -> str:
        return self._method

    @property
    def path(self) -> str:
        return self._path

    @property
    def version(self) -> Optional[str]:
        """Version segment given in the path, if any."""
        return self._version

    @property
    def query(self) -> dict[str, Any]:
        return dict(self._query)

    @property
    def body(self) -> Optional[Mapping[str, Any]]:
        return self._body

    def set_body(self, body: Mapping[str, Any]) -> None:
        """Attach a body. Only POST requests carry one; a second call replaces the first."""
        if self._method not in BODY_METHODS:
            raise IncompatibleMethodError(self._method)
        self._body = body

    def get_url(self) -> str:
        return self._build_url()[0]

    def _build_url(self) -> tuple[str, AppOptions]:
        access_token = self._session.get_access_token()
        options = access_token.app.options

        query = dict(self._query)
        query["access_token"] = access_token.plain
        query["appsecret_proof"] = access_token.appsecret_proof()

        version = self._version or options.version
        segments = [options.base_url]
        if version:
            segments.append(version)
        # "#" and other reserved characters must not cut the signed query off the URL.
        segments.extend(quote(segment, safe="") for segment in self._path.split("/"))
        return "/".join(segments) + "?" + urlencode(sorted(query.items())), options

    async def make(self) -> Any:
        """Execute the request once and return the decoded response."""
        if self._made:
            raise RequestAlreadyMadeError()

        url, options = self._build_url()
        self._made = True
        logger.debug("Making %r", self)
        if self._http is not None:
            return await self._http.send(self._method, url, self._body)

        async with HttpClient(timeout=options.timeout) as http:
            return await http.send(self._method, url, self._body)

    def __repr__(self) -> str:
        return f"Request({self._method} {self._version + '/' if self._version else ''}{self._path})"
