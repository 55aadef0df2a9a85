"""
HTTP transport for signed Graph API requests.

Takes a fully-formed URL (access_token and appsecret_proof already in the
query) plus an optional body, and returns the decoded JSON response.
"""

import json
import logging
from typing import Any, Mapping, Optional

import httpx
from pydantic import ValidationError

from fuss._version import __version__
from fuss.errors import RemoteApiError, TransportError
from fuss.models.error import GraphErrorEnvelope

logger = logging.getLogger(__name__)

USER_AGENT = f"fuss-python/{__version__}"


def encode_body(body: Mapping[str, Any]) -> dict[str, str]:
    """Flatten a request body into form fields. Lists and mappings go as JSON."""
    fields: dict[str, str] = {}
    for key, value in body.items():
        if isinstance(value, str):
            fields[key] = value
        elif isinstance(value, bool):
            fields[key] = "true" if value else "false"
        elif isinstance(value, (int, float)):
            fields[key] = str(value)
        elif value is None:
            fields[key] = ""
        else:
            fields[key] = json.dumps(value)
    return fields


def _redact(url: str) -> str:
    return url.split("?", 1)[0]


class HttpClient:
    def __init__(self, timeout: float = 30.0, client: Optional[httpx.AsyncClient] = None):
        self._client = client or httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
            timeout=timeout,
        )

    async def send(self, method: str, url: str, body: Optional[Mapping[str, Any]] = None) -> Any:
        logger.debug("%s %s", method, _redact(url))
        data = encode_body(body) if body is not None else None
        try:
            resp = await self._client.request(method, url, data=data)
        except httpx.RequestError as e:
            logger.warning("%s %s failed: %s", method, _redact(url), e)
            raise TransportError(f"{type(e).__name__}: {e}") from e
        logger.debug("%s %s -> HTTP %d", method, _redact(url), resp.status_code)
        return self._decode(resp)

    @staticmethod
    def _decode(resp: httpx.Response) -> Any:
        try:
            json_data = resp.json()
        except ValueError:
            json_data = None
            if resp.status_code < 400:
                raise TransportError(f"Invalid JSON response (HTTP {resp.status_code}): {resp.text[:200]}")

        if isinstance(json_data, dict) and "error" in json_data:
            try:
                envelope = GraphErrorEnvelope.model_validate(json_data)
            except ValidationError:
                # An "error" key is a failure whatever its shape or the status.
                logger.warning("Graph API returned a malformed error (HTTP %d)", resp.status_code)
                raise RemoteApiError(
                    "UnknownError", resp.status_code, str(json_data["error"])[:200], status_code=resp.status_code,
                )
            err = envelope.error
            logger.warning("Graph API error [%s] (#%s) %s", err.type, err.code, err.message)
            raise RemoteApiError(
                err.type,
                err.code,
                err.message,
                status_code=resp.status_code,
                error_subcode=err.error_subcode,
                fbtrace_id=err.fbtrace_id,
                details=json_data["error"],
            )

        if resp.status_code >= 400:
            logger.warning("Graph API returned HTTP %d without an error envelope", resp.status_code)
            raise RemoteApiError("HttpError", resp.status_code, resp.text[:200], status_code=resp.status_code)
        return json_data

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
