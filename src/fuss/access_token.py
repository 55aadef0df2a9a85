"""
Access tokens and the appsecret_proof derived from them.
"""

from __future__ import annotations

import hashlib
import hmac
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from fuss.session import App


class TokenType:
    APP = "app"
    USER = "user"


class AccessToken:
    """A token string issued for an app, tagged as an app or user token."""

    def __init__(
        self,
        app: App,
        token: str,
        type: str = TokenType.USER,
        expires_at: Optional[datetime] = None,
    ):
        if not token:
            raise ValueError("Access token must not be empty.")
        if type not in (TokenType.APP, TokenType.USER):
            raise ValueError(f"Unknown access token type: {type!r}")
        self._app = app
        self._token = token
        self._type = type
        self._expires_at = expires_at

    @property
    def app(self) -> App:
        return self._app

    @property
    def plain(self) -> str:
        return self._token

    def get_plain(self) -> str:
        return self._token

    @property
    def type(self) -> str:
        return self._type

    @property
    def expires_at(self) -> Optional[datetime]:
        return self._expires_at

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        if self._expires_at is None:
            return False
        return (now or datetime.now(timezone.utc)) >= self._expires_at

    def appsecret_proof(self) -> str:
        """HMAC-SHA256 of the token keyed by the app secret, lowercase hex."""
        return hmac.new(
            self._app.secret.encode("utf-8"),
            self._token.encode("utf-8"),
            hashlib.sha256,
        ).hexdigest()

    def __repr__(self) -> str:
        return f"AccessToken(type={self._type!r}, app_id={self._app.id!r})"
