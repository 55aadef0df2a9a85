"""
Sessions: anything that can hand out an access token.

``App`` authorizes requests with the app access token, ``User`` with a user
access token issued for an app. Both sign with the app secret.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Protocol, Union, runtime_checkable

from fuss.access_token import AccessToken, TokenType
from fuss.errors import AuthenticationError
from fuss.models.options import AppOptions

logger = logging.getLogger(__name__)


@runtime_checkable
class Session(Protocol):
    def get_access_token(self) -> AccessToken: ...


class App:
    def __init__(
        self,
        app_id: Union[str, int],
        secret: str,
        options: Optional[Union[AppOptions, Mapping[str, Any]]] = None,
    ):
        self._id = str(app_id) if app_id is not None else ""
        self._secret = secret or ""
        if options is None:
            options = AppOptions()
        elif not isinstance(options, AppOptions):
            options = AppOptions(**options)
        self._options = options

    @property
    def id(self) -> str:
        return self._id

    @property
    def secret(self) -> str:
        return self._secret

    @property
    def options(self) -> AppOptions:
        return self._options

    def get_access_token(self) -> AccessToken:
        """App access token, "<app_id>|<secret>"."""
        if not self._id or not self._secret:
            raise AuthenticationError("App ID and secret are required to build an app access token.")
        return AccessToken(self, f"{self._id}|{self._secret}", TokenType.APP)

    def __repr__(self) -> str:
        return f"App(app_id={self._id!r})"


class User:
    def __init__(self, access_token: AccessToken):
        self._access_token = access_token

    @property
    def app(self) -> App:
        return self._access_token.app

    def get_access_token(self) -> AccessToken:
        if self._access_token.is_expired():
            logger.warning("User access token for app %s has expired", self._access_token.app.id)
            raise AuthenticationError("User access token has expired.", code="token_expired")
        return self._access_token
