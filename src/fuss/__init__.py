"""
fuss — Facebook Graph API request builder and signer.

Builds Graph API requests for an app or user session, signs them with the
access token and appsecret_proof, and makes them over HTTP.
"""

from fuss.access_token import AccessToken, TokenType
from fuss.session import Session, App, User
from fuss.request import Request
from fuss.client import AsyncGraph, Graph
from fuss.models.options import AppOptions
from fuss.errors import (
    FussError,
    RequestError,
    InvalidMethodError,
    InvalidPathError,
    ReservedParameterError,
    IncompatibleMethodError,
    RequestAlreadyMadeError,
    AuthenticationError,
    RemoteApiError,
    TransportError,
)

from fuss._version import __version__
__all__ = [
    "AccessToken",
    "TokenType",
    "Session",
    "App",
    "User",
    "Request",
    "AsyncGraph",
    "Graph",
    "AppOptions",
    "FussError",
    "RequestError",
    "InvalidMethodError",
    "InvalidPathError",
    "ReservedParameterError",
    "IncompatibleMethodError",
    "RequestAlreadyMadeError",
    "AuthenticationError",
    "RemoteApiError",
    "TransportError",
]
