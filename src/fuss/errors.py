"""
fuss error types.

Construction-time problems are ``RequestError`` subclasses; failures during
``Request.make()`` are ``AuthenticationError``, ``RemoteApiError`` or
``TransportError``.
"""

from typing import Any, Optional


class FussError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class RequestError(FussError):
    def __init__(self, message: str, code: str = "request_error"):
        super().__init__(code, message)


class InvalidMethodError(RequestError):
    def __init__(self, message: str = "Invalid request method."):
        super().__init__(message, code="invalid_method")


class InvalidPathError(RequestError):
    def __init__(self, message: str = "Path must not have hard-coded query parameters."):
        super().__init__(message, code="invalid_path")


class ReservedParameterError(RequestError):
    def __init__(self, message: str = "Cannot overwrite session parameters."):
        super().__init__(message, code="reserved_parameter")


class IncompatibleMethodError(RequestError):
    def __init__(self, method: str):
        super().__init__(f"{method} request method must not have body.", code="incompatible_method")
        self.method = method


class RequestAlreadyMadeError(RequestError):
    def __init__(self, message: str = "Request has already been made."):
        super().__init__(message, code="request_already_made")


class AuthenticationError(FussError):
    def __init__(self, message: str, code: str = "auth_error"):
        super().__init__(code, message)


class RemoteApiError(FussError):
    """Graph API error envelope, formatted as ``[<type>] (#<code>) <message>``."""

    def __init__(
        self,
        error_type: str,
        error_code: Any,
        message: str,
        status_code: Optional[int] = None,
        error_subcode: Optional[int] = None,
        fbtrace_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__("remote_api_error", f"[{error_type}] (#{error_code}) {message}", details)
        self.error_type = error_type
        self.error_code = error_code
        self.error_message = message
        self.status_code = status_code
        self.error_subcode = error_subcode
        self.fbtrace_id = fbtrace_id


class TransportError(FussError):
    def __init__(self, message: str):
        super().__init__("transport_error", message)
