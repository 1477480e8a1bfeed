from __future__ import annotations

import enum
from typing import Any


class ShopeeClientError(Exception):
    """Base client error."""


class ConfigurationError(ShopeeClientError):
    """Invalid client configuration or URI, raised before any network round trip."""


class NetworkError(ShopeeClientError):
    """Transport/network layer error (no HTTP response received)."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class ResponseDecodeError(ShopeeClientError):
    """Successful HTTP response whose body is not JSON."""

    def __init__(self, message: str, status_code: int, body: str):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class UnknownNodeError(ShopeeClientError, KeyError):
    """Requested resource node does not exist."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f'Resource node "{self.name}" does not exist'


class ErrorKind(str, enum.Enum):
    BAD_REQUEST = "bad_request"
    AUTH = "auth"
    CLIENT = "client"
    SERVER = "server"
    UNEXPECTED = "unexpected"


def classify_status(status_code: int) -> ErrorKind | None:
    """Map an HTTP status to an error kind; ``None`` means not an error."""
    if status_code == 400:
        return ErrorKind.BAD_REQUEST
    if status_code == 403:
        return ErrorKind.AUTH
    if 400 <= status_code < 500:
        return ErrorKind.CLIENT
    if 500 <= status_code < 600:
        return ErrorKind.SERVER
    if 200 <= status_code < 300:
        return None
    return ErrorKind.UNEXPECTED


class ApiError(ShopeeClientError):
    kind = ErrorKind.UNEXPECTED

    def __init__(
            self,
            status_code: int,
            message: str,
            body: str | None = None,
            payload: Any = None,
            cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.payload = payload
        self.cause = cause

    @property
    def error(self) -> str | None:
        """Upstream ``error`` field, e.g. ``error_auth`` or ``error_param``."""
        if isinstance(self.payload, dict):
            value = self.payload.get("error")
            return str(value) if value else None
        return None

    @property
    def upstream_message(self) -> str | None:
        if isinstance(self.payload, dict):
            value = self.payload.get("msg") or self.payload.get("message")
            return str(value) if value else None
        return None


class BadRequestError(ApiError):
    """HTTP 400: malformed request."""
    kind = ErrorKind.BAD_REQUEST


class AuthError(ApiError):
    """HTTP 403: invalid signature, credentials or expired token."""
    kind = ErrorKind.AUTH


class ClientError(ApiError):
    """Any other HTTP 4xx."""
    kind = ErrorKind.CLIENT


class ServerError(ApiError):
    """HTTP 5xx."""
    kind = ErrorKind.SERVER


_ERRORS_BY_KIND: dict[ErrorKind, type[ApiError]] = {
    ErrorKind.BAD_REQUEST: BadRequestError,
    ErrorKind.AUTH: AuthError,
    ErrorKind.CLIENT: ClientError,
    ErrorKind.SERVER: ServerError,
    ErrorKind.UNEXPECTED: ApiError,
}


def error_for_kind(kind: ErrorKind) -> type[ApiError]:
    return _ERRORS_BY_KIND[kind]
