from .client import ShopeeClient
from .config_types import ClientConfig
from .errors import (
    ApiError,
    AuthError,
    BadRequestError,
    ClientError,
    ConfigurationError,
    ErrorKind,
    NetworkError,
    ResponseDecodeError,
    ServerError,
    ShopeeClientError,
    UnknownNodeError,
)
from .parameters import RequestParameters
from .response import ResponseData

__all__ = [
    "ShopeeClient",
    "ClientConfig",
    "RequestParameters",
    "ResponseData",
    "ErrorKind",
    "ShopeeClientError",
    "ConfigurationError",
    "NetworkError",
    "ResponseDecodeError",
    "UnknownNodeError",
    "ApiError",
    "BadRequestError",
    "AuthError",
    "ClientError",
    "ServerError",
]
