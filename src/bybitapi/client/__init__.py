"""Client modules for signing, transport and response classification."""

from .auth import sign_legacy, sign_legacy_body, sign_v5
from .classifier import (
    LegacyClassifier,
    LegacyResponseValidator,
    ResponseValidator,
    V5Classifier,
    V5ResponseValidator,
)
from .exceptions import (
    AccessDeniedError,
    AuthenticationRequiredError,
    BusinessError,
    ConfigurationError,
    DecodeError,
    ExchangeAPIError,
    ExchangeError,
    NotFoundError,
    RateLimitedOrServerError,
    RateLimitError,
    RequestFailedError,
    ServerError,
    TransportError,
    UnexpectedResponseError,
)
from .request import ApiGeneration, BodyEncoding, Credentials, PreparedRequest
from .rest import ClientConfig, RestClient
from .testnet import TestnetClient
from .transport import RawResponse, Transport

__all__ = [
    "RestClient",
    "ClientConfig",
    "TestnetClient",
    "Credentials",
    "ApiGeneration",
    "BodyEncoding",
    "PreparedRequest",
    "Transport",
    "RawResponse",
    "LegacyClassifier",
    "V5Classifier",
    "ResponseValidator",
    "LegacyResponseValidator",
    "V5ResponseValidator",
    "sign_legacy",
    "sign_legacy_body",
    "sign_v5",
    "ExchangeError",
    "ConfigurationError",
    "AuthenticationRequiredError",
    "ExchangeAPIError",
    "AccessDeniedError",
    "NotFoundError",
    "RateLimitedOrServerError",
    "RateLimitError",
    "ServerError",
    "DecodeError",
    "BusinessError",
    "RequestFailedError",
    "UnexpectedResponseError",
    "TransportError",
]
