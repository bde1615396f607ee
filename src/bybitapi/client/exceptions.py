"""
Exception classes for the Bybit REST client.
"""

import aiohttp

# Network-level failures are surfaced unchanged from the session.
TransportError = aiohttp.ClientError


class ExchangeError(Exception):
    """Base exception for all client errors."""
    pass


class ConfigurationError(ExchangeError):
    """Raised for invalid client setup; detected before any network I/O."""
    pass


class AuthenticationRequiredError(ConfigurationError):
    """Raised when a private endpoint is called without key and secret."""

    def __init__(self, message: str = "this is private endpoint, please set api key and secret"):
        super().__init__(message)


class ExchangeAPIError(ExchangeError):
    """Exception raised when API call fails."""

    def __init__(self, message: str, status_code: int = None, error_code: int = None):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        super().__init__(self.message)


class AccessDeniedError(ExchangeAPIError):
    """HTTP 403."""

    def __init__(self, message: str = "access denied"):
        super().__init__(message, status_code=403)


class NotFoundError(ExchangeAPIError):
    """HTTP 404."""

    def __init__(self, message: str = "path not found"):
        super().__init__(message, status_code=404)


class RateLimitedOrServerError(ExchangeAPIError):
    """HTTP 429 or 5xx. Callers own any backoff."""
    pass


class RateLimitError(RateLimitedOrServerError):
    """Exception raised when API rate limit is exceeded."""
    pass


class ServerError(RateLimitedOrServerError):
    """Exception raised for 5xx responses."""
    pass


class DecodeError(ExchangeAPIError):
    """Response body could not be decoded into the requested destination."""
    pass


class BusinessError(DecodeError):
    """HTTP 2xx with a non-zero return code in the response envelope."""

    def __init__(self, ret_code: int, ret_msg: str, status_code: int = None):
        self.ret_code = ret_code
        self.ret_msg = ret_msg
        super().__init__(
            f"ret_code={ret_code} ret_msg={ret_msg}",
            status_code=status_code,
            error_code=ret_code,
        )


class RequestFailedError(ExchangeAPIError):
    """Any other non-2xx status."""

    def __init__(self, status_code: int, reason: str, body: bytes | None = None):
        self.reason = reason
        self.body = body
        super().__init__(f"request failed: {status_code} {reason}", status_code=status_code)


class UnexpectedResponseError(RequestFailedError):
    """Non-2xx status outside 403/404 on a v5 endpoint."""

    def __init__(self, status_code: int, reason: str):
        self.reason = reason
        self.body = None
        ExchangeAPIError.__init__(self, "unexpected error", status_code=status_code)
