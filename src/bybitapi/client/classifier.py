"""Response classification for legacy and v5 endpoints."""

import json
from typing import Any, Protocol, TypeVar

from ..models.response import RateLimitHeaders
from ..utils.logger import DebugLogger
from .exceptions import (
    AccessDeniedError,
    BusinessError,
    DecodeError,
    NotFoundError,
    RateLimitError,
    RequestFailedError,
    ServerError,
    UnexpectedResponseError,
)
from .request import ApiGeneration
from .transport import RawResponse

T = TypeVar("T")


class ResponseValidator(Protocol):
    """Inspects a 2xx body before it is decoded."""

    def validate(self, body: bytes) -> None:
        """Raise DecodeError (or BusinessError) if the body is not a success."""
        ...


def _ret_code(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"invalid return code: {value!r}") from e


def _load_envelope(body: bytes) -> dict[str, Any]:
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"malformed response body: {e}") from e
    if not isinstance(data, dict):
        raise DecodeError(f"response envelope is not an object: {type(data).__name__}")
    return data


class LegacyResponseValidator:
    """Checks ret_code / ret_msg (retCode / retMsg on derivatives v3)."""

    def validate(self, body: bytes) -> None:
        data = _load_envelope(body)

        if "ret_code" in data:
            ret_code, ret_msg = data.get("ret_code"), data.get("ret_msg", "")
        else:
            ret_code, ret_msg = data.get("retCode"), data.get("retMsg", "")

        if ret_code is None:
            raise DecodeError("response envelope has no return code")
        code = _ret_code(ret_code)
        if code != 0:
            raise BusinessError(code, str(ret_msg))


class V5ResponseValidator:
    """Checks retCode / retMsg."""

    def validate(self, body: bytes) -> None:
        data = _load_envelope(body)

        if "retCode" not in data:
            raise DecodeError("response envelope has no retCode")
        code = _ret_code(data["retCode"])
        if code != 0:
            raise BusinessError(code, str(data.get("retMsg", "")))


def decode_into(data: dict[str, Any], destination: type[T] | None) -> T:
    """
    Build the destination type from a decoded envelope.

    ``dict`` (or None) returns the mapping unchanged; any other type must
    provide a ``from_api(data)`` classmethod.
    """
    if destination is None or destination is dict:
        return data  # type: ignore[return-value]

    from_api = getattr(destination, "from_api", None)
    if from_api is None:
        raise TypeError(f"{destination!r} has no from_api classmethod")

    try:
        return from_api(data)
    except (KeyError, TypeError, ValueError) as e:
        raise DecodeError(
            f"cannot decode response into {destination.__name__}: {e!r}"
        ) from e


class LegacyClassifier:
    """Status handling for legacy endpoints, which split 429 from 5xx."""

    generation = ApiGeneration.LEGACY

    def __init__(self, validator: ResponseValidator, debug_logger: DebugLogger | None = None):
        self.validator = validator
        self.debug_logger = debug_logger

    def classify(self, response: RawResponse, destination: type[T] | None = dict) -> T:
        """
        Turn a raw response into the destination or raise.

        Raises:
            AccessDeniedError: 403
            NotFoundError: 404
            RateLimitError: 429
            ServerError: 5xx
            RequestFailedError: Any other non-2xx status
            DecodeError: Malformed body or non-zero return code
        """
        status = response.status

        if 200 <= status <= 299:
            return self._decode(response, destination)
        if status == 403:
            self._log_error("Error: %d", status)
            raise AccessDeniedError()
        if status == 404:
            self._log_error("Error: %d", status)
            raise NotFoundError()
        return self._fail(response)

    def _decode(self, response: RawResponse, destination: type[T] | None) -> T:
        try:
            self.validator.validate(response.body)
        except DecodeError as e:
            if isinstance(e, BusinessError):
                e.status_code = response.status
            self._log_error("Error: %s", e)
            raise

        data = _load_envelope(response.body)
        return decode_into(self._augment(data, response), destination)

    def _augment(self, data: dict[str, Any], response: RawResponse) -> dict[str, Any]:
        return data

    def _fail(self, response: RawResponse) -> Any:
        status = response.status
        self._log_debug("Body: %s", response.body.decode("utf-8", errors="replace"))

        if status == 429:
            self._log_error("Error: %d", status)
            raise RateLimitError("rate limit exceeded", status_code=status)
        if status >= 500:
            self._log_error("Error: %d", status)
            raise ServerError(f"server error: {status} {response.reason}", status_code=status)

        self._log_error("Error: %d %s", status, response.reason)
        raise RequestFailedError(
            status,
            response.reason,
            body=response.body if self.debug_logger else None,
        )

    def _log_debug(self, msg: str, *args: Any) -> None:
        if self.debug_logger:
            self.debug_logger.debug(msg, *args)

    def _log_error(self, msg: str, *args: Any) -> None:
        if self.debug_logger:
            self.debug_logger.error(msg, *args)


class V5Classifier(LegacyClassifier):
    """Status handling for v5 endpoints; merges rate-limit headers on success."""

    generation = ApiGeneration.V5

    def _augment(self, data: dict[str, Any], response: RawResponse) -> dict[str, Any]:
        limits = RateLimitHeaders.from_headers(response.headers)
        self._log_debug("Rate limits: %s", limits)
        return {**data, **limits.to_dict()}

    def _fail(self, response: RawResponse) -> Any:
        self._log_debug("Body: %s", response.body.decode("utf-8", errors="replace"))
        self._log_error("Error: %d %s", response.status, response.reason)
        raise UnexpectedResponseError(response.status, response.reason)


def classifier_for(
    generation: ApiGeneration,
    validator: ResponseValidator,
    debug_logger: DebugLogger | None = None,
) -> LegacyClassifier:
    """Pick the classifier strategy of an API generation."""
    if generation is ApiGeneration.V5:
        return V5Classifier(validator, debug_logger)
    return LegacyClassifier(validator, debug_logger)
