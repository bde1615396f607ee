"""Request building and signing for both API generations."""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from urllib.parse import urlencode

from ..utils.timing import get_timestamp_ms
from .auth import get_v5_auth_headers, sign_legacy, sign_legacy_body, sign_v5
from .exceptions import AuthenticationRequiredError

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


class ApiGeneration(str, Enum):
    """Signing and classification scheme of an endpoint family."""

    LEGACY = "legacy"
    V5 = "v5"


class BodyEncoding(str, Enum):
    """Body encoding for private POST requests."""

    JSON = "json"
    FORM = "form"


@dataclass(frozen=True)
class Credentials:
    """API key pair."""

    key: str
    secret: str = field(repr=False)

    @property
    def is_complete(self) -> bool:
        return bool(self.key) and bool(self.secret)


@dataclass
class PreparedRequest:
    """A fully addressed request, signed if private. Do not mutate after building."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None
    generation: ApiGeneration = ApiGeneration.LEGACY


def generation_for_path(path: str) -> ApiGeneration:
    """Unified trading endpoints live under /v5/; everything else is legacy."""
    return ApiGeneration.V5 if path.startswith("/v5/") else ApiGeneration.LEGACY


def _param_to_str(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_param_to_str(item) for item in value)
    return str(value)


def normalize_params(params: Mapping[str, Any] | None) -> dict[str, str]:
    """
    Convert caller parameters to string values.

    None values are omitted, lists become comma-joined strings and booleans
    become "true"/"false".
    """
    if not params:
        return {}
    return {key: _param_to_str(value) for key, value in params.items() if value is not None}


def encode_query(params: Mapping[str, str]) -> str:
    """URL-encode parameters sorted by key."""
    return urlencode(sorted(params.items()))


def _join_url(base_url: str, path: str, query: str = "") -> str:
    url = f"{base_url.rstrip('/')}{path}"
    if query:
        url = f"{url}?{query}"
    return url


def _require_auth(credentials: Credentials | None) -> Credentials:
    if credentials is None or not credentials.is_complete:
        raise AuthenticationRequiredError()
    return credentials


def _populate_signature(
    params: Mapping[str, Any] | None, credentials: Credentials, timestamp: int | None
) -> dict[str, str]:
    signed = normalize_params(params)
    if timestamp is None:
        timestamp = get_timestamp_ms()

    signed["api_key"] = credentials.key
    signed["timestamp"] = str(timestamp)
    signed["sign"] = sign_legacy(signed, credentials.secret)
    return signed


def _normalize_body(decoded: dict[str, Any]) -> dict[str, Any]:
    # Signed text and sent JSON must render every value identically
    body: dict[str, Any] = {}
    for key, value in decoded.items():
        if value is None:
            continue
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        body[key] = value
    return body


def build_public_request(
    base_url: str,
    path: str,
    params: Mapping[str, Any] | None = None,
    generation: ApiGeneration | None = None,
) -> PreparedRequest:
    """
    Build an unsigned GET request.

    Args:
        base_url: API host
        path: Request path (e.g., "/spot/v1/symbols")
        params: Query parameters
        generation: Classification scheme (derived from path if None)

    Returns:
        PreparedRequest
    """
    return PreparedRequest(
        method="GET",
        url=_join_url(base_url, path, encode_query(normalize_params(params))),
        generation=generation or generation_for_path(path),
    )


def build_legacy_request(
    base_url: str,
    path: str,
    method: str,
    params: Mapping[str, Any] | None,
    credentials: Credentials | None,
    timestamp: int | None = None,
) -> PreparedRequest:
    """
    Build a legacy signed request with api_key, timestamp and sign injected.

    GET and DELETE carry the parameters in the query string; POST sends them
    as a form-encoded body.

    Args:
        base_url: API host
        path: Request path
        method: HTTP method (GET, POST, DELETE)
        params: Caller parameters
        credentials: API key pair
        timestamp: Milliseconds since epoch (generated if None)

    Returns:
        PreparedRequest

    Raises:
        AuthenticationRequiredError: If credentials are missing
    """
    credentials = _require_auth(credentials)
    method = method.upper()
    encoded = encode_query(_populate_signature(params, credentials, timestamp))

    if method == "POST":
        return PreparedRequest(
            method=method,
            url=_join_url(base_url, path),
            headers={"Content-Type": FORM_CONTENT_TYPE},
            body=encoded.encode("utf-8"),
            generation=ApiGeneration.LEGACY,
        )

    return PreparedRequest(
        method=method,
        url=_join_url(base_url, path, encoded),
        generation=ApiGeneration.LEGACY,
    )


def build_legacy_json_request(
    base_url: str,
    path: str,
    body: bytes | str,
    credentials: Credentials | None,
    timestamp: int | None = None,
) -> PreparedRequest:
    """
    Build a legacy signed JSON POST.

    The reserved keys are injected into the top-level object and the
    signature covers the augmented object. Top-level nulls are dropped and
    integral floats are sent as integers, so ``8083.0`` travels as ``8083``.

    Raises:
        AuthenticationRequiredError: If credentials are missing
        ValueError: If body is not a JSON object
    """
    credentials = _require_auth(credentials)

    decoded = json.loads(body or b"{}")
    if not isinstance(decoded, dict):
        raise ValueError(f"legacy JSON body must be an object, got {type(decoded).__name__}")
    decoded = _normalize_body(decoded)

    if timestamp is None:
        timestamp = get_timestamp_ms()

    decoded["api_key"] = credentials.key
    decoded["timestamp"] = str(timestamp)
    decoded["sign"] = sign_legacy_body(decoded, credentials.secret)

    return PreparedRequest(
        method="POST",
        url=_join_url(base_url, path),
        headers={"Content-Type": JSON_CONTENT_TYPE},
        body=json.dumps(decoded).encode("utf-8"),
        generation=ApiGeneration.LEGACY,
    )


def build_v5_request(
    base_url: str,
    path: str,
    method: str,
    credentials: Credentials | None,
    params: Mapping[str, Any] | None = None,
    body: bytes | None = None,
    timestamp: int | None = None,
) -> PreparedRequest:
    """
    Build a v5 signed request.

    Parameters and body are sent untouched; authentication travels in the
    X-BAPI-* headers. The signed payload is the encoded query string, or
    the body bytes when a body is given.

    Raises:
        AuthenticationRequiredError: If credentials are missing
    """
    credentials = _require_auth(credentials)

    query = encode_query(normalize_params(params))
    payload: str | bytes = body if body is not None else query

    if timestamp is None:
        timestamp = get_timestamp_ms()
    signature = sign_v5(timestamp, credentials.key, payload, credentials.secret)

    headers = get_v5_auth_headers(credentials.key, timestamp, signature)
    if body is not None:
        headers["Content-Type"] = JSON_CONTENT_TYPE

    return PreparedRequest(
        method=method.upper(),
        url=_join_url(base_url, path, query),
        headers=headers,
        body=body,
        generation=ApiGeneration.V5,
    )
