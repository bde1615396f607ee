"""Authentication and signing utilities for the Bybit REST API."""

import hashlib
import hmac
import json
from collections.abc import Mapping
from typing import Any

API_KEY_HEADER = "X-BAPI-API-KEY"
TIMESTAMP_HEADER = "X-BAPI-TIMESTAMP"
SIGN_HEADER = "X-BAPI-SIGN"


def _hmac_hex(secret: str, message: bytes) -> str:
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).hexdigest()


def stringify_value(value: Any) -> str:
    """
    Render a decoded JSON value the way the exchange reads it when verifying
    a legacy body signature.

    Args:
        value: Any value produced by ``json.loads``

    Returns:
        String form of the value
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def legacy_canonical_string(params: Mapping[str, str]) -> str:
    """
    Build the legacy signable string.

    Keys are sorted ascending (code point order, equal to UTF-8 byte order)
    and joined as ``key=value`` pairs separated by ``&``.

    Args:
        params: Parameter name to string value, reserved keys included

    Returns:
        Canonical string, e.g. "api_key=k&symbol=BTCUSDT&timestamp=1"

    Raises:
        ValueError: If params is empty
    """
    if not params:
        raise ValueError("cannot sign an empty parameter set")

    return "&".join(f"{key}={params[key]}" for key in sorted(params))


def sign_legacy(params: Mapping[str, str], secret: str) -> str:
    """
    Sign a legacy query or form request using HMAC-SHA256.

    Args:
        params: Parameters including api_key and timestamp
        secret: API secret

    Returns:
        Lowercase hex signature
    """
    return _hmac_hex(secret, legacy_canonical_string(params).encode("utf-8"))


def legacy_body_canonical_string(body: Mapping[str, Any]) -> str:
    """Canonical string for a legacy JSON body; values go through stringify_value."""
    return legacy_canonical_string({key: stringify_value(value) for key, value in body.items()})


def sign_legacy_body(body: Mapping[str, Any], secret: str) -> str:
    """
    Sign a legacy JSON body request.

    Args:
        body: Decoded top-level JSON object including api_key and timestamp
        secret: API secret

    Returns:
        Lowercase hex signature
    """
    return _hmac_hex(secret, legacy_body_canonical_string(body).encode("utf-8"))


def v5_canonical_string(timestamp: int, api_key: str, payload: str | bytes = "") -> bytes:
    """
    Build the v5 signable bytes: timestamp + api key + payload.

    Args:
        timestamp: Milliseconds since epoch
        api_key: API key
        payload: Encoded query string (GET/DELETE) or raw JSON body (POST)

    Returns:
        Canonical bytes
    """
    if isinstance(payload, str):
        payload = payload.encode("utf-8")
    return (str(timestamp) + api_key).encode("utf-8") + payload


def sign_v5(timestamp: int, api_key: str, payload: str | bytes, secret: str) -> str:
    """
    Sign a v5 request using HMAC-SHA256.

    Args:
        timestamp: Milliseconds since epoch
        api_key: API key
        payload: Encoded query string or raw JSON body bytes
        secret: API secret

    Returns:
        Lowercase hex signature
    """
    return _hmac_hex(secret, v5_canonical_string(timestamp, api_key, payload))


def get_v5_auth_headers(api_key: str, timestamp: int, signature: str) -> dict[str, str]:
    """
    Get authentication headers for v5 REST API requests.

    Args:
        api_key: API key
        timestamp: Milliseconds since epoch used for the signature
        signature: HMAC-SHA256 signature

    Returns:
        Dictionary of headers
    """
    return {
        API_KEY_HEADER: api_key,
        TIMESTAMP_HEADER: str(timestamp),
        SIGN_HEADER: signature,
    }
