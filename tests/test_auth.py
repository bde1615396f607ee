"""Unit tests for request signing."""

import hashlib
import hmac
import json

import pytest

from bybitapi.client.auth import (
    get_v5_auth_headers,
    legacy_body_canonical_string,
    legacy_canonical_string,
    sign_legacy,
    sign_legacy_body,
    sign_v5,
    stringify_value,
    v5_canonical_string,
)


def _hmac(secret: str, message: bytes) -> str:
    return hmac.new(secret.encode(), message, hashlib.sha256).hexdigest()


class TestLegacySigning:
    """Test suite for the sorted key=value signature."""

    def test_canonical_string_sorted_without_trailing_separator(self):
        params = {"timestamp": "1700000000000", "symbol": "BTCUSDT", "api_key": "k", "qty": "1.1"}
        canonical = legacy_canonical_string(params)

        assert canonical == "api_key=k&qty=1.1&symbol=BTCUSDT&timestamp=1700000000000"
        assert not canonical.endswith("&")
        keys = [pair.split("=", 1)[0] for pair in canonical.split("&")]
        assert keys == sorted(keys)
        assert len(set(keys)) == len(keys)

    def test_sorting_is_by_code_point(self):
        canonical = legacy_canonical_string({"b": "1", "B": "2", "a": "3", "_x": "4"})
        assert canonical == "B=2&_x=4&a=3&b=1"

    def test_empty_params_rejected(self):
        with pytest.raises(ValueError):
            legacy_canonical_string({})

    def test_signature_is_hmac_of_canonical_string(self):
        params = {"api_key": "k", "timestamp": "1"}
        assert sign_legacy(params, "s") == _hmac("s", b"api_key=k&timestamp=1")

    def test_signature_deterministic(self):
        params = {"api_key": "k", "symbol": "BTCUSDT", "timestamp": "1700000000000"}
        assert sign_legacy(params, "secret") == sign_legacy(dict(reversed(params.items())), "secret")

    def test_different_secret_changes_signature(self):
        params = {"api_key": "k", "symbol": "BTCUSDT", "timestamp": "1700000000000"}
        assert sign_legacy(params, "secret-a") != sign_legacy(params, "secret-b")

    def test_signature_lowercase_hex(self):
        signature = sign_legacy({"api_key": "k", "timestamp": "1"}, "s")
        assert len(signature) == 64
        assert signature == signature.lower()
        int(signature, 16)


class TestLegacyBodySigning:
    """Test suite for the signed JSON body variant."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (True, "true"),
            (False, "false"),
            (None, ""),
            (10, "10"),
            (1.5, "1.5"),
            (100.0, "100"),
            ("Buy", "Buy"),
            ({"a": 1}, '{"a":1}'),
        ],
    )
    def test_stringify_value(self, value, expected):
        assert stringify_value(value) == expected

    def test_body_canonical_string(self):
        body = json.loads('{"side": "Buy", "qty": 0.01, "reduce_only": false, "api_key": "k"}')
        assert legacy_body_canonical_string(body) == "api_key=k&qty=0.01&reduce_only=false&side=Buy"

    def test_body_signature(self):
        body = {"symbol": "BTCUSDT", "api_key": "k", "timestamp": "1"}
        assert sign_legacy_body(body, "s") == _hmac("s", b"api_key=k&symbol=BTCUSDT&timestamp=1")


class TestV5Signing:
    """Test suite for the timestamp + key + payload signature."""

    def test_canonical_string(self):
        assert v5_canonical_string(1700000000000, "key", "category=linear") == (
            b"1700000000000keycategory=linear"
        )
        assert v5_canonical_string(1, "key", b'{"a":1}') == b'1key{"a":1}'
        assert v5_canonical_string(1, "key") == b"1key"

    def test_signature_roundtrip_for_post_body(self):
        body = json.dumps({"category": "linear", "symbol": "BTCUSDT", "qty": "0.01"}).encode()
        timestamp = 1700000000000

        signature = sign_v5(timestamp, "key", body, "secret")

        expected = _hmac("secret", str(timestamp).encode() + b"key" + body)
        assert signature == expected
        assert sign_v5(timestamp, "key", body, "secret") == signature

    def test_str_and_bytes_payload_agree(self):
        assert sign_v5(1, "k", "a=1", "s") == sign_v5(1, "k", b"a=1", "s")

    def test_auth_headers(self):
        headers = get_v5_auth_headers("key", 1700000000000, "abc")
        assert headers == {
            "X-BAPI-API-KEY": "key",
            "X-BAPI-TIMESTAMP": "1700000000000",
            "X-BAPI-SIGN": "abc",
        }
