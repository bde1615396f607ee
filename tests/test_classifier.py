"""Unit tests for response classification."""

import json
from unittest.mock import Mock

import pytest

from bybitapi.client.classifier import (
    LegacyClassifier,
    LegacyResponseValidator,
    V5Classifier,
    V5ResponseValidator,
    classifier_for,
    decode_into,
)
from bybitapi.client.exceptions import (
    AccessDeniedError,
    BusinessError,
    DecodeError,
    NotFoundError,
    RateLimitedOrServerError,
    RateLimitError,
    RequestFailedError,
    ServerError,
    UnexpectedResponseError,
)
from bybitapi.client.request import ApiGeneration
from bybitapi.client.transport import RawResponse
from bybitapi.models.response import CommonResponse, CommonV5Response, RateLimitHeaders


def _response(status: int, body, headers=None, reason: str = "") -> RawResponse:
    raw = body if isinstance(body, bytes) else json.dumps(body).encode()
    return RawResponse(status=status, reason=reason, headers=headers or {}, body=raw)


LEGACY_OK = {"ret_code": 0, "ret_msg": "OK", "result": {"a": 1}, "time_now": "1700000000.1"}
V5_OK = {"retCode": 0, "retMsg": "OK", "result": {"list": []}, "retExtInfo": {}, "time": 1700000000000}


class TestValidators:
    """Test suite for return-code validators."""

    def test_legacy_success(self):
        LegacyResponseValidator().validate(json.dumps(LEGACY_OK).encode())

    def test_legacy_business_error(self):
        body = json.dumps({"ret_code": 10001, "ret_msg": "invalid symbol"}).encode()
        with pytest.raises(BusinessError) as exc_info:
            LegacyResponseValidator().validate(body)

        assert exc_info.value.ret_code == 10001
        assert exc_info.value.ret_msg == "invalid symbol"

    def test_legacy_accepts_camel_case_envelope(self):
        LegacyResponseValidator().validate(b'{"retCode": 0, "retMsg": "OK"}')
        with pytest.raises(BusinessError):
            LegacyResponseValidator().validate(b'{"retCode": 10016, "retMsg": "server error"}')

    def test_v5_business_error(self):
        with pytest.raises(BusinessError) as exc_info:
            V5ResponseValidator().validate(b'{"retCode": 110007, "retMsg": "insufficient balance"}')
        assert exc_info.value.error_code == 110007

    @pytest.mark.parametrize("body", [b"not json", b"[]", b"{}", b'{"retCode": "x"}'])
    def test_v5_malformed(self, body):
        with pytest.raises(DecodeError):
            V5ResponseValidator().validate(body)

    def test_business_error_is_decode_error(self):
        assert issubclass(BusinessError, DecodeError)


class TestDecodeInto:
    def test_dict_passthrough(self):
        assert decode_into({"a": 1}, dict) == {"a": 1}
        assert decode_into({"a": 1}, None) == {"a": 1}

    def test_from_api(self):
        decoded = decode_into(LEGACY_OK, CommonResponse)
        assert isinstance(decoded, CommonResponse)
        assert decoded.result == {"a": 1}

    def test_builder_failure_becomes_decode_error(self):
        with pytest.raises(DecodeError):
            decode_into({"unexpected": True}, CommonV5Response)


class TestLegacyClassifier:
    """Test suite for legacy status handling."""

    @pytest.fixture
    def classifier(self) -> LegacyClassifier:
        return LegacyClassifier(LegacyResponseValidator())

    def test_success(self, classifier):
        decoded = classifier.classify(_response(200, LEGACY_OK), CommonResponse)
        assert decoded.ret_code == 0
        assert decoded.ret_msg == "OK"

    def test_business_error_despite_200(self, classifier):
        with pytest.raises(BusinessError) as exc_info:
            classifier.classify(_response(200, {"ret_code": 10001, "ret_msg": "params error"}))
        assert exc_info.value.status_code == 200

    def test_malformed_body(self, classifier):
        with pytest.raises(DecodeError):
            classifier.classify(_response(200, b"<html>"))

    def test_403(self, classifier):
        with pytest.raises(AccessDeniedError):
            classifier.classify(_response(403, b""))

    def test_404(self, classifier):
        with pytest.raises(NotFoundError):
            classifier.classify(_response(404, b""))

    def test_429(self, classifier):
        with pytest.raises(RateLimitError) as exc_info:
            classifier.classify(_response(429, b""))
        assert isinstance(exc_info.value, RateLimitedOrServerError)

    @pytest.mark.parametrize("status", [500, 502, 503])
    def test_5xx(self, classifier, status):
        with pytest.raises(ServerError) as exc_info:
            classifier.classify(_response(status, b""))
        assert exc_info.value.status_code == status

    def test_other_status(self, classifier):
        with pytest.raises(RequestFailedError) as exc_info:
            classifier.classify(_response(418, b"teapot", reason="I'm a Teapot"))

        assert exc_info.value.status_code == 418
        assert exc_info.value.reason == "I'm a Teapot"
        assert exc_info.value.body is None

    def test_other_status_keeps_body_in_debug_mode(self):
        classifier = LegacyClassifier(LegacyResponseValidator(), Mock())
        with pytest.raises(RequestFailedError) as exc_info:
            classifier.classify(_response(400, b"bad request"))
        assert exc_info.value.body == b"bad request"

    def test_no_rate_limit_fields(self, classifier):
        decoded = classifier.classify(_response(200, LEGACY_OK, {"X-Bapi-Limit": "120"}))
        assert "rate_limit" not in decoded


class TestV5Classifier:
    """Test suite for v5 status handling and rate-limit extraction."""

    @pytest.fixture
    def classifier(self) -> V5Classifier:
        return V5Classifier(V5ResponseValidator())

    def test_rate_limit_headers_merged(self, classifier):
        headers = {
            "X-Bapi-Limit": "120",
            "X-Bapi-Limit-Status": "119",
            "X-Bapi-Limit-Reset-Timestamp": "1700000000000",
        }
        decoded = classifier.classify(_response(200, V5_OK, headers), CommonV5Response)

        assert decoded.rate_limit == 120
        assert decoded.rate_limit_status == 119
        assert decoded.rate_limit_reset_ms == 1700000000000
        assert decoded.ret_code == 0

    def test_header_lookup_is_case_insensitive(self, classifier):
        decoded = classifier.classify(_response(200, V5_OK, {"x-bapi-limit": "50"}))
        assert decoded["rate_limit"] == 50

    def test_missing_or_bad_headers_default_to_zero(self, classifier):
        decoded = classifier.classify(
            _response(200, V5_OK, {"X-Bapi-Limit": "n/a"}), CommonV5Response
        )
        assert decoded.rate_limits == RateLimitHeaders(0, 0, 0)

    def test_business_error(self, classifier):
        with pytest.raises(BusinessError):
            classifier.classify(_response(200, {"retCode": 10001, "retMsg": "params error"}))

    def test_403_and_404(self, classifier):
        with pytest.raises(AccessDeniedError):
            classifier.classify(_response(403, b""))
        with pytest.raises(NotFoundError):
            classifier.classify(_response(404, b""))

    @pytest.mark.parametrize("status", [400, 429, 500])
    def test_other_status_is_unexpected(self, classifier, status):
        with pytest.raises(UnexpectedResponseError) as exc_info:
            classifier.classify(_response(status, b"raw body"))

        assert str(exc_info.value) == "unexpected error"
        assert exc_info.value.status_code == status
        assert exc_info.value.body is None

    def test_debug_logs_raw_body(self):
        debug_logger = Mock()
        classifier = V5Classifier(V5ResponseValidator(), debug_logger)

        with pytest.raises(UnexpectedResponseError):
            classifier.classify(_response(500, b"raw body"))

        debug_logger.debug.assert_any_call("Body: %s", "raw body")
        debug_logger.error.assert_called()


class TestClassifierFor:
    def test_selects_by_generation(self):
        assert type(classifier_for(ApiGeneration.V5, V5ResponseValidator())) is V5Classifier
        assert type(classifier_for(ApiGeneration.LEGACY, LegacyResponseValidator())) is LegacyClassifier
