"""Common response envelopes."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

LIMIT_STATUS_HEADER = "X-Bapi-Limit-Status"
LIMIT_RESET_HEADER = "X-Bapi-Limit-Reset-Timestamp"
LIMIT_HEADER = "X-Bapi-Limit"


def _parse_int(value: str | None) -> int:
    if value is None:
        return 0
    try:
        return int(value.strip())
    except ValueError:
        return 0


@dataclass
class RateLimitHeaders:
    """Rate-limit telemetry from v5 response headers."""

    rate_limit_status: int = 0
    rate_limit_reset_ms: int = 0
    rate_limit: int = 0

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "RateLimitHeaders":
        """Parse headers best-effort; absent or unparsable values stay 0."""
        lowered = {name.lower(): value for name, value in headers.items()}
        return cls(
            rate_limit_status=_parse_int(lowered.get(LIMIT_STATUS_HEADER.lower())),
            rate_limit_reset_ms=_parse_int(lowered.get(LIMIT_RESET_HEADER.lower())),
            rate_limit=_parse_int(lowered.get(LIMIT_HEADER.lower())),
        )

    def to_dict(self) -> dict[str, int]:
        return {
            "rate_limit_status": self.rate_limit_status,
            "rate_limit_reset_ms": self.rate_limit_reset_ms,
            "rate_limit": self.rate_limit,
        }


@dataclass
class CommonResponse:
    """Legacy envelope: ret_code / ret_msg / result."""

    ret_code: int
    ret_msg: str
    result: Any = None
    ext_code: str = ""
    ext_info: Any = None
    time_now: str = ""

    @classmethod
    def from_api(cls, data: dict) -> "CommonResponse":
        """Create CommonResponse from API response."""
        # Derivatives v3 endpoints answer with camelCase keys
        ret_code = data["ret_code"] if "ret_code" in data else data["retCode"]
        ret_msg = data.get("ret_msg", data.get("retMsg", ""))

        return cls(
            ret_code=int(ret_code),
            ret_msg=str(ret_msg),
            result=data.get("result"),
            ext_code=str(data.get("ext_code") or ""),
            ext_info=data.get("ext_info", data.get("retExtInfo")),
            time_now=str(data.get("time_now", data.get("time", ""))),
        )


@dataclass
class CommonV5Response:
    """v5 envelope plus the rate-limit fields merged from headers."""

    ret_code: int
    ret_msg: str
    result: Any = None
    ret_ext_info: Any = None
    time: int = 0
    rate_limit_status: int = 0
    rate_limit_reset_ms: int = 0
    rate_limit: int = 0

    @classmethod
    def from_api(cls, data: dict) -> "CommonV5Response":
        """Create CommonV5Response from API response."""
        return cls(
            ret_code=int(data["retCode"]),
            ret_msg=str(data.get("retMsg", "")),
            result=data.get("result"),
            ret_ext_info=data.get("retExtInfo"),
            time=int(data.get("time", 0)),
            rate_limit_status=int(data.get("rate_limit_status", 0)),
            rate_limit_reset_ms=int(data.get("rate_limit_reset_ms", 0)),
            rate_limit=int(data.get("rate_limit", 0)),
        )

    @property
    def rate_limits(self) -> RateLimitHeaders:
        return RateLimitHeaders(
            rate_limit_status=self.rate_limit_status,
            rate_limit_reset_ms=self.rate_limit_reset_ms,
            rate_limit=self.rate_limit,
        )
