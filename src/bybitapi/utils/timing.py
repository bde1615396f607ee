"""Timestamp utilities for request signing."""

import time


def get_timestamp_ms() -> int:
    """Get current UTC epoch timestamp in milliseconds."""
    return int(time.time() * 1000)
