"""
Async client for the Bybit REST API (legacy and v5 unified trading).
"""

from .client import (
    ApiGeneration,
    BodyEncoding,
    ClientConfig,
    Credentials,
    RestClient,
    TestnetClient,
)
from .utils.config import Config

__version__ = "0.1.0"

__all__ = [
    "RestClient",
    "TestnetClient",
    "ClientConfig",
    "Credentials",
    "ApiGeneration",
    "BodyEncoding",
    "Config",
]
