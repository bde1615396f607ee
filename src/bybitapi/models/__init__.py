"""Data models."""

from .contract import (
    ContractBalanceResponse,
    ContractTickersResponse,
    LinearCreateOrderParam,
    LinearCreateOrderResponse,
)
from .order import (
    V5CancelOrderParam,
    V5CreateOrderParam,
    V5GetOpenOrdersParam,
    V5GetOpenOrdersResponse,
    V5OrderResponse,
)
from .response import CommonResponse, CommonV5Response, RateLimitHeaders
from .spot import SpotOrderResponse, SpotPostOrderParam, SpotSymbolsResponse

__all__ = [
    "CommonResponse",
    "CommonV5Response",
    "RateLimitHeaders",
    "V5CreateOrderParam",
    "V5CancelOrderParam",
    "V5GetOpenOrdersParam",
    "V5OrderResponse",
    "V5GetOpenOrdersResponse",
    "SpotPostOrderParam",
    "SpotOrderResponse",
    "SpotSymbolsResponse",
    "ContractTickersResponse",
    "ContractBalanceResponse",
    "LinearCreateOrderParam",
    "LinearCreateOrderResponse",
]
