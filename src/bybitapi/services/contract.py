"""Derivatives contract endpoints."""

from typing import TYPE_CHECKING

from ..models.contract import (
    ContractBalanceResponse,
    ContractTickersResponse,
    LinearCreateOrderParam,
    LinearCreateOrderResponse,
)

if TYPE_CHECKING:
    from ..client.rest import RestClient


class FutureContractService:
    """Market data, wallet and linear order endpoints of the contract API."""

    def __init__(self, client: "RestClient"):
        self.client = client

    async def tickers(self, category: str, symbol: str | None = None) -> ContractTickersResponse:
        """Get latest tickers of a category ("linear", "inverse", "option")."""
        return await self.client.get_public(
            "/derivatives/v3/public/tickers",
            {"category": category, "symbol": symbol},
            ContractTickersResponse,
        )

    async def balance(self, coin: str | None = None) -> ContractBalanceResponse:
        """Get wallet balance, optionally for one coin."""
        return await self.client.get_private(
            "/contract/v3/private/account/wallet/balance",
            {"coin": coin},
            ContractBalanceResponse,
        )

    async def create_linear_order(
        self, param: LinearCreateOrderParam
    ) -> LinearCreateOrderResponse:
        """Place a USDT perpetual order (signed JSON body)."""
        return await self.client.post_private(
            "/private/linear/order/create",
            param.to_api_payload(),
            LinearCreateOrderResponse,
        )
