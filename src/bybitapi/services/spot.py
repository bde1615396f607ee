"""Spot v1 endpoints."""

from typing import TYPE_CHECKING

from ..client.request import BodyEncoding
from ..models.spot import SpotOrderResponse, SpotPostOrderParam, SpotSymbolsResponse

if TYPE_CHECKING:
    from ..client.rest import RestClient


class SpotV1Service:
    """Legacy spot endpoints signed with injected api_key/timestamp/sign."""

    def __init__(self, client: "RestClient"):
        self.client = client

    async def symbols(self) -> SpotSymbolsResponse:
        """List spot trading pairs."""
        return await self.client.get_public("/spot/v1/symbols", None, SpotSymbolsResponse)

    async def post_order(self, param: SpotPostOrderParam) -> SpotOrderResponse:
        """Place a spot order (form-encoded body)."""
        return await self.client.post_private(
            "/spot/v1/order",
            param.to_params(),
            SpotOrderResponse,
            encoding=BodyEncoding.FORM,
        )

    async def cancel_order(
        self, order_id: str | None = None, order_link_id: str | None = None
    ) -> SpotOrderResponse:
        """
        Cancel a spot order.

        Raises:
            ValueError: If neither order_id nor order_link_id is given
        """
        if order_id is None and order_link_id is None:
            raise ValueError("either order_id or order_link_id needed")

        return await self.client.delete_private(
            "/spot/v1/order",
            {"orderId": order_id, "orderLinkId": order_link_id},
            SpotOrderResponse,
        )
