"""v5 unified trading order endpoints."""

from typing import TYPE_CHECKING

from ..models.order import (
    V5CancelOrderParam,
    V5CreateOrderParam,
    V5GetOpenOrdersParam,
    V5GetOpenOrdersResponse,
    V5OrderResponse,
)
from ..utils.logger import logger

if TYPE_CHECKING:
    from ..client.rest import RestClient


class V5OrderService:
    """Order placement and queries under /v5/order."""

    def __init__(self, client: "RestClient"):
        self.client = client

    async def create_order(self, param: V5CreateOrderParam) -> V5OrderResponse:
        """
        Place a new order.

        Args:
            param: Order parameters

        Returns:
            Response carrying orderId / orderLinkId and rate-limit fields
        """
        response = await self.client.post_private(
            "/v5/order/create", param.to_api_payload(), V5OrderResponse
        )
        logger.info(
            f"Order placed: {param.side} {param.qty} {param.symbol} @ {param.price} - ID: "
            f"{response.result.order_id if response.result else None}"
        )
        return response

    async def cancel_order(self, param: V5CancelOrderParam) -> V5OrderResponse:
        """
        Cancel an order.

        Raises:
            ValueError: If neither order_id nor order_link_id is given
        """
        if param.order_id is None and param.order_link_id is None:
            raise ValueError("either order_id or order_link_id needed")

        response = await self.client.post_private(
            "/v5/order/cancel", param.to_api_payload(), V5OrderResponse
        )
        logger.info(f"Order cancelled: {param.order_id or param.order_link_id}")
        return response

    async def get_open_orders(self, param: V5GetOpenOrdersParam) -> V5GetOpenOrdersResponse:
        """Get open orders of a category."""
        return await self.client.get_private(
            "/v5/order/realtime", param.to_params(), V5GetOpenOrdersResponse
        )
