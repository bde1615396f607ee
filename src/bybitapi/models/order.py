"""v5 order models."""

from dataclasses import dataclass, field
from typing import Literal

from .response import CommonV5Response

CategoryV5 = Literal["spot", "linear", "inverse", "option"]
Side = Literal["Buy", "Sell"]
OrderType = Literal["Market", "Limit"]
TimeInForce = Literal["GTC", "IOC", "FOK", "PostOnly"]


def _drop_none(payload: dict) -> dict:
    return {key: value for key, value in payload.items() if value is not None}


@dataclass
class V5CreateOrderParam:
    """Body of /v5/order/create."""

    category: CategoryV5
    symbol: str
    side: Side
    order_type: OrderType
    qty: str

    price: str | None = None
    time_in_force: TimeInForce | None = None  # GTC when omitted
    position_idx: int | None = None  # required under hedge mode
    order_link_id: str | None = None
    take_profit: str | None = None
    stop_loss: str | None = None
    reduce_only: bool | None = None
    close_on_trigger: bool | None = None

    def to_api_payload(self) -> dict:
        """Convert to v5 API payload."""
        return _drop_none(
            {
                "category": self.category,
                "symbol": self.symbol,
                "side": self.side,
                "orderType": self.order_type,
                "qty": self.qty,
                "price": self.price,
                "timeInForce": self.time_in_force,
                "positionIdx": self.position_idx,
                "orderLinkId": self.order_link_id,
                "takeProfit": self.take_profit,
                "stopLoss": self.stop_loss,
                "reduceOnly": self.reduce_only,
                "closeOnTrigger": self.close_on_trigger,
            }
        )


@dataclass
class V5CancelOrderParam:
    """Body of /v5/order/cancel. One of order_id / order_link_id is required."""

    category: CategoryV5
    symbol: str
    order_id: str | None = None
    order_link_id: str | None = None

    def to_api_payload(self) -> dict:
        """Convert to v5 API payload."""
        return _drop_none(
            {
                "category": self.category,
                "symbol": self.symbol,
                "orderId": self.order_id,
                "orderLinkId": self.order_link_id,
            }
        )


@dataclass
class V5OrderIds:
    order_id: str
    order_link_id: str

    @classmethod
    def from_api(cls, data: dict) -> "V5OrderIds":
        return cls(order_id=data["orderId"], order_link_id=data.get("orderLinkId", ""))


@dataclass
class V5OrderResponse(CommonV5Response):
    """Response of create and cancel."""

    result: V5OrderIds | None = None

    @classmethod
    def from_api(cls, data: dict) -> "V5OrderResponse":
        common = CommonV5Response.from_api(data)
        result = data.get("result")
        common.result = V5OrderIds.from_api(result) if result else None
        return cls(**vars(common))


@dataclass
class V5GetOpenOrdersParam:
    """Query of /v5/order/realtime."""

    category: CategoryV5
    symbol: str | None = None
    base_coin: str | None = None
    settle_coin: str | None = None
    order_id: str | None = None
    order_link_id: str | None = None
    limit: int | None = None
    cursor: str | None = None

    def to_params(self) -> dict:
        return {
            "category": self.category,
            "symbol": self.symbol,
            "baseCoin": self.base_coin,
            "settleCoin": self.settle_coin,
            "orderId": self.order_id,
            "orderLinkId": self.order_link_id,
            "limit": self.limit,
            "cursor": self.cursor,
        }


@dataclass
class V5OpenOrder:
    """One entry of the open orders list."""

    order_id: str
    order_link_id: str
    symbol: str
    side: str
    order_type: str
    price: str
    qty: str
    order_status: str
    leaves_qty: str = "0"
    cum_exec_qty: str = "0"
    created_time: int = 0

    @classmethod
    def from_api(cls, data: dict) -> "V5OpenOrder":
        """Create V5OpenOrder from API response."""
        return cls(
            order_id=data["orderId"],
            order_link_id=data.get("orderLinkId", ""),
            symbol=data["symbol"],
            side=data["side"],
            order_type=data["orderType"],
            price=str(data.get("price", "0")),
            qty=str(data["qty"]),
            order_status=data["orderStatus"],
            leaves_qty=str(data.get("leavesQty", "0")),
            cum_exec_qty=str(data.get("cumExecQty", "0")),
            created_time=int(data.get("createdTime", 0)),
        )


@dataclass
class V5OpenOrdersResult:
    category: str
    next_page_cursor: str
    orders: list[V5OpenOrder] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict) -> "V5OpenOrdersResult":
        return cls(
            category=data.get("category", ""),
            next_page_cursor=data.get("nextPageCursor", ""),
            orders=[V5OpenOrder.from_api(item) for item in data.get("list", [])],
        )


@dataclass
class V5GetOpenOrdersResponse(CommonV5Response):
    result: V5OpenOrdersResult | None = None

    @classmethod
    def from_api(cls, data: dict) -> "V5GetOpenOrdersResponse":
        common = CommonV5Response.from_api(data)
        result = data.get("result")
        common.result = V5OpenOrdersResult.from_api(result) if result else None
        return cls(**vars(common))
