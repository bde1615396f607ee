"""Spot v1 models."""

from dataclasses import dataclass, field

from .response import CommonResponse


@dataclass
class SpotPostOrderParam:
    """Form body of POST /spot/v1/order."""

    symbol: str
    qty: float
    side: str  # "Buy" or "Sell"
    type: str  # "LIMIT", "MARKET", "LIMIT_MAKER"

    time_in_force: str | None = None
    price: float | None = None
    order_link_id: str | None = None

    def to_params(self) -> dict:
        return {
            "symbol": self.symbol,
            "qty": self.qty,
            "side": self.side,
            "type": self.type,
            "timeInForce": self.time_in_force,
            "price": self.price,
            "orderLinkId": self.order_link_id,
        }


@dataclass
class SpotOrder:
    """Order echo returned by the spot v1 order endpoints."""

    order_id: str
    order_link_id: str
    symbol: str
    price: str
    orig_qty: str
    executed_qty: str
    status: str
    side: str
    type: str
    time_in_force: str = ""
    transact_time: str = ""

    @classmethod
    def from_api(cls, data: dict) -> "SpotOrder":
        """Create SpotOrder from API response."""
        return cls(
            order_id=str(data["orderId"]),
            order_link_id=str(data.get("orderLinkId", "")),
            symbol=data["symbol"],
            price=str(data.get("price", "0")),
            orig_qty=str(data.get("origQty", "0")),
            executed_qty=str(data.get("executedQty", "0")),
            status=data["status"],
            side=data["side"],
            type=data["type"],
            time_in_force=data.get("timeInForce", ""),
            transact_time=str(data.get("transactTime", "")),
        )


@dataclass
class SpotOrderResponse(CommonResponse):
    result: SpotOrder | None = None

    @classmethod
    def from_api(cls, data: dict) -> "SpotOrderResponse":
        common = CommonResponse.from_api(data)
        result = data.get("result")
        common.result = SpotOrder.from_api(result) if result else None
        return cls(**vars(common))


@dataclass
class SpotSymbol:
    name: str
    base_currency: str
    quote_currency: str
    min_price_precision: str = ""

    @classmethod
    def from_api(cls, data: dict) -> "SpotSymbol":
        return cls(
            name=data["name"],
            base_currency=data["baseCurrency"],
            quote_currency=data["quoteCurrency"],
            min_price_precision=str(data.get("minPricePrecision", "")),
        )


@dataclass
class SpotSymbolsResponse(CommonResponse):
    result: list[SpotSymbol] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict) -> "SpotSymbolsResponse":
        common = CommonResponse.from_api(data)
        common.result = [SpotSymbol.from_api(item) for item in data.get("result") or []]
        return cls(**vars(common))
