"""Derivatives (contract) models."""

from dataclasses import dataclass, field

from .response import CommonResponse


@dataclass
class ContractTicker:
    symbol: str
    last_price: str
    bid_price: str = ""
    ask_price: str = ""
    volume_24h: str = ""
    funding_rate: str = ""

    @classmethod
    def from_api(cls, data: dict) -> "ContractTicker":
        return cls(
            symbol=data["symbol"],
            last_price=str(data["lastPrice"]),
            bid_price=str(data.get("bidPrice", "")),
            ask_price=str(data.get("askPrice", "")),
            volume_24h=str(data.get("volume24h", "")),
            funding_rate=str(data.get("fundingRate", "")),
        )


@dataclass
class ContractTickersResponse(CommonResponse):
    result: list[ContractTicker] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict) -> "ContractTickersResponse":
        common = CommonResponse.from_api(data)
        items = (data.get("result") or {}).get("list", [])
        common.result = [ContractTicker.from_api(item) for item in items]
        return cls(**vars(common))


@dataclass
class ContractBalance:
    coin: str
    equity: str
    wallet_balance: str
    available_balance: str

    @classmethod
    def from_api(cls, data: dict) -> "ContractBalance":
        return cls(
            coin=data["coin"],
            equity=str(data.get("equity", "0")),
            wallet_balance=str(data.get("walletBalance", "0")),
            available_balance=str(data.get("availableBalance", "0")),
        )


@dataclass
class ContractBalanceResponse(CommonResponse):
    result: list[ContractBalance] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict) -> "ContractBalanceResponse":
        common = CommonResponse.from_api(data)
        items = (data.get("result") or {}).get("list", [])
        common.result = [ContractBalance.from_api(item) for item in items]
        return cls(**vars(common))


@dataclass
class LinearCreateOrderParam:
    """JSON body of the USDT perpetual order endpoint."""

    symbol: str
    side: str
    order_type: str
    qty: float
    time_in_force: str = "GoodTillCancel"
    reduce_only: bool = False
    close_on_trigger: bool = False
    price: float | None = None
    order_link_id: str | None = None

    def to_api_payload(self) -> dict:
        payload = {
            "symbol": self.symbol,
            "side": self.side,
            "order_type": self.order_type,
            "qty": self.qty,
            "time_in_force": self.time_in_force,
            "reduce_only": self.reduce_only,
            "close_on_trigger": self.close_on_trigger,
        }
        if self.price is not None:
            payload["price"] = self.price
        if self.order_link_id:
            payload["order_link_id"] = self.order_link_id
        return payload


@dataclass
class LinearOrder:
    order_id: str
    symbol: str
    side: str
    order_type: str
    price: float
    qty: float
    order_status: str
    order_link_id: str = ""

    @classmethod
    def from_api(cls, data: dict) -> "LinearOrder":
        return cls(
            order_id=data["order_id"],
            symbol=data["symbol"],
            side=data["side"],
            order_type=data["order_type"],
            price=float(data.get("price", 0)),
            qty=float(data["qty"]),
            order_status=data["order_status"],
            order_link_id=data.get("order_link_id", ""),
        )


@dataclass
class LinearCreateOrderResponse(CommonResponse):
    result: LinearOrder | None = None

    @classmethod
    def from_api(cls, data: dict) -> "LinearCreateOrderResponse":
        common = CommonResponse.from_api(data)
        result = data.get("result")
        common.result = LinearOrder.from_api(result) if result else None
        return cls(**vars(common))
