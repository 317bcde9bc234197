"""
USD-M 선물 요청 옵션 (TypedDict)
"""

from typing import Any, TypedDict

from binance_sdk.api.options import FilterOptions, LimitOptions, Number, RecvWindowOptions
from binance_sdk.core.types import PositionSide, TimeInForce


# =============================================================================
# Market
# =============================================================================


class SymbolOptions(TypedDict, total=False):
    symbol: str


class OrderBookOptions(LimitOptions, total=False):
    pass


class OldTradesOptions(LimitOptions, total=False):
    fromId: int | str


class AggTradesOptions(FilterOptions, total=False):
    fromId: int | str


class FundingRateHistoryOptions(FilterOptions, total=False):
    symbol: str


# =============================================================================
# Trade
# =============================================================================


class SymbolRecvWindowOptions(RecvWindowOptions, total=False):
    symbol: str


class NewOrderOptions(RecvWindowOptions, total=False):
    positionSide: PositionSide | str
    timeInForce: TimeInForce | str
    quantity: Number
    reduceOnly: str | bool
    price: Number
    newClientOrderId: str
    stopPrice: Number
    closePosition: str | bool
    activationPrice: Number
    callbackRate: Number
    workingType: str
    priceProtect: str | bool
    newOrderRespType: str


class OrderIdOptions(RecvWindowOptions, total=False):
    orderId: int | str
    origClientOrderId: str


class CancelMultipleOrdersOptions(RecvWindowOptions, total=False):
    orderIdList: list[Any]
    origClientOrderIdList: list[str]


class AllOrdersOptions(RecvWindowOptions, FilterOptions, total=False):
    orderId: int | str


class ModifyIsolatedPositionMarginOptions(RecvWindowOptions, total=False):
    positionSide: PositionSide | str


class PositionMarginHistoryOptions(RecvWindowOptions, FilterOptions, total=False):
    type: int


class AccountTradeListOptions(RecvWindowOptions, FilterOptions, total=False):
    fromId: int | str


class IncomeHistoryOptions(RecvWindowOptions, FilterOptions, total=False):
    symbol: str
    incomeType: str


class ForceOrdersOptions(RecvWindowOptions, FilterOptions, total=False):
    symbol: str
    autoCloseType: str


class DownloadIdOptions(RecvWindowOptions, total=False):
    startTime: int
    endTime: int
