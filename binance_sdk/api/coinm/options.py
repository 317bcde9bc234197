"""
COIN-M 선물 요청 옵션 (TypedDict)

COIN-M은 심볼(BTCUSD_PERP) 외에 pair(BTCUSD) 단위 조회를 지원한다.
USD-M과 모양이 같은 옵션은 usdm.options를 그대로 쓴다.
"""

from typing import TypedDict

from binance_sdk.api.options import FilterOptions, Number, RecvWindowOptions


class SymbolPairOptions(TypedDict, total=False):
    symbol: str
    pair: str


class SymbolPairRecvWindowOptions(RecvWindowOptions, SymbolPairOptions, total=False):
    pass


class PairRecvWindowOptions(RecvWindowOptions, total=False):
    pair: str


class ModifyOrderOptions(RecvWindowOptions, total=False):
    orderId: int | str
    origClientOrderId: str
    quantity: Number
    price: Number


class OrderModifyHistoryOptions(RecvWindowOptions, FilterOptions, total=False):
    orderId: int | str
    origClientOrderId: str


class AllOrdersOptions(RecvWindowOptions, FilterOptions, total=False):
    symbol: str
    pair: str
    orderId: int | str


class PositionRiskOptions(RecvWindowOptions, total=False):
    marginAsset: str
    pair: str


class AccountTradeListOptions(RecvWindowOptions, FilterOptions, total=False):
    symbol: str
    pair: str
    fromId: int | str
