"""
Spot / Margin / Wallet 계열 요청 옵션

키 이름은 Binance 파라미터 이름 그대로 (camelCase), 모든 필드 선택값.
"""

from typing import Literal, TypedDict

from binance_sdk.api.options import (
    FilterOptions,
    LimitOptions,
    Number,
    PagedTimeOptions,
    PagingOptions,
    RecvWindowFilterOptions,
    RecvWindowOptions,
    RecvWindowTimeOptions,
    TimeFilterOptions,
)
from binance_sdk.core.types import TimeInForce

IsIsolated = Literal["TRUE", "FALSE"] | str


# -----------------------------------------------------------------------------
# Market
# -----------------------------------------------------------------------------

class ExchangeInfoOptions(TypedDict, total=False):
    symbol: str
    symbols: list[str]


class TradeHistoryOptions(LimitOptions, total=False):
    fromId: int


class AggTradesOptions(FilterOptions, total=False):
    fromId: int


class KlinesOptions(FilterOptions, total=False):
    timeZone: str


# -----------------------------------------------------------------------------
# Trade
# -----------------------------------------------------------------------------

class NewOrderOptions(RecvWindowOptions, total=False):
    timeInForce: TimeInForce | str
    quantity: Number
    quoteOrderQty: Number
    price: Number
    newClientOrderId: str
    stopPrice: Number
    trailingDelta: Number
    icebergQty: Number
    newOrderRespType: str


class CancelOrderOptions(RecvWindowOptions, total=False):
    orderId: int | str
    origClientOrderId: str
    newClientOrderId: str


class GetOrderOptions(RecvWindowOptions, total=False):
    orderId: int | str
    origClientOrderId: str


class OpenOrdersOptions(RecvWindowOptions, total=False):
    symbol: str


class AllOrdersOptions(RecvWindowFilterOptions, total=False):
    orderId: int | str


class NewOcoOrderOptions(RecvWindowOptions, total=False):
    listClientOrderId: str
    limitClientOrderId: str
    limitIcebergQty: Number
    trailingDelta: Number
    stopClientOrderId: str
    stopLimitPrice: Number
    stopIcebergQty: Number
    stopLimitTimeInForce: str
    newOrderRespType: str


class CancelOcoOrderOptions(RecvWindowOptions, total=False):
    orderListId: int | str
    listClientOrderId: str
    newClientOrderId: str


class GetOcoOrderOptions(RecvWindowOptions, total=False):
    orderListId: int | str
    origClientOrderId: str


class GetOcoOrdersOptions(RecvWindowFilterOptions, total=False):
    fromId: int


class MyTradesOptions(RecvWindowFilterOptions, total=False):
    fromId: int
    orderId: int | str


# -----------------------------------------------------------------------------
# Wallet
# -----------------------------------------------------------------------------

class AccountSnapshotOptions(RecvWindowFilterOptions, total=False):
    pass


class WithdrawOptions(RecvWindowOptions, total=False):
    withdrawOrderId: str
    network: str
    addressTag: str
    transactionFeeFlag: bool
    name: str
    walletType: int


class DepositHistoryOptions(RecvWindowFilterOptions, total=False):
    coin: str
    status: int
    offset: int


class WithdrawHistoryOptions(RecvWindowFilterOptions, total=False):
    coin: str
    status: int
    offset: int
    withdrawOrderId: str


class DepositAddressOptions(RecvWindowOptions, total=False):
    network: str


class DustLogOptions(RecvWindowTimeOptions, total=False):
    pass


class AssetDividendRecordOptions(RecvWindowFilterOptions, total=False):
    asset: str


class AssetDetailOptions(RecvWindowOptions, total=False):
    asset: str


class TradeFeeOptions(RecvWindowOptions, total=False):
    symbol: str


class UserUniversalTransferOptions(RecvWindowOptions, total=False):
    fromSymbol: str
    toSymbol: str


class UserUniversalTransferHistoryOptions(PagedTimeOptions, total=False):
    fromSymbol: str
    toSymbol: str


class FundingWalletOptions(RecvWindowOptions, total=False):
    asset: str
    needBtcValuation: Literal["true", "false"] | str


# -----------------------------------------------------------------------------
# Margin
# -----------------------------------------------------------------------------

class MarginBorrowOptions(RecvWindowOptions, total=False):
    symbol: str
    isIsolated: IsIsolated


class NewMarginOrderOptions(RecvWindowOptions, total=False):
    isIsolated: IsIsolated
    quantity: Number
    quoteOrderQty: Number
    price: Number
    stopPrice: Number
    newClientOrderId: str
    icebergQty: Number
    newOrderRespType: str
    sideEffectType: Literal["NO_SIDE_EFFECT", "MARGIN_BUY", "AUTO_REPAY"] | str
    timeInForce: Literal["GTC", "IOC", "FOK"] | str


class CancelMarginOrderOptions(RecvWindowOptions, total=False):
    isIsolated: IsIsolated
    orderId: int
    origClientOrderId: str
    newClientOrderId: str


class IsolatedOptions(RecvWindowOptions, total=False):
    isIsolated: IsIsolated


class MarginTransferHistoryOptions(PagedTimeOptions, total=False):
    asset: str
    type: Literal["ROLL_IN", "ROLL_OUT"] | str
    archived: bool


class MarginLoanRecordOptions(PagedTimeOptions, total=False):
    isolatedSymbol: str
    txId: int
    archived: bool


class MarginInterestHistoryOptions(PagedTimeOptions, total=False):
    asset: str
    isolatedSymbol: str
    archived: bool


class MarginForceLiquidationRecordOptions(PagedTimeOptions, total=False):
    isolatedSymbol: str


class MarginOrderOptions(RecvWindowOptions, total=False):
    isIsolated: IsIsolated
    orderId: int
    origClientOrderId: str


class MarginOpenOrdersOptions(RecvWindowOptions, total=False):
    isIsolated: IsIsolated
    symbol: str


class MarginAllOrdersOptions(RecvWindowFilterOptions, total=False):
    isIsolated: IsIsolated
    orderId: int


class MarginOcoOrderOptions(RecvWindowOptions, total=False):
    isIsolated: IsIsolated
    listClientOrderId: str
    limitClientOrderId: str
    limitIcebergQty: Number
    stopClientOrderId: str
    stopLimitPrice: Number
    stopIcebergQty: Number
    stopLimitTimeInForce: Literal["GTC", "IOC", "FOK"] | str
    newOrderRespType: str
    sideEffectType: Literal["NO_SIDE_EFFECT", "MARGIN_BUY", "AUTO_REPAY"] | str


class CancelMarginOcoOrderOptions(RecvWindowOptions, total=False):
    isIsolated: IsIsolated
    orderListId: int
    listClientOrderId: str
    newClientOrderId: str


class GetMarginOcoOrderOptions(RecvWindowOptions, total=False):
    isIsolated: IsIsolated
    symbol: str
    orderListId: int
    origClientOrderId: str


class GetMarginOcoOrdersOptions(RecvWindowTimeOptions, total=False):
    isIsolated: IsIsolated
    symbol: str
    fromId: int
    limit: int


class GetMarginOpenOcoOrdersOptions(RecvWindowOptions, total=False):
    isIsolated: IsIsolated
    symbol: str


class MarginMyTradesOptions(RecvWindowFilterOptions, total=False):
    fromId: int
    isIsolated: IsIsolated


class MarginMaxBorrowableOptions(RecvWindowOptions, total=False):
    isolatedSymbol: str


class MarginInterestRateHistoryOptions(RecvWindowTimeOptions, total=False):
    vipLevel: int


class IsolatedMarginTransferHistoryOptions(PagedTimeOptions, total=False):
    asset: str
    transFrom: Literal["SPOT", "ISOLATED_MARGIN"] | str
    transTo: Literal["SPOT", "ISOLATED_MARGIN"] | str


class IsolatedMarginAccountInfoOptions(RecvWindowOptions, total=False):
    symbols: str


class MarginFeeOptions(RecvWindowOptions, total=False):
    vipLevel: int
    coin: str


class IsolatedMarginTierOptions(RecvWindowOptions, total=False):
    tier: str


class MarginOrderCountOptions(RecvWindowOptions, total=False):
    symbol: str
    isIsolated: IsIsolated


# -----------------------------------------------------------------------------
# Savings / Staking
# -----------------------------------------------------------------------------

class SavingsFlexibleProductsOptions(PagingOptions, total=False):
    status: Literal["SUBSCRIBABLE", "UNSUBSCRIBABLE", "ALL"] | str
    featured: Literal["ALL", "true"] | str


class SavingsProductListOptions(PagingOptions, total=False):
    asset: str
    status: Literal["SUBSCRIBABLE", "UNSUBSCRIBABLE", "ALL"] | str
    isSortAsc: bool
    sortBy: Literal["START_TIME", "LOT_SIZE", "INTEREST_RATE", "DURATION"] | str


class SavingsFlexiblePositionOptions(RecvWindowOptions, total=False):
    asset: str


class SavingsCustomizedPositionOptions(RecvWindowOptions, total=False):
    asset: str
    projectId: int | str
    status: Literal["HOLDING", "REDEEMED"] | str


class SavingsRecordOptions(PagedTimeOptions, total=False):
    asset: str


class StakingProductListOptions(PagingOptions, total=False):
    asset: str


class StakingPurchaseProductOptions(RecvWindowOptions, total=False):
    renewable: str


class StakingRedeemProductOptions(RecvWindowOptions, total=False):
    positionId: str
    amount: Number


class StakingProductPositionOptions(PagingOptions, total=False):
    productId: int | str
    asset: str


class StakingHistoryOptions(PagedTimeOptions, total=False):
    asset: str


# -----------------------------------------------------------------------------
# Sub-account
# -----------------------------------------------------------------------------

class SubAccountListOptions(RecvWindowOptions, total=False):
    email: str
    isFreeze: Literal["true", "false"] | str
    page: int
    limit: int


class SubAccountTransferHistoryOptions(RecvWindowFilterOptions, total=False):
    fromEmail: str
    toEmail: str
    page: int


class SubAccountDepositAddressOptions(RecvWindowOptions, total=False):
    network: str


class SubAccountDepositHistoryOptions(RecvWindowFilterOptions, total=False):
    coin: str
    status: int
    offset: int


class SubAccountStatusOptions(RecvWindowOptions, total=False):
    email: str


class SubAccountTransferSubAccountHistoryOptions(RecvWindowFilterOptions, total=False):
    asset: str
    type: int


class SubAccountFuturesAssetTransferHistoryOptions(RecvWindowFilterOptions, total=False):
    page: int


class SubAccountSpotSummaryOptions(RecvWindowOptions, total=False):
    email: str
    page: int
    size: int


class ManagedSubAccountWithdrawOptions(RecvWindowOptions, total=False):
    transferDate: int


class ManagedSubAccountSnapshotOptions(RecvWindowFilterOptions, total=False):
    pass


class SubAccountUniversalTransferOptions(RecvWindowOptions, total=False):
    fromEmail: str
    toEmail: str
    clientTranId: str
    symbol: str


class SubAccountUniversalTransferHistoryOptions(RecvWindowFilterOptions, total=False):
    fromEmail: str
    toEmail: str
    clientTranId: str
    page: int


class SubAccountPageLimitOptions(RecvWindowOptions, total=False):
    page: int
    limit: int


# -----------------------------------------------------------------------------
# Convert / BLVT / BSwap
# -----------------------------------------------------------------------------

class ConvertQuoteOptions(RecvWindowOptions, total=False):
    fromAmount: Number
    toAmount: Number
    walletType: str
    validTime: Literal["10s", "30s", "1m", "2m"] | str


class ConvertOrderStatusOptions(RecvWindowOptions, total=False):
    orderId: str
    quoteId: str


class ConvertTradeHistoryOptions(RecvWindowOptions, LimitOptions, total=False):
    pass


class BlvtInfoOptions(TypedDict, total=False):
    tokenName: str


class BlvtRecordOptions(RecvWindowFilterOptions, total=False):
    tokenName: str
    id: int


class PoolIdOptions(RecvWindowOptions, total=False):
    poolId: int


class BswapLiquidityAddOptions(RecvWindowOptions, total=False):
    type: Literal["SINGLE", "COMBINATION"] | str


class BswapLiquidityOperationRecordOptions(PoolIdOptions, FilterOptions, total=False):
    operationId: int
    operation: Literal["ADD", "REMOVE"]


class BswapSwapHistoryOptions(RecvWindowFilterOptions, total=False):
    swapId: int
    status: int
    baseAsset: str
    quoteAsset: str


class BswapRewardOptions(RecvWindowOptions, total=False):
    type: int


class BswapClaimedHistoryOptions(PoolIdOptions, FilterOptions, total=False):
    type: int
    assetRewards: str


# -----------------------------------------------------------------------------
# C2C / Fiat / Loan / NFT / Pay / Rebate
# -----------------------------------------------------------------------------

class C2cTradeHistoryOptions(RecvWindowOptions, total=False):
    startTimestamp: int
    endTimestamp: int
    page: int
    rows: int


class FiatHistoryOptions(RecvWindowOptions, total=False):
    beginTime: int
    endTime: int
    page: int
    rows: int


class LoanHistoryOptions(RecvWindowFilterOptions, total=False):
    type: str


class NftHistoryOptions(RecvWindowFilterOptions, total=False):
    page: int


class NftAssetOptions(RecvWindowOptions, LimitOptions, total=False):
    page: int


class PayHistoryOptions(RecvWindowOptions, total=False):
    startTimestamp: int
    endTimestamp: int
    limit: int


class RebateSpotHistoryOptions(RecvWindowOptions, TimeFilterOptions, total=False):
    page: int
