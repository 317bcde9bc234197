"""
Broker 요청 옵션 (TypedDict)
"""

from binance_sdk.api.options import FilterOptions, Number, RecvWindowOptions


class PageSizeOptions(RecvWindowOptions, total=False):
    page: int
    size: int


# =============================================================================
# 하위 계정
# =============================================================================


class CreateSubAccountOptions(RecvWindowOptions, total=False):
    tag: str


class CreateApiKeyOptions(RecvWindowOptions, total=False):
    marginTrade: bool | str
    futuresTrade: bool | str


class QueryApiKeyOptions(PageSizeOptions, total=False):
    subAccountApiKey: str


class SubAccountListOptions(PageSizeOptions, total=False):
    subAccountId: str


class SubAccountAssetOptions(PageSizeOptions, total=False):
    """subAccountId 또는 size 중 하나 필요"""

    subAccountId: str


# =============================================================================
# 수수료
# =============================================================================


class ChangeCommissionOptions(RecvWindowOptions, total=False):
    marginMakerCommission: Number
    marginTakerCommission: Number


class UsdtFuturesCommissionOptions(RecvWindowOptions, total=False):
    symbol: str


class CoinFuturesCommissionOptions(RecvWindowOptions, total=False):
    pair: str


# =============================================================================
# 이체
# =============================================================================


class TransferOptions(RecvWindowOptions, total=False):
    fromId: str
    toId: str
    clientTranId: str


class TransferHistoryOptions(TransferOptions, FilterOptions, total=False):
    showAllStatus: bool | str
    page: int


class FuturesTransferHistoryOptions(RecvWindowOptions, FilterOptions, total=False):
    page: int
    clientTranId: str


class UniversalTransferHistoryOptions(TransferHistoryOptions, total=False):
    pass


# =============================================================================
# 기타
# =============================================================================


class SubDepositHistoryOptions(RecvWindowOptions, FilterOptions, total=False):
    offset: int
    subAccountId: str
    coin: str
    status: int


class RebateRecordOptions(PageSizeOptions, total=False):
    pass
