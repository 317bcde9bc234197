"""
Wallet API (/sapi/v1/capital, /sapi/v1/asset, /sapi/v1/account)

입출금, 자산 조회, 더스트 전환, 유니버설 이체.
systemStatus만 공개, 나머지는 모두 서명 요청.
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.options import Number, RecvWindowOptions
from binance_sdk.api.spot.options import (
    AccountSnapshotOptions,
    AssetDetailOptions,
    AssetDividendRecordOptions,
    DepositAddressOptions,
    DepositHistoryOptions,
    DustLogOptions,
    FundingWalletOptions,
    TradeFeeOptions,
    UserUniversalTransferHistoryOptions,
    UserUniversalTransferOptions,
    WithdrawHistoryOptions,
    WithdrawOptions,
)
from binance_sdk.core.config.loader import Credentials
from binance_sdk.core.types import AccountSnapshotType, UniversalTransferType
from binance_sdk.core.utils.params import merge_params
from binance_sdk.core.utils.validation import validate_required_parameters



class WalletApi(ApiGroup):
    """Wallet API"""

    async def system_status(
        self, *, credentials: Credentials | None = None, endpoint: str | None = None
    ) -> Any:
        """시스템 상태 (GET /sapi/v1/system/status)

        Returns:
            {"status": 0, "msg": "normal"}
        """
        return await self._public(
            "GET", "/sapi/v1/system/status", credentials=credentials, endpoint=endpoint
        )

    async def coin_info(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """전체 코인 정보 (GET /sapi/v1/capital/config/getall)"""
        return await self._signed(
            "GET",
            "/sapi/v1/capital/config/getall",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    async def account_snapshot(
        self,
        type: AccountSnapshotType | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[AccountSnapshotOptions],
    ) -> Any:
        """일별 계정 스냅샷 (GET /sapi/v1/accountSnapshot)

        Args:
            type: "SPOT" | "MARGIN" | "FUTURES"
        """
        validate_required_parameters(type=type)
        return await self._signed(
            "GET",
            "/sapi/v1/accountSnapshot",
            merge_params(options, type=type.upper()),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def disable_fast_withdraw(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """빠른 출금 스위치 끄기 (POST /sapi/v1/account/disableFastWithdrawSwitch)"""
        return await self._signed(
            "POST",
            "/sapi/v1/account/disableFastWithdrawSwitch",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    async def enable_fast_withdraw(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """빠른 출금 스위치 켜기 (POST /sapi/v1/account/enableFastWithdrawSwitch)"""
        return await self._signed(
            "POST",
            "/sapi/v1/account/enableFastWithdrawSwitch",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    # -------------------------------------------------------------------------
    # 입출금
    # -------------------------------------------------------------------------

    async def withdraw(
        self,
        coin: str,
        address: str,
        amount: Number,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[WithdrawOptions],
    ) -> Any:
        """출금 신청 (POST /sapi/v1/capital/withdraw/apply)

        Args:
            coin: 코인 (대문자로 변환)
            address: 출금 주소
            amount: 수량
            network / addressTag / withdrawOrderId ...: 선택

        Returns:
            {"id": "7213fea8e94b4a5593d507237e5a555b"}
        """
        validate_required_parameters(coin=coin, address=address, amount=amount)
        return await self._signed(
            "POST",
            "/sapi/v1/capital/withdraw/apply",
            merge_params(options, coin=coin.upper(), address=address, amount=amount),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def deposit_history(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[DepositHistoryOptions],
    ) -> Any:
        """입금 내역 (GET /sapi/v1/capital/deposit/hisrec)"""
        return await self._signed(
            "GET",
            "/sapi/v1/capital/deposit/hisrec",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    async def withdraw_history(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[WithdrawHistoryOptions],
    ) -> Any:
        """출금 내역 (GET /sapi/v1/capital/withdraw/history)"""
        return await self._signed(
            "GET",
            "/sapi/v1/capital/withdraw/history",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    async def deposit_address(
        self,
        coin: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[DepositAddressOptions],
    ) -> Any:
        """입금 주소 (GET /sapi/v1/capital/deposit/address)"""
        validate_required_parameters(coin=coin)
        return await self._signed(
            "GET",
            "/sapi/v1/capital/deposit/address",
            merge_params(options, coin=coin.upper()),
            credentials=credentials,
            endpoint=endpoint,
        )

    # -------------------------------------------------------------------------
    # 계정 상태
    # -------------------------------------------------------------------------

    async def account_status(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """계정 상태 (GET /sapi/v1/account/status)"""
        return await self._signed(
            "GET",
            "/sapi/v1/account/status",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    async def trading_status(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """API 거래 상태 (GET /sapi/v1/account/apiTradingStatus)"""
        return await self._signed(
            "GET",
            "/sapi/v1/account/apiTradingStatus",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    async def api_permissions(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """API 키 권한 (GET /sapi/v1/account/apiRestrictions)"""
        return await self._signed(
            "GET",
            "/sapi/v1/account/apiRestrictions",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    # -------------------------------------------------------------------------
    # 자산
    # -------------------------------------------------------------------------

    async def dust_log(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[DustLogOptions],
    ) -> Any:
        """더스트 전환 내역 (GET /sapi/v1/asset/dribblet)"""
        return await self._signed(
            "GET",
            "/sapi/v1/asset/dribblet",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    async def dust_transfer(
        self,
        asset: str | list[str],
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """소액 자산 BNB 전환 (POST /sapi/v1/asset/dust)

        Args:
            asset: 자산 하나 또는 목록 (목록은 ","로 연결)
        """
        validate_required_parameters(asset=asset)
        if isinstance(asset, (list, tuple)):
            asset = ",".join(asset)
        return await self._signed(
            "POST",
            "/sapi/v1/asset/dust",
            merge_params(options, asset=asset),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def bnb_convertible_assets(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """BNB 전환 가능 자산 (POST /sapi/v1/asset/dust-btc)"""
        return await self._signed(
            "POST",
            "/sapi/v1/asset/dust-btc",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    async def asset_dividend_record(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[AssetDividendRecordOptions],
    ) -> Any:
        """자산 배당 내역 (GET /sapi/v1/asset/assetDividend)"""
        return await self._signed(
            "GET",
            "/sapi/v1/asset/assetDividend",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    async def asset_detail(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[AssetDetailOptions],
    ) -> Any:
        """자산 상세 (GET /sapi/v1/asset/assetDetail)"""
        return await self._signed(
            "GET",
            "/sapi/v1/asset/assetDetail",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    async def trade_fee(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[TradeFeeOptions],
    ) -> Any:
        """거래 수수료 (GET /sapi/v1/asset/tradeFee)"""
        return await self._signed(
            "GET",
            "/sapi/v1/asset/tradeFee",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    async def funding_wallet(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[FundingWalletOptions],
    ) -> Any:
        """Funding 지갑 자산 (POST /sapi/v1/asset/get-funding-asset)"""
        return await self._signed(
            "POST",
            "/sapi/v1/asset/get-funding-asset",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    # -------------------------------------------------------------------------
    # 유니버설 이체
    # -------------------------------------------------------------------------

    async def user_universal_transfer(
        self,
        type: UniversalTransferType | str,
        asset: str,
        amount: Number,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[UserUniversalTransferOptions],
    ) -> Any:
        """지갑 간 이체 (POST /sapi/v1/asset/transfer)

        Args:
            type: 이체 유형 (예: MAIN_UMFUTURE)
            asset: 자산
            amount: 수량

        Returns:
            {"tranId": 13526853623}
        """
        validate_required_parameters(type=type, asset=asset, amount=amount)
        return await self._signed(
            "POST",
            "/sapi/v1/asset/transfer",
            merge_params(options, type=type, asset=asset, amount=amount),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def user_universal_transfer_history(
        self,
        type: UniversalTransferType | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[UserUniversalTransferHistoryOptions],
    ) -> Any:
        """지갑 간 이체 내역 (GET /sapi/v1/asset/transfer)"""
        validate_required_parameters(type=type)
        return await self._signed(
            "GET",
            "/sapi/v1/asset/transfer",
            merge_params(options, type=type),
            credentials=credentials,
            endpoint=endpoint,
        )
