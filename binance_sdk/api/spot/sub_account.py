"""
Sub-account API (마스터 계정 전용)

하위 계정 생성, 자산 조회, 계정 간 이체, Managed sub-account, API IP 제한.
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.options import Number, RecvWindowOptions
from binance_sdk.api.spot.options import (
    ManagedSubAccountSnapshotOptions,
    ManagedSubAccountWithdrawOptions,
    SubAccountDepositAddressOptions,
    SubAccountDepositHistoryOptions,
    SubAccountFuturesAssetTransferHistoryOptions,
    SubAccountListOptions,
    SubAccountPageLimitOptions,
    SubAccountSpotSummaryOptions,
    SubAccountStatusOptions,
    SubAccountTransferHistoryOptions,
    SubAccountTransferSubAccountHistoryOptions,
    SubAccountUniversalTransferHistoryOptions,
    SubAccountUniversalTransferOptions,
)
from binance_sdk.core.config.loader import Credentials
from binance_sdk.core.utils.params import merge_params
from binance_sdk.core.utils.validation import validate_required_parameters


class SubAccountApi(ApiGroup):
    """Sub-account API"""

    # -------------------------------------------------------------------------
    # 조회
    # -------------------------------------------------------------------------

    async def sub_account_list(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SubAccountListOptions],
    ) -> Any:
        """하위 계정 목록 (GET /sapi/v1/sub-account/list)"""
        return await self._signed(
            "GET", "/sapi/v1/sub-account/list", options,
            credentials=credentials, endpoint=endpoint,
        )

    async def sub_account_transfer_history(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SubAccountTransferHistoryOptions],
    ) -> Any:
        """하위 계정 Spot 이체 내역 (GET /sapi/v1/sub-account/sub/transfer/history)"""
        return await self._signed(
            "GET", "/sapi/v1/sub-account/sub/transfer/history", options,
            credentials=credentials, endpoint=endpoint,
        )

    async def sub_account_assets(
        self,
        email: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """하위 계정 자산 (GET /sapi/v3/sub-account/assets)"""
        validate_required_parameters(email=email)
        return await self._signed(
            "GET", "/sapi/v3/sub-account/assets", merge_params(options, email=email),
            credentials=credentials, endpoint=endpoint,
        )

    async def sub_account_deposit_address(
        self,
        email: str,
        coin: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SubAccountDepositAddressOptions],
    ) -> Any:
        """하위 계정 입금 주소 (GET /sapi/v1/capital/deposit/subAddress)"""
        validate_required_parameters(email=email, coin=coin)
        return await self._signed(
            "GET", "/sapi/v1/capital/deposit/subAddress",
            merge_params(options, email=email, coin=coin),
            credentials=credentials, endpoint=endpoint,
        )

    async def sub_account_deposit_history(
        self,
        email: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SubAccountDepositHistoryOptions],
    ) -> Any:
        """하위 계정 입금 내역 (GET /sapi/v1/capital/deposit/subHisrec)"""
        validate_required_parameters(email=email)
        return await self._signed(
            "GET", "/sapi/v1/capital/deposit/subHisrec", merge_params(options, email=email),
            credentials=credentials, endpoint=endpoint,
        )

    async def sub_account_status(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SubAccountStatusOptions],
    ) -> Any:
        """하위 계정 Margin/Futures 활성화 상태 (GET /sapi/v1/sub-account/status)"""
        return await self._signed(
            "GET", "/sapi/v1/sub-account/status", options,
            credentials=credentials, endpoint=endpoint,
        )

    async def sub_account_spot_summary(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SubAccountSpotSummaryOptions],
    ) -> Any:
        """하위 계정 BTC 환산 Spot 자산 요약 (GET /sapi/v1/sub-account/spotSummary)"""
        return await self._signed(
            "GET", "/sapi/v1/sub-account/spotSummary", options,
            credentials=credentials, endpoint=endpoint,
        )

    async def sub_account_creation(
        self,
        sub_account_string: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """가상 하위 계정 생성 (POST /sapi/v1/sub-account/virtualSubAccount)"""
        validate_required_parameters(subAccountString=sub_account_string)
        return await self._signed(
            "POST", "/sapi/v1/sub-account/virtualSubAccount",
            merge_params(options, subAccountString=sub_account_string),
            credentials=credentials, endpoint=endpoint,
        )

    async def sub_account_leverage_token(
        self,
        email: str,
        enable_blvt: bool,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """하위 계정 BLVT 활성화 (POST /sapi/v1/sub-account/blvt/enable)

        enable_blvt=False도 유효한 값이다.
        """
        validate_required_parameters(email=email, enableBlvt=enable_blvt)
        return await self._signed(
            "POST", "/sapi/v1/sub-account/blvt/enable",
            merge_params(options, email=email, enableBlvt=enable_blvt),
            credentials=credentials, endpoint=endpoint,
        )

    # -------------------------------------------------------------------------
    # Margin
    # -------------------------------------------------------------------------

    async def sub_account_enable_margin(
        self,
        email: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """하위 계정 Margin 활성화 (POST /sapi/v1/sub-account/margin/enable)"""
        validate_required_parameters(email=email)
        return await self._signed(
            "POST", "/sapi/v1/sub-account/margin/enable", merge_params(options, email=email),
            credentials=credentials, endpoint=endpoint,
        )

    async def sub_account_margin_account(
        self,
        email: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """하위 계정 Margin 계정 상세 (GET /sapi/v1/sub-account/margin/account)"""
        validate_required_parameters(email=email)
        return await self._signed(
            "GET", "/sapi/v1/sub-account/margin/account", merge_params(options, email=email),
            credentials=credentials, endpoint=endpoint,
        )

    async def sub_account_margin_account_summary(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """하위 계정 Margin 요약 (GET /sapi/v1/sub-account/margin/accountSummary)"""
        return await self._signed(
            "GET", "/sapi/v1/sub-account/margin/accountSummary", options,
            credentials=credentials, endpoint=endpoint,
        )

    async def sub_account_margin_transfer(
        self,
        email: str,
        asset: str,
        amount: Number,
        type: int,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """하위 계정 Margin 이체 (POST /sapi/v1/sub-account/margin/transfer)

        Args:
            type: 1 = spot → margin, 2 = margin → spot
        """
        validate_required_parameters(email=email, asset=asset, amount=amount, type=type)
        return await self._signed(
            "POST", "/sapi/v1/sub-account/margin/transfer",
            merge_params(options, email=email, asset=asset, amount=amount, type=type),
            credentials=credentials, endpoint=endpoint,
        )

    # -------------------------------------------------------------------------
    # Futures
    # -------------------------------------------------------------------------

    async def sub_account_enable_futures(
        self,
        email: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """하위 계정 Futures 활성화 (POST /sapi/v1/sub-account/futures/enable)"""
        validate_required_parameters(email=email)
        return await self._signed(
            "POST", "/sapi/v1/sub-account/futures/enable", merge_params(options, email=email),
            credentials=credentials, endpoint=endpoint,
        )

    async def sub_account_futures_account(
        self,
        email: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """하위 계정 Futures 계정 상세 (GET /sapi/v1/sub-account/futures/account)"""
        validate_required_parameters(email=email)
        return await self._signed(
            "GET", "/sapi/v1/sub-account/futures/account", merge_params(options, email=email),
            credentials=credentials, endpoint=endpoint,
        )

    async def sub_account_futures_account_summary(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """하위 계정 Futures 요약 (GET /sapi/v1/sub-account/futures/accountSummary)"""
        return await self._signed(
            "GET", "/sapi/v1/sub-account/futures/accountSummary", options,
            credentials=credentials, endpoint=endpoint,
        )

    async def sub_account_futures_position_risk(
        self,
        email: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """하위 계정 Futures 포지션 위험도 (GET /sapi/v1/sub-account/futures/positionRisk)"""
        validate_required_parameters(email=email)
        return await self._signed(
            "GET", "/sapi/v1/sub-account/futures/positionRisk",
            merge_params(options, email=email),
            credentials=credentials, endpoint=endpoint,
        )

    async def sub_account_futures_transfer(
        self,
        email: str,
        asset: str,
        amount: Number,
        type: int,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """하위 계정 Futures 이체 (POST /sapi/v1/sub-account/futures/transfer)

        Args:
            type: 1 = spot → USD-M, 2 = USD-M → spot, 3 = spot → COIN-M, 4 = COIN-M → spot
        """
        validate_required_parameters(email=email, asset=asset, amount=amount, type=type)
        return await self._signed(
            "POST", "/sapi/v1/sub-account/futures/transfer",
            merge_params(options, email=email, asset=asset, amount=amount, type=type),
            credentials=credentials, endpoint=endpoint,
        )

    async def sub_account_futures_asset_transfer_history(
        self,
        email: str,
        futures_type: int,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SubAccountFuturesAssetTransferHistoryOptions],
    ) -> Any:
        """하위 계정 Futures 자산 이체 내역 (GET /sapi/v1/sub-account/futures/internalTransfer)"""
        validate_required_parameters(email=email, futuresType=futures_type)
        return await self._signed(
            "GET", "/sapi/v1/sub-account/futures/internalTransfer",
            merge_params(options, email=email, futuresType=futures_type),
            credentials=credentials, endpoint=endpoint,
        )

    async def sub_account_futures_asset_transfer(
        self,
        from_email: str,
        to_email: str,
        futures_type: int,
        asset: str,
        amount: Number,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """하위 계정 간 Futures 자산 이체 (POST /sapi/v1/sub-account/futures/internalTransfer)"""
        validate_required_parameters(
            fromEmail=from_email,
            toEmail=to_email,
            futuresType=futures_type,
            asset=asset,
            amount=amount,
        )
        return await self._signed(
            "POST", "/sapi/v1/sub-account/futures/internalTransfer",
            merge_params(
                options,
                fromEmail=from_email,
                toEmail=to_email,
                futuresType=futures_type,
                asset=asset,
                amount=amount,
            ),
            credentials=credentials, endpoint=endpoint,
        )

    async def sub_account_futures_account_v2(
        self,
        email: str,
        futures_type: int,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """하위 계정 Futures 계정 상세 V2 (GET /sapi/v2/sub-account/futures/account)

        Args:
            futures_type: 1 = USD-M, 2 = COIN-M
        """
        validate_required_parameters(email=email, futuresType=futures_type)
        return await self._signed(
            "GET", "/sapi/v2/sub-account/futures/account",
            merge_params(options, email=email, futuresType=futures_type),
            credentials=credentials, endpoint=endpoint,
        )

    async def sub_account_futures_account_summary_v2(
        self,
        futures_type: int,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SubAccountPageLimitOptions],
    ) -> Any:
        """하위 계정 Futures 요약 V2 (GET /sapi/v2/sub-account/futures/accountSummary)"""
        validate_required_parameters(futuresType=futures_type)
        return await self._signed(
            "GET", "/sapi/v2/sub-account/futures/accountSummary",
            merge_params(options, futuresType=futures_type),
            credentials=credentials, endpoint=endpoint,
        )

    async def sub_account_futures_position_risk_v2(
        self,
        email: str,
        futures_type: int,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """하위 계정 Futures 포지션 위험도 V2 (GET /sapi/v2/sub-account/futures/positionRisk)"""
        validate_required_parameters(email=email, futuresType=futures_type)
        return await self._signed(
            "GET", "/sapi/v2/sub-account/futures/positionRisk",
            merge_params(options, email=email, futuresType=futures_type),
            credentials=credentials, endpoint=endpoint,
        )

    # -------------------------------------------------------------------------
    # 이체
    # -------------------------------------------------------------------------

    async def sub_account_transfer_to_sub(
        self,
        to_email: str,
        asset: str,
        amount: Number,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """하위 계정 → 하위 계정 이체 (POST /sapi/v1/sub-account/transfer/subToSub)"""
        validate_required_parameters(toEmail=to_email, asset=asset, amount=amount)
        return await self._signed(
            "POST", "/sapi/v1/sub-account/transfer/subToSub",
            merge_params(options, toEmail=to_email, asset=asset, amount=amount),
            credentials=credentials, endpoint=endpoint,
        )

    async def sub_account_transfer_to_master(
        self,
        asset: str,
        amount: Number,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """하위 계정 → 마스터 이체 (POST /sapi/v1/sub-account/transfer/subToMaster)"""
        validate_required_parameters(asset=asset, amount=amount)
        return await self._signed(
            "POST", "/sapi/v1/sub-account/transfer/subToMaster",
            merge_params(options, asset=asset, amount=amount),
            credentials=credentials, endpoint=endpoint,
        )

    async def sub_account_transfer_sub_account_history(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SubAccountTransferSubAccountHistoryOptions],
    ) -> Any:
        """하위 계정 이체 내역 (GET /sapi/v1/sub-account/transfer/subUserHistory)"""
        return await self._signed(
            "GET", "/sapi/v1/sub-account/transfer/subUserHistory", options,
            credentials=credentials, endpoint=endpoint,
        )

    async def sub_account_universal_transfer(
        self,
        from_account_type: str,
        to_account_type: str,
        asset: str,
        amount: Number,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SubAccountUniversalTransferOptions],
    ) -> Any:
        """유니버설 이체 (POST /sapi/v1/sub-account/universalTransfer)

        Args:
            from_account_type / to_account_type:
                SPOT, USDT_FUTURE, COIN_FUTURE, MARGIN, ISOLATED_MARGIN
        """
        validate_required_parameters(
            fromAccountType=from_account_type,
            toAccountType=to_account_type,
            asset=asset,
            amount=amount,
        )
        return await self._signed(
            "POST", "/sapi/v1/sub-account/universalTransfer",
            merge_params(
                options,
                fromAccountType=from_account_type,
                toAccountType=to_account_type,
                asset=asset,
                amount=amount,
            ),
            credentials=credentials, endpoint=endpoint,
        )

    async def sub_account_universal_transfer_history(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SubAccountUniversalTransferHistoryOptions],
    ) -> Any:
        """유니버설 이체 내역 (GET /sapi/v1/sub-account/universalTransfer)"""
        return await self._signed(
            "GET", "/sapi/v1/sub-account/universalTransfer", options,
            credentials=credentials, endpoint=endpoint,
        )

    # -------------------------------------------------------------------------
    # Managed sub-account
    # -------------------------------------------------------------------------

    async def managed_sub_account_deposit(
        self,
        to_email: str,
        asset: str,
        amount: Number,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """Managed 하위 계정 입금 (POST /sapi/v1/managed-subaccount/deposit)"""
        validate_required_parameters(toEmail=to_email, asset=asset, amount=amount)
        return await self._signed(
            "POST", "/sapi/v1/managed-subaccount/deposit",
            merge_params(options, toEmail=to_email, asset=asset, amount=amount),
            credentials=credentials, endpoint=endpoint,
        )

    async def managed_sub_account_assets(
        self,
        email: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """Managed 하위 계정 자산 (GET /sapi/v1/managed-subaccount/asset)"""
        validate_required_parameters(email=email)
        return await self._signed(
            "GET", "/sapi/v1/managed-subaccount/asset", merge_params(options, email=email),
            credentials=credentials, endpoint=endpoint,
        )

    async def managed_sub_account_withdraw(
        self,
        from_email: str,
        asset: str,
        amount: Number,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[ManagedSubAccountWithdrawOptions],
    ) -> Any:
        """Managed 하위 계정 출금 (POST /sapi/v1/managed-subaccount/withdraw)"""
        validate_required_parameters(fromEmail=from_email, asset=asset, amount=amount)
        return await self._signed(
            "POST", "/sapi/v1/managed-subaccount/withdraw",
            merge_params(options, fromEmail=from_email, asset=asset, amount=amount),
            credentials=credentials, endpoint=endpoint,
        )

    async def managed_sub_account_snapshot(
        self,
        email: str,
        type: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[ManagedSubAccountSnapshotOptions],
    ) -> Any:
        """Managed 하위 계정 스냅샷 (GET /sapi/v1/managed-subaccount/accountSnapshot)"""
        validate_required_parameters(email=email, type=type)
        return await self._signed(
            "GET", "/sapi/v1/managed-subaccount/accountSnapshot",
            merge_params(options, email=email, type=type),
            credentials=credentials, endpoint=endpoint,
        )

    # -------------------------------------------------------------------------
    # 하위 계정 API IP 제한
    # -------------------------------------------------------------------------

    async def sub_account_api_toggle_ip_restriction(
        self,
        email: str,
        sub_account_api_key: str,
        ip_restrict: bool,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """IP 제한 켜기/끄기 (POST /sapi/v1/sub-account/subAccountApi/ipRestriction)"""
        validate_required_parameters(
            email=email, subAccountApiKey=sub_account_api_key, ipRestrict=ip_restrict
        )
        return await self._signed(
            "POST", "/sapi/v1/sub-account/subAccountApi/ipRestriction",
            merge_params(
                options, email=email, subAccountApiKey=sub_account_api_key, ipRestrict=ip_restrict
            ),
            credentials=credentials, endpoint=endpoint,
        )

    async def sub_account_api_add_ip(
        self,
        email: str,
        sub_account_api_key: str,
        ip_address: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """IP 허용 목록 추가 (POST /sapi/v1/sub-account/subAccountApi/ipRestriction/ipList)"""
        validate_required_parameters(
            email=email, subAccountApiKey=sub_account_api_key, ipAddress=ip_address
        )
        return await self._signed(
            "POST", "/sapi/v1/sub-account/subAccountApi/ipRestriction/ipList",
            merge_params(
                options, email=email, subAccountApiKey=sub_account_api_key, ipAddress=ip_address
            ),
            credentials=credentials, endpoint=endpoint,
        )

    async def sub_account_api_get_ip_restriction(
        self,
        email: str,
        sub_account_api_key: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """IP 제한 조회 (GET /sapi/v1/sub-account/subAccountApi/ipRestriction)"""
        validate_required_parameters(email=email, subAccountApiKey=sub_account_api_key)
        return await self._signed(
            "GET", "/sapi/v1/sub-account/subAccountApi/ipRestriction",
            merge_params(options, email=email, subAccountApiKey=sub_account_api_key),
            credentials=credentials, endpoint=endpoint,
        )

    async def sub_account_api_delete_ip(
        self,
        email: str,
        sub_account_api_key: str,
        ip_address: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """IP 허용 목록 삭제 (DELETE /sapi/v1/sub-account/subAccountApi/ipRestriction/ipList)"""
        validate_required_parameters(
            email=email, subAccountApiKey=sub_account_api_key, ipAddress=ip_address
        )
        return await self._signed(
            "DELETE", "/sapi/v1/sub-account/subAccountApi/ipRestriction/ipList",
            merge_params(
                options, email=email, subAccountApiKey=sub_account_api_key, ipAddress=ip_address
            ),
            credentials=credentials, endpoint=endpoint,
        )
