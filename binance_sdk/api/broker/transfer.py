"""
Broker 이체 (현물 / 선물)

fromId, toId를 비우면 Broker 본 계정이 대상이 된다.
futures_type: 1 = USDT-M, 2 = COIN-M
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.broker.options import (
    FuturesTransferHistoryOptions,
    TransferHistoryOptions,
    TransferOptions,
)
from binance_sdk.api.options import Number
from binance_sdk.core.config.loader import Credentials
from binance_sdk.core.utils.params import merge_params
from binance_sdk.core.utils.validation import validate_required_parameters


class BrokerTransferApi(ApiGroup):
    """Broker 이체 API"""

    async def spot_transfer(
        self,
        asset: str,
        amount: Number,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[TransferOptions],
    ) -> Any:
        """현물 이체 (POST /sapi/v1/broker/transfer)"""
        validate_required_parameters(asset=asset, amount=amount)
        return await self._signed(
            "POST",
            "/sapi/v1/broker/transfer",
            merge_params(options, asset=asset, amount=amount),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def spot_transfer_history(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[TransferHistoryOptions],
    ) -> Any:
        """현물 이체 내역 (GET /sapi/v1/broker/transfer)"""
        return await self._signed(
            "GET", "/sapi/v1/broker/transfer", options, credentials=credentials, endpoint=endpoint
        )

    async def futures_transfer(
        self,
        futures_type: int,
        asset: str,
        amount: Number,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[TransferOptions],
    ) -> Any:
        """선물 이체 (POST /sapi/v1/broker/transfer/futures)"""
        validate_required_parameters(futuresType=futures_type, asset=asset, amount=amount)
        return await self._signed(
            "POST",
            "/sapi/v1/broker/transfer/futures",
            merge_params(options, futuresType=futures_type, asset=asset, amount=amount),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def futures_transfer_history(
        self,
        sub_account_id: str,
        futures_type: int,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[FuturesTransferHistoryOptions],
    ) -> Any:
        """선물 이체 내역 (GET /sapi/v1/broker/transfer/futures)"""
        validate_required_parameters(subAccountId=sub_account_id, futuresType=futures_type)
        return await self._signed(
            "GET",
            "/sapi/v1/broker/transfer/futures",
            merge_params(options, subAccountId=sub_account_id, futuresType=futures_type),
            credentials=credentials,
            endpoint=endpoint,
        )
