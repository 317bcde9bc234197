"""
Broker 하위 계정 수수료 조정

선물 수수료 조정값(makerAdjustment / takerAdjustment)은 기본 수수료 대비 가감분.
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.broker.options import (
    ChangeCommissionOptions,
    CoinFuturesCommissionOptions,
    UsdtFuturesCommissionOptions,
)
from binance_sdk.api.options import Number, RecvWindowOptions
from binance_sdk.core.config.loader import Credentials
from binance_sdk.core.utils.params import merge_params
from binance_sdk.core.utils.validation import validate_required_parameters


class BrokerCommissionApi(ApiGroup):
    """Broker 수수료 API"""

    async def change_commission(
        self,
        sub_account_id: str,
        maker_commission: Number,
        taker_commission: Number,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[ChangeCommissionOptions],
    ) -> Any:
        """현물 수수료 변경 (POST /sapi/v1/broker/subAccountApi/commission)"""
        validate_required_parameters(
            subAccountId=sub_account_id,
            makerCommission=maker_commission,
            takerCommission=taker_commission,
        )
        return await self._signed(
            "POST",
            "/sapi/v1/broker/subAccountApi/commission",
            merge_params(
                options,
                subAccountId=sub_account_id,
                makerCommission=maker_commission,
                takerCommission=taker_commission,
            ),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def change_usdt_futures_commission(
        self,
        sub_account_id: str,
        symbol: str,
        maker_adjustment: int,
        taker_adjustment: int,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """USDT-M 선물 수수료 조정 (POST /sapi/v1/broker/subAccountApi/commission/futures)"""
        validate_required_parameters(
            subAccountId=sub_account_id,
            symbol=symbol,
            makerAdjustment=maker_adjustment,
            takerAdjustment=taker_adjustment,
        )
        return await self._signed(
            "POST",
            "/sapi/v1/broker/subAccountApi/commission/futures",
            merge_params(
                options,
                subAccountId=sub_account_id,
                symbol=symbol,
                makerAdjustment=maker_adjustment,
                takerAdjustment=taker_adjustment,
            ),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def usdt_futures_commission(
        self,
        sub_account_id: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[UsdtFuturesCommissionOptions],
    ) -> Any:
        """USDT-M 선물 수수료 조정 조회 (GET /sapi/v1/broker/subAccountApi/commission/futures)"""
        validate_required_parameters(subAccountId=sub_account_id)
        return await self._signed(
            "GET",
            "/sapi/v1/broker/subAccountApi/commission/futures",
            merge_params(options, subAccountId=sub_account_id),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def change_coin_futures_commission(
        self,
        sub_account_id: str,
        pair: str,
        maker_adjustment: int,
        taker_adjustment: int,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """COIN-M 선물 수수료 조정 (POST /sapi/v1/broker/subAccountApi/commission/coinFutures)"""
        validate_required_parameters(
            subAccountId=sub_account_id,
            pair=pair,
            makerAdjustment=maker_adjustment,
            takerAdjustment=taker_adjustment,
        )
        return await self._signed(
            "POST",
            "/sapi/v1/broker/subAccountApi/commission/coinFutures",
            merge_params(
                options,
                subAccountId=sub_account_id,
                pair=pair,
                makerAdjustment=maker_adjustment,
                takerAdjustment=taker_adjustment,
            ),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def coin_futures_commission(
        self,
        sub_account_id: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[CoinFuturesCommissionOptions],
    ) -> Any:
        """COIN-M 선물 수수료 조정 조회 (GET /sapi/v1/broker/subAccountApi/commission/coinFutures)"""
        validate_required_parameters(subAccountId=sub_account_id)
        return await self._signed(
            "GET",
            "/sapi/v1/broker/subAccountApi/commission/coinFutures",
            merge_params(options, subAccountId=sub_account_id),
            credentials=credentials,
            endpoint=endpoint,
        )
