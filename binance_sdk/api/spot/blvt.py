"""
BLVT (Binance Leveraged Token) API

blvt_info만 공개 요청.
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.options import Number, RecvWindowOptions
from binance_sdk.api.spot.options import BlvtInfoOptions, BlvtRecordOptions
from binance_sdk.core.config.loader import Credentials
from binance_sdk.core.utils.params import merge_params
from binance_sdk.core.utils.validation import validate_required_parameters


class BlvtApi(ApiGroup):
    """BLVT API"""

    async def blvt_info(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[BlvtInfoOptions],
    ) -> Any:
        """BLVT 정보 (GET /sapi/v1/blvt/tokenInfo)"""
        return await self._public(
            "GET", "/sapi/v1/blvt/tokenInfo", options, credentials=credentials, endpoint=endpoint
        )

    async def subscribe_blvt(
        self,
        token_name: str,
        cost: Number,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """BLVT 구독 (POST /sapi/v1/blvt/subscribe)"""
        validate_required_parameters(tokenName=token_name, cost=cost)
        return await self._signed(
            "POST",
            "/sapi/v1/blvt/subscribe",
            merge_params(options, tokenName=token_name, cost=cost),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def blvt_subscription_record(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[BlvtRecordOptions],
    ) -> Any:
        """BLVT 구독 내역 (GET /sapi/v1/blvt/subscribe/record)"""
        return await self._signed(
            "GET",
            "/sapi/v1/blvt/subscribe/record",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    async def redeem_blvt(
        self,
        token_name: str,
        amount: Number,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """BLVT 상환 (POST /sapi/v1/blvt/redeem)"""
        validate_required_parameters(tokenName=token_name, amount=amount)
        return await self._signed(
            "POST",
            "/sapi/v1/blvt/redeem",
            merge_params(options, tokenName=token_name, amount=amount),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def blvt_redemption_record(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[BlvtRecordOptions],
    ) -> Any:
        """BLVT 상환 내역 (GET /sapi/v1/blvt/redeem/record)"""
        return await self._signed(
            "GET",
            "/sapi/v1/blvt/redeem/record",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )
