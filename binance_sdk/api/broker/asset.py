"""
Broker 하위 계정 자산 요약

V1 요약 조회는 subAccountId 또는 size 중 하나가 필요하다.
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.broker.options import SubAccountAssetOptions
from binance_sdk.core.config.loader import Credentials
from binance_sdk.core.utils.params import merge_params
from binance_sdk.core.utils.validation import (
    has_one_of_parameters,
    validate_required_parameters,
)


class BrokerAssetApi(ApiGroup):
    """Broker 자산 API"""

    async def _summary(
        self,
        path: str,
        options: SubAccountAssetOptions,
        credentials: Credentials | None,
        endpoint: str | None,
    ) -> Any:
        has_one_of_parameters(subAccountId=options.get("subAccountId"), size=options.get("size"))
        return await self._signed("GET", path, options, credentials=credentials, endpoint=endpoint)

    async def spot_summary(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SubAccountAssetOptions],
    ) -> Any:
        """현물 자산 요약 (GET /sapi/v1/broker/subAccount/spotSummary)"""
        return await self._summary(
            "/sapi/v1/broker/subAccount/spotSummary", options, credentials, endpoint
        )

    async def margin_summary(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SubAccountAssetOptions],
    ) -> Any:
        """마진 자산 요약 (GET /sapi/v1/broker/subAccount/marginSummary)"""
        return await self._summary(
            "/sapi/v1/broker/subAccount/marginSummary", options, credentials, endpoint
        )

    async def futures_summary(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SubAccountAssetOptions],
    ) -> Any:
        """선물 자산 요약 (GET /sapi/v1/broker/subAccount/futuresSummary)"""
        return await self._summary(
            "/sapi/v1/broker/subAccount/futuresSummary", options, credentials, endpoint
        )

    async def futures_summary_v2(
        self,
        futures_type: int,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SubAccountAssetOptions],
    ) -> Any:
        """선물 자산 요약 V2 (GET /sapi/v2/broker/subAccount/futuresSummary)

        Args:
            futures_type: 1 = USDT-M, 2 = COIN-M
        """
        validate_required_parameters(futuresType=futures_type)
        return await self._signed(
            "GET",
            "/sapi/v2/broker/subAccount/futuresSummary",
            merge_params(options, futuresType=futures_type),
            credentials=credentials,
            endpoint=endpoint,
        )
