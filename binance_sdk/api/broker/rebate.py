"""
Broker 커미션 리베이트 내역
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.broker.options import RebateRecordOptions
from binance_sdk.core.config.loader import Credentials
from binance_sdk.core.utils.params import merge_params
from binance_sdk.core.utils.validation import validate_required_parameters


class BrokerRebateApi(ApiGroup):
    """Broker 리베이트 API"""

    async def spot_rebate_history(
        self,
        sub_account_id: str,
        start_time: int,
        end_time: int,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RebateRecordOptions],
    ) -> Any:
        """현물 리베이트 내역 (GET /sapi/v1/broker/rebate/recentRecord)"""
        validate_required_parameters(
            subAccountId=sub_account_id, startTime=start_time, endTime=end_time
        )
        return await self._signed(
            "GET",
            "/sapi/v1/broker/rebate/recentRecord",
            merge_params(
                options, subAccountId=sub_account_id, startTime=start_time, endTime=end_time
            ),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def futures_rebate_history(
        self,
        futures_type: int,
        start_time: int,
        end_time: int,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RebateRecordOptions],
    ) -> Any:
        """선물 리베이트 내역 (GET /sapi/v1/broker/rebate/futures/recentRecord)"""
        validate_required_parameters(
            futuresType=futures_type, startTime=start_time, endTime=end_time
        )
        return await self._signed(
            "GET",
            "/sapi/v1/broker/rebate/futures/recentRecord",
            merge_params(options, futuresType=futures_type, startTime=start_time, endTime=end_time),
            credentials=credentials,
            endpoint=endpoint,
        )
