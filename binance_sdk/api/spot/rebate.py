"""
Rebate API
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.spot.options import RebateSpotHistoryOptions
from binance_sdk.core.config.loader import Credentials


class RebateApi(ApiGroup):
    async def rebate_spot_history(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RebateSpotHistoryOptions],
    ) -> Any:
        """현물 리베이트 내역 (GET /sapi/v1/rebate/taxQuery)"""
        return await self._signed(
            "GET", "/sapi/v1/rebate/taxQuery", options, credentials=credentials, endpoint=endpoint
        )
