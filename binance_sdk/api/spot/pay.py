"""
Binance Pay API
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.spot.options import PayHistoryOptions
from binance_sdk.core.config.loader import Credentials


class PayApi(ApiGroup):
    async def pay_history(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[PayHistoryOptions],
    ) -> Any:
        """Pay 거래 내역 (GET /sapi/v1/pay/transactions)"""
        return await self._signed(
            "GET", "/sapi/v1/pay/transactions", options, credentials=credentials, endpoint=endpoint
        )
