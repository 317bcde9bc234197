"""
Broker 계정 정보
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.options import RecvWindowOptions
from binance_sdk.core.config.loader import Credentials


class BrokerInfoApi(ApiGroup):
    async def account(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """Broker 계정 정보 (GET /sapi/v1/broker/info)"""
        return await self._signed(
            "GET", "/sapi/v1/broker/info", options, credentials=credentials, endpoint=endpoint
        )
