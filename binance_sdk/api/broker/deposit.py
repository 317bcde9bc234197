"""
Broker 하위 계정 입금 내역
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.broker.options import SubDepositHistoryOptions
from binance_sdk.core.config.loader import Credentials


class BrokerDepositApi(ApiGroup):
    async def sub_deposit_history(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SubDepositHistoryOptions],
    ) -> Any:
        """하위 계정 입금 내역 (GET /sapi/v1/broker/subAccount/depositHist)"""
        return await self._signed(
            "GET",
            "/sapi/v1/broker/subAccount/depositHist",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )
