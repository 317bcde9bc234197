"""
C2C API
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.spot.options import C2cTradeHistoryOptions
from binance_sdk.core.config.loader import Credentials
from binance_sdk.core.utils.params import merge_params
from binance_sdk.core.utils.validation import validate_required_parameters


class C2cApi(ApiGroup):
    async def c2c_trade_history(
        self,
        trade_type: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[C2cTradeHistoryOptions],
    ) -> Any:
        """C2C 거래 내역 (GET /sapi/v1/c2c/orderMatch/listUserOrderHistory)

        Args:
            trade_type: "BUY" | "SELL"
        """
        validate_required_parameters(tradeType=trade_type)
        return await self._signed(
            "GET",
            "/sapi/v1/c2c/orderMatch/listUserOrderHistory",
            merge_params(options, tradeType=trade_type),
            credentials=credentials,
            endpoint=endpoint,
        )
