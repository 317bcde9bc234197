"""
USD-M 선물 Portfolio Margin API
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.usdm.options import SymbolRecvWindowOptions
from binance_sdk.core.config.loader import Credentials


class UsdMPortfolioMarginApi(ApiGroup):
    async def pm_exchange_info(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SymbolRecvWindowOptions],
    ) -> Any:
        """포트폴리오 마진 거래 규칙 (GET /fapi/v1/pmExchangeInfo)"""
        return await self._signed(
            "GET", "/fapi/v1/pmExchangeInfo", options, credentials=credentials, endpoint=endpoint
        )
