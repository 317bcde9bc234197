"""
COIN-M 선물 Portfolio Margin API
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.coinm.options import SymbolPairRecvWindowOptions
from binance_sdk.core.config.loader import Credentials


class CoinMPortfolioMarginApi(ApiGroup):
    async def pm_exchange_info(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SymbolPairRecvWindowOptions],
    ) -> Any:
        """포트폴리오 마진 거래 규칙 (GET /dapi/v1/pmExchangeInfo)"""
        return await self._signed(
            "GET", "/dapi/v1/pmExchangeInfo", options, credentials=credentials, endpoint=endpoint
        )
