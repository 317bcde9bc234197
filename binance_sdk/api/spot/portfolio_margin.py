"""
Portfolio Margin API (현물 호스트)
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.options import RecvWindowOptions
from binance_sdk.core.config.loader import Credentials


class PortfolioMarginApi(ApiGroup):
    async def portfolio_margin_account(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """포트폴리오 마진 계정 정보 (GET /sapi/v1/portfolio/account)"""
        return await self._signed(
            "GET", "/sapi/v1/portfolio/account", options, credentials=credentials, endpoint=endpoint
        )
