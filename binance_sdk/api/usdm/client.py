"""
USD-M 선물 클라이언트 (fapi.binance.com)
"""

import httpx

from binance_sdk.api.usdm.data_stream import UsdMDataStreamApi
from binance_sdk.api.usdm.market import UsdMMarketApi
from binance_sdk.api.usdm.portfolio_margin import UsdMPortfolioMarginApi
from binance_sdk.api.usdm.trade import UsdMTradeApi
from binance_sdk.core.config.loader import ClientConfig
from binance_sdk.core.dispatcher import RequestDispatcher
from binance_sdk.core.types import Product


class UsdMFutures:
    """Binance USD-M 선물 REST 클라이언트

    Args:
        config: 클라이언트 설정
        http_client: 공유할 httpx.AsyncClient
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.config = config or ClientConfig()
        self.dispatcher = RequestDispatcher(self.config, Product.USDM, http_client)

        self.market = UsdMMarketApi(self.dispatcher)
        self.trade = UsdMTradeApi(self.dispatcher)
        self.data_stream = UsdMDataStreamApi(self.dispatcher)
        self.portfolio_margin = UsdMPortfolioMarginApi(self.dispatcher)

    async def close(self) -> None:
        await self.dispatcher.close()

    async def __aenter__(self) -> "UsdMFutures":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
