"""
COIN-M 선물 클라이언트 (dapi.binance.com)
"""

import httpx

from binance_sdk.api.coinm.data_stream import CoinMDataStreamApi
from binance_sdk.api.coinm.market import CoinMMarketApi
from binance_sdk.api.coinm.portfolio_margin import CoinMPortfolioMarginApi
from binance_sdk.api.coinm.trade import CoinMTradeApi
from binance_sdk.core.config.loader import ClientConfig
from binance_sdk.core.dispatcher import RequestDispatcher
from binance_sdk.core.types import Product


class CoinMFutures:
    """Binance COIN-M 선물 REST 클라이언트

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
        self.dispatcher = RequestDispatcher(self.config, Product.COINM, http_client)

        self.market = CoinMMarketApi(self.dispatcher)
        self.trade = CoinMTradeApi(self.dispatcher)
        self.data_stream = CoinMDataStreamApi(self.dispatcher)
        self.portfolio_margin = CoinMPortfolioMarginApi(self.dispatcher)

    async def close(self) -> None:
        await self.dispatcher.close()

    async def __aenter__(self) -> "CoinMFutures":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
