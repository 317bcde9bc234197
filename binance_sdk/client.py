"""
통합 클라이언트

Spot / USD-M / COIN-M / Broker 네 제품군이 httpx.AsyncClient 하나를 공유한다.
"""

import logging

import httpx

from binance_sdk.api.broker.client import Broker
from binance_sdk.api.coinm.client import CoinMFutures
from binance_sdk.api.spot.client import Spot
from binance_sdk.api.usdm.client import UsdMFutures
from binance_sdk.core.config.loader import ClientConfig

logger = logging.getLogger(__name__)


class BinanceClient:
    """Binance REST 통합 클라이언트

    사용법:
        config = get_client_config(load_secrets())
        async with BinanceClient(config) as client:
            await client.spot.market.ping()
            await client.usdm.trade.balance()

    Args:
        config: 클라이언트 설정 (없으면 자격 증명 없는 운영 호스트 설정)
        http_client: 외부 httpx.AsyncClient (주입 시 close()가 닫지 않음)
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.config = config or ClientConfig()
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=self.config.timeout)

        self.spot = Spot(self.config, self._client)
        self.usdm = UsdMFutures(self.config, self._client)
        self.coinm = CoinMFutures(self.config, self._client)
        self.broker = Broker(self.config, self._client)

        logger.debug(
            "BinanceClient initialized",
            extra={
                "spot_url": self.config.spot_url,
                "usdm_url": self.config.usdm_url,
                "coinm_url": self.config.coinm_url,
            },
        )

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._client

    async def close(self) -> None:
        """공유 HTTP 클라이언트 종료 (직접 만든 경우만)"""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "BinanceClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
