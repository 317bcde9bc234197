"""
Spot 클라이언트

현물 호스트(api.binance.com)에 묶인 디스패처 하나를 기능 영역별 ApiGroup이 공유한다.
"""

import httpx

from binance_sdk.api.spot.blvt import BlvtApi
from binance_sdk.api.spot.bswap import BswapApi
from binance_sdk.api.spot.c2c import C2cApi
from binance_sdk.api.spot.convert import ConvertApi
from binance_sdk.api.spot.fiat import FiatApi
from binance_sdk.api.spot.loan import LoanApi
from binance_sdk.api.spot.margin import MarginApi
from binance_sdk.api.spot.market import MarketApi
from binance_sdk.api.spot.nft import NftApi
from binance_sdk.api.spot.pay import PayApi
from binance_sdk.api.spot.portfolio_margin import PortfolioMarginApi
from binance_sdk.api.spot.rebate import RebateApi
from binance_sdk.api.spot.savings import SavingsApi
from binance_sdk.api.spot.staking import StakingApi
from binance_sdk.api.spot.stream import StreamApi
from binance_sdk.api.spot.sub_account import SubAccountApi
from binance_sdk.api.spot.trade import TradeApi
from binance_sdk.api.spot.wallet import WalletApi
from binance_sdk.core.config.loader import ClientConfig
from binance_sdk.core.dispatcher import RequestDispatcher
from binance_sdk.core.types import Product


class Spot:
    """Binance Spot REST 클라이언트

    사용법:
        async with Spot(ClientConfig(credentials=Credentials(key, secret))) as spot:
            await spot.market.ping()
            await spot.trade.new_order("BTCUSDT", "BUY", "MARKET", quantity="0.001")

    Args:
        config: 클라이언트 설정
        http_client: 공유할 httpx.AsyncClient (없으면 디스패처가 직접 생성)
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.config = config or ClientConfig()
        self.dispatcher = RequestDispatcher(self.config, Product.SPOT, http_client)

        self.market = MarketApi(self.dispatcher)
        self.trade = TradeApi(self.dispatcher)
        self.stream = StreamApi(self.dispatcher)
        self.wallet = WalletApi(self.dispatcher)
        self.margin = MarginApi(self.dispatcher)
        self.savings = SavingsApi(self.dispatcher)
        self.staking = StakingApi(self.dispatcher)
        self.sub_account = SubAccountApi(self.dispatcher)
        self.convert = ConvertApi(self.dispatcher)
        self.blvt = BlvtApi(self.dispatcher)
        self.bswap = BswapApi(self.dispatcher)
        self.c2c = C2cApi(self.dispatcher)
        self.fiat = FiatApi(self.dispatcher)
        self.loan = LoanApi(self.dispatcher)
        self.nft = NftApi(self.dispatcher)
        self.pay = PayApi(self.dispatcher)
        self.rebate = RebateApi(self.dispatcher)
        self.portfolio_margin = PortfolioMarginApi(self.dispatcher)

    async def close(self) -> None:
        await self.dispatcher.close()

    async def __aenter__(self) -> "Spot":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
