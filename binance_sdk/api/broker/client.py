"""
Broker 클라이언트 (현물 호스트의 /sapi/v1/broker/*)
"""

import httpx

from binance_sdk.api.broker.asset import BrokerAssetApi
from binance_sdk.api.broker.blvt import BrokerBlvtApi
from binance_sdk.api.broker.bnb_burn import BrokerBnbBurnApi
from binance_sdk.api.broker.commission import BrokerCommissionApi
from binance_sdk.api.broker.deposit import BrokerDepositApi
from binance_sdk.api.broker.info import BrokerInfoApi
from binance_sdk.api.broker.ip_restriction import BrokerIpRestrictionApi
from binance_sdk.api.broker.rebate import BrokerRebateApi
from binance_sdk.api.broker.sub_account import BrokerSubAccountApi
from binance_sdk.api.broker.transfer import BrokerTransferApi
from binance_sdk.api.broker.universal_transfer import BrokerUniversalTransferApi
from binance_sdk.core.config.loader import ClientConfig
from binance_sdk.core.dispatcher import RequestDispatcher
from binance_sdk.core.types import Product


class Broker:
    """Binance Broker REST 클라이언트

    Args:
        config: 클라이언트 설정 (Broker 마스터 계정 자격 증명)
        http_client: 공유할 httpx.AsyncClient
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.config = config or ClientConfig()
        self.dispatcher = RequestDispatcher(self.config, Product.SPOT, http_client)

        self.sub_account = BrokerSubAccountApi(self.dispatcher)
        self.commission = BrokerCommissionApi(self.dispatcher)
        self.transfer = BrokerTransferApi(self.dispatcher)
        self.universal_transfer = BrokerUniversalTransferApi(self.dispatcher)
        self.asset = BrokerAssetApi(self.dispatcher)
        self.bnb_burn = BrokerBnbBurnApi(self.dispatcher)
        self.ip_restriction = BrokerIpRestrictionApi(self.dispatcher)
        self.rebate = BrokerRebateApi(self.dispatcher)
        self.deposit = BrokerDepositApi(self.dispatcher)
        self.info = BrokerInfoApi(self.dispatcher)
        self.blvt = BrokerBlvtApi(self.dispatcher)

    async def close(self) -> None:
        await self.dispatcher.close()

    async def __aenter__(self) -> "Broker":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
