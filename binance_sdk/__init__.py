"""
Binance REST API 비동기 클라이언트

제품군별 클라이언트(Spot, UsdMFutures, CoinMFutures, Broker)와
이를 묶은 BinanceClient를 제공한다.
"""

from binance_sdk.api.broker import Broker
from binance_sdk.api.coinm import CoinMFutures
from binance_sdk.api.spot import Spot
from binance_sdk.api.usdm import UsdMFutures
from binance_sdk.client import BinanceClient
from binance_sdk.core.config.loader import (
    ClientConfig,
    Credentials,
    get_client_config,
    load_secrets,
)
from binance_sdk.core.constants import SDK_VERSION
from binance_sdk.core.errors import (
    BinanceApiError,
    BinanceClientError,
    MissingSecretError,
    ParameterRequiredError,
)

__version__ = SDK_VERSION

__all__ = [
    "BinanceClient",
    "Spot",
    "UsdMFutures",
    "CoinMFutures",
    "Broker",
    "ClientConfig",
    "Credentials",
    "get_client_config",
    "load_secrets",
    "BinanceApiError",
    "BinanceClientError",
    "MissingSecretError",
    "ParameterRequiredError",
]
