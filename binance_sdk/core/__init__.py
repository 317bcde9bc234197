"""SDK 핵심 모듈: 설정, 서명, 요청 디스패치, 예외"""

from binance_sdk.core.config.loader import ClientConfig, Credentials
from binance_sdk.core.dispatcher import PreparedRequest, RequestDispatcher
from binance_sdk.core.errors import (
    BinanceApiError,
    BinanceClientError,
    MissingSecretError,
    ParameterRequiredError,
)
from binance_sdk.core.signer import generate_signature
from binance_sdk.core.types import Product

__all__ = [
    "ClientConfig",
    "Credentials",
    "PreparedRequest",
    "RequestDispatcher",
    "BinanceApiError",
    "BinanceClientError",
    "MissingSecretError",
    "ParameterRequiredError",
    "generate_signature",
    "Product",
]
