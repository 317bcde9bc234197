"""COIN-M 선물 엔드포인트"""

from binance_sdk.api.coinm.client import CoinMFutures

__all__ = ["CoinMFutures"]
