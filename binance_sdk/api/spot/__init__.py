"""Spot / Margin / Wallet 및 기타 sapi 엔드포인트"""

from binance_sdk.api.spot.client import Spot

__all__ = ["Spot"]
