"""Broker 엔드포인트"""

from binance_sdk.api.broker.client import Broker

__all__ = ["Broker"]
