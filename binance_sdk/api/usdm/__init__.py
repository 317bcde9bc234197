"""USD-M 선물 엔드포인트"""

from binance_sdk.api.usdm.client import UsdMFutures

__all__ = ["UsdMFutures"]
