"""
엔드포인트 래퍼 기반 클래스

기능 영역(market, wallet, margin ...)마다 ApiGroup 하위 클래스 하나.
각 메서드는 필수 인자 검증 → 새 파라미터 dict 병합 → 디스패처 호출만 한다.
"""

import json
from collections.abc import Mapping, Sequence
from typing import Any

from binance_sdk.core.config.loader import Credentials
from binance_sdk.core.dispatcher import RequestDispatcher
from binance_sdk.core.types import HttpMethod


class ApiGroup:
    """디스패처 하나를 공유하는 엔드포인트 묶음

    Args:
        dispatcher: 제품군에 묶인 RequestDispatcher
    """

    def __init__(self, dispatcher: RequestDispatcher):
        self._dispatcher = dispatcher

    @property
    def dispatcher(self) -> RequestDispatcher:
        return self._dispatcher

    async def _public(
        self,
        method: HttpMethod | str,
        path: str,
        params: Mapping[str, Any] | None = None,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
    ) -> Any:
        return await self._dispatcher.public_request(
            method, path, params, credentials=credentials, endpoint=endpoint
        )

    async def _signed(
        self,
        method: HttpMethod | str,
        path: str,
        params: Mapping[str, Any] | None = None,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
    ) -> Any:
        return await self._dispatcher.sign_request(
            method, path, params, credentials=credentials, endpoint=endpoint
        )


def encode_batch_orders(orders: Sequence[Mapping[str, Any]] | str) -> str:
    """batchOrders 목록을 하나의 JSON 문자열로 변환 (이미 문자열이면 그대로)"""
    if isinstance(orders, str):
        return orders
    return json.dumps([dict(order) for order in orders], separators=(",", ":"))
