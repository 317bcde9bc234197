"""
USD-M 선물 User Data Stream (listenKey)
"""

from typing import Any

from binance_sdk.api.base import ApiGroup
from binance_sdk.core.config.loader import Credentials

_LISTEN_KEY_PATH = "/fapi/v1/listenKey"


class UsdMDataStreamApi(ApiGroup):
    """listenKey 생성 / 연장 / 종료 (서명 요청)"""

    async def new_listen_key(
        self, *, credentials: Credentials | None = None, endpoint: str | None = None
    ) -> Any:
        """listenKey 생성 (POST)"""
        return await self._signed(
            "POST", _LISTEN_KEY_PATH, credentials=credentials, endpoint=endpoint
        )

    async def renew_listen_key(
        self, *, credentials: Credentials | None = None, endpoint: str | None = None
    ) -> Any:
        """listenKey 유효기간 60분 연장 (PUT)"""
        return await self._signed(
            "PUT", _LISTEN_KEY_PATH, credentials=credentials, endpoint=endpoint
        )

    async def close_listen_key(
        self, *, credentials: Credentials | None = None, endpoint: str | None = None
    ) -> Any:
        """listenKey 종료 (DELETE)"""
        return await self._signed(
            "DELETE", _LISTEN_KEY_PATH, credentials=credentials, endpoint=endpoint
        )
