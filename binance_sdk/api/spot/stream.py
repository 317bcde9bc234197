"""
User Data Stream listenKey 관리 (spot / cross margin / isolated margin)

서명 없이 API 키 헤더만 필요한 USER_STREAM 엔드포인트.
"""

from typing import Any

from binance_sdk.api.base import ApiGroup
from binance_sdk.core.config.loader import Credentials
from binance_sdk.core.utils.validation import validate_required_parameters


class StreamApi(ApiGroup):
    """listenKey 생성 / 연장 / 종료"""

    # -------------------------------------------------------------------------
    # Spot
    # -------------------------------------------------------------------------

    async def create_listen_key(
        self, *, credentials: Credentials | None = None, endpoint: str | None = None
    ) -> Any:
        """listenKey 생성 (POST /api/v3/userDataStream)"""
        return await self._public(
            "POST", "/api/v3/userDataStream", credentials=credentials, endpoint=endpoint
        )

    async def renew_listen_key(
        self,
        listen_key: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
    ) -> Any:
        """listenKey 유효기간 연장 (PUT /api/v3/userDataStream)"""
        validate_required_parameters(listenKey=listen_key)
        return await self._public(
            "PUT",
            "/api/v3/userDataStream",
            {"listenKey": listen_key},
            credentials=credentials,
            endpoint=endpoint,
        )

    async def close_listen_key(
        self,
        listen_key: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
    ) -> Any:
        """listenKey 종료 (DELETE /api/v3/userDataStream)"""
        validate_required_parameters(listenKey=listen_key)
        return await self._public(
            "DELETE",
            "/api/v3/userDataStream",
            {"listenKey": listen_key},
            credentials=credentials,
            endpoint=endpoint,
        )

    # -------------------------------------------------------------------------
    # Cross Margin
    # -------------------------------------------------------------------------

    async def create_margin_listen_key(
        self, *, credentials: Credentials | None = None, endpoint: str | None = None
    ) -> Any:
        """Margin listenKey 생성 (POST /sapi/v1/userDataStream)"""
        return await self._public(
            "POST", "/sapi/v1/userDataStream", credentials=credentials, endpoint=endpoint
        )

    async def renew_margin_listen_key(
        self,
        listen_key: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
    ) -> Any:
        validate_required_parameters(listenKey=listen_key)
        return await self._public(
            "PUT",
            "/sapi/v1/userDataStream",
            {"listenKey": listen_key},
            credentials=credentials,
            endpoint=endpoint,
        )

    async def close_margin_listen_key(
        self,
        listen_key: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
    ) -> Any:
        validate_required_parameters(listenKey=listen_key)
        return await self._public(
            "DELETE",
            "/sapi/v1/userDataStream",
            {"listenKey": listen_key},
            credentials=credentials,
            endpoint=endpoint,
        )

    # -------------------------------------------------------------------------
    # Isolated Margin
    # -------------------------------------------------------------------------

    async def create_isolated_margin_listen_key(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
    ) -> Any:
        """Isolated Margin listenKey 생성 (POST /sapi/v1/userDataStream/isolated)"""
        validate_required_parameters(symbol=symbol)
        return await self._public(
            "POST",
            "/sapi/v1/userDataStream/isolated",
            {"symbol": symbol},
            credentials=credentials,
            endpoint=endpoint,
        )

    async def renew_isolated_margin_listen_key(
        self,
        symbol: str,
        listen_key: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
    ) -> Any:
        validate_required_parameters(symbol=symbol, listenKey=listen_key)
        return await self._public(
            "PUT",
            "/sapi/v1/userDataStream/isolated",
            {"symbol": symbol, "listenKey": listen_key},
            credentials=credentials,
            endpoint=endpoint,
        )

    async def close_isolated_margin_listen_key(
        self,
        symbol: str,
        listen_key: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
    ) -> Any:
        validate_required_parameters(symbol=symbol, listenKey=listen_key)
        return await self._public(
            "DELETE",
            "/sapi/v1/userDataStream/isolated",
            {"symbol": symbol, "listenKey": listen_key},
            credentials=credentials,
            endpoint=endpoint,
        )
