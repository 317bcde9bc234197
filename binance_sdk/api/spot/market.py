"""
Spot 시세 조회 (공개 엔드포인트)

symbol 계열 값은 모두 대문자로 변환해 전송한다.
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.options import LimitOptions
from binance_sdk.api.spot.options import (
    AggTradesOptions,
    ExchangeInfoOptions,
    KlinesOptions,
    TradeHistoryOptions,
)
from binance_sdk.core.config.loader import Credentials
from binance_sdk.core.types import KlineInterval
from binance_sdk.core.utils.params import merge_params, upper_fields
from binance_sdk.core.utils.validation import validate_required_parameters


class MarketApi(ApiGroup):
    """Spot 시세 API (/api/v3)"""

    async def ping(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
    ) -> Any:
        """연결 확인 (GET /api/v3/ping)"""
        return await self._public(
            "GET", "/api/v3/ping", credentials=credentials, endpoint=endpoint
        )

    async def time(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
    ) -> Any:
        """서버 시간 조회 (GET /api/v3/time)

        Returns:
            {"serverTime": 1499827319559}
        """
        return await self._public(
            "GET", "/api/v3/time", credentials=credentials, endpoint=endpoint
        )

    async def exchange_info(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[ExchangeInfoOptions],
    ) -> Any:
        """거래 규칙 / 심볼 정보 조회 (GET /api/v3/exchangeInfo)

        Args:
            symbol: 단일 심볼 (선택)
            symbols: 심볼 목록 (선택, ["BTCUSDT","BNBUSDT"] 형태로 인코딩)
        """
        return await self._public(
            "GET",
            "/api/v3/exchangeInfo",
            upper_fields(options, "symbol", "symbols"),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def depth(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[LimitOptions],
    ) -> Any:
        """호가창 조회 (GET /api/v3/depth)

        Args:
            symbol: 심볼
            limit: 기본 100, 최대 5000
        """
        validate_required_parameters(symbol=symbol)
        return await self._public(
            "GET",
            "/api/v3/depth",
            merge_params(options, symbol=symbol.upper()),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def trades(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[LimitOptions],
    ) -> Any:
        """최근 체결 목록 (GET /api/v3/trades)"""
        validate_required_parameters(symbol=symbol)
        return await self._public(
            "GET",
            "/api/v3/trades",
            merge_params(options, symbol=symbol.upper()),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def historical_trades(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[TradeHistoryOptions],
    ) -> Any:
        """과거 체결 조회 (GET /api/v3/historicalTrades)

        API 키 헤더가 필요한 MARKET_DATA 엔드포인트.
        """
        validate_required_parameters(symbol=symbol)
        return await self._public(
            "GET",
            "/api/v3/historicalTrades",
            merge_params(options, symbol=symbol.upper()),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def agg_trades(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[AggTradesOptions],
    ) -> Any:
        """압축 체결 목록 (GET /api/v3/aggTrades)"""
        validate_required_parameters(symbol=symbol)
        return await self._public(
            "GET",
            "/api/v3/aggTrades",
            merge_params(options, symbol=symbol.upper()),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def klines(
        self,
        symbol: str,
        interval: KlineInterval | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[KlinesOptions],
    ) -> Any:
        """캔들 조회 (GET /api/v3/klines)

        Args:
            symbol: 심볼
            interval: 캔들 간격 (KlineInterval 또는 "1m" 같은 문자열)
            startTime / endTime / limit: 선택
        """
        validate_required_parameters(symbol=symbol, interval=interval)
        return await self._public(
            "GET",
            "/api/v3/klines",
            merge_params(options, symbol=symbol.upper(), interval=interval),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def avg_price(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
    ) -> Any:
        """현재 평균가 (GET /api/v3/avgPrice)"""
        validate_required_parameters(symbol=symbol)
        return await self._public(
            "GET",
            "/api/v3/avgPrice",
            {"symbol": symbol.upper()},
            credentials=credentials,
            endpoint=endpoint,
        )

    # -------------------------------------------------------------------------
    # Ticker
    # -------------------------------------------------------------------------

    async def ticker_24hr(
        self,
        symbol: str = "",
        symbols: list[str] | None = None,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
    ) -> Any:
        """24시간 가격 변동 통계 (GET /api/v3/ticker/24hr)

        symbol / symbols 둘 다 비우면 전체 심볼.
        """
        return await self._ticker(
            "/api/v3/ticker/24hr", symbol, symbols, credentials, endpoint
        )

    async def ticker_price(
        self,
        symbol: str = "",
        symbols: list[str] | None = None,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
    ) -> Any:
        """최근가 (GET /api/v3/ticker/price)"""
        return await self._ticker(
            "/api/v3/ticker/price", symbol, symbols, credentials, endpoint
        )

    async def book_ticker(
        self,
        symbol: str = "",
        symbols: list[str] | None = None,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
    ) -> Any:
        """최우선 호가 (GET /api/v3/ticker/bookTicker)"""
        return await self._ticker(
            "/api/v3/ticker/bookTicker", symbol, symbols, credentials, endpoint
        )

    async def _ticker(
        self,
        path: str,
        symbol: str,
        symbols: list[str] | None,
        credentials: Credentials | None,
        endpoint: str | None,
    ) -> Any:
        params = upper_fields({"symbol": symbol, "symbols": symbols or []}, "symbol", "symbols")
        return await self._public(
            "GET", path, params, credentials=credentials, endpoint=endpoint
        )
