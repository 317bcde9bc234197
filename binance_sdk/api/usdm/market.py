"""
USD-M 선물 Market API (fapi.binance.com)

/fapi/v1/* 와 /futures/data/* 통계 엔드포인트.
historical_trades만 서명 요청.
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.options import FilterOptions
from binance_sdk.api.usdm.options import (
    AggTradesOptions,
    FundingRateHistoryOptions,
    OldTradesOptions,
    OrderBookOptions,
    SymbolOptions,
)
from binance_sdk.core.config.loader import Credentials
from binance_sdk.core.types import ContractType, FuturePeriod, KlineInterval
from binance_sdk.core.utils.params import merge_params
from binance_sdk.core.utils.validation import validate_required_parameters


class UsdMMarketApi(ApiGroup):
    """USD-M 선물 시세 API"""

    async def ping(
        self, *, credentials: Credentials | None = None, endpoint: str | None = None
    ) -> Any:
        """연결 확인 (GET /fapi/v1/ping)"""
        return await self._public("GET", "/fapi/v1/ping", credentials=credentials, endpoint=endpoint)

    async def time(
        self, *, credentials: Credentials | None = None, endpoint: str | None = None
    ) -> Any:
        """서버 시간 (GET /fapi/v1/time)"""
        return await self._public("GET", "/fapi/v1/time", credentials=credentials, endpoint=endpoint)

    async def exchange_info(
        self, *, credentials: Credentials | None = None, endpoint: str | None = None
    ) -> Any:
        """거래 규칙 / 심볼 정보 (GET /fapi/v1/exchangeInfo)"""
        return await self._public(
            "GET", "/fapi/v1/exchangeInfo", credentials=credentials, endpoint=endpoint
        )

    # -------------------------------------------------------------------------
    # 호가 / 체결
    # -------------------------------------------------------------------------

    async def depth(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[OrderBookOptions],
    ) -> Any:
        """호가창 (GET /fapi/v1/depth)"""
        validate_required_parameters(symbol=symbol)
        return await self._public(
            "GET",
            "/fapi/v1/depth",
            merge_params(options, symbol=symbol),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def trades(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[OrderBookOptions],
    ) -> Any:
        """최근 체결 (GET /fapi/v1/trades)"""
        validate_required_parameters(symbol=symbol)
        return await self._public(
            "GET",
            "/fapi/v1/trades",
            merge_params(options, symbol=symbol),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def historical_trades(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[OldTradesOptions],
    ) -> Any:
        """과거 체결 (GET /fapi/v1/historicalTrades, 서명)"""
        validate_required_parameters(symbol=symbol)
        return await self._signed(
            "GET",
            "/fapi/v1/historicalTrades",
            merge_params(options, symbol=symbol),
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
        """집계 체결 (GET /fapi/v1/aggTrades)"""
        validate_required_parameters(symbol=symbol)
        return await self._public(
            "GET",
            "/fapi/v1/aggTrades",
            merge_params(options, symbol=symbol),
            credentials=credentials,
            endpoint=endpoint,
        )

    # -------------------------------------------------------------------------
    # 캔들
    # -------------------------------------------------------------------------

    async def klines(
        self,
        symbol: str,
        interval: KlineInterval | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[FilterOptions],
    ) -> Any:
        """캔들 (GET /fapi/v1/klines)"""
        validate_required_parameters(symbol=symbol, interval=interval)
        return await self._public(
            "GET",
            "/fapi/v1/klines",
            merge_params(options, symbol=symbol, interval=interval),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def continuous_klines(
        self,
        pair: str,
        contract_type: ContractType | str,
        interval: KlineInterval | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[FilterOptions],
    ) -> Any:
        """연속 계약 캔들 (GET /fapi/v1/continuousKlines)

        Args:
            contract_type: PERPETUAL | CURRENT_QUARTER | NEXT_QUARTER
        """
        validate_required_parameters(pair=pair, contractType=contract_type, interval=interval)
        return await self._public(
            "GET",
            "/fapi/v1/continuousKlines",
            merge_params(options, pair=pair, contractType=contract_type, interval=interval),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def index_price_klines(
        self,
        pair: str,
        interval: KlineInterval | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[FilterOptions],
    ) -> Any:
        """인덱스 가격 캔들 (GET /fapi/v1/indexPriceKlines)"""
        validate_required_parameters(pair=pair, interval=interval)
        return await self._public(
            "GET",
            "/fapi/v1/indexPriceKlines",
            merge_params(options, pair=pair, interval=interval),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def mark_price_klines(
        self,
        symbol: str,
        interval: KlineInterval | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[FilterOptions],
    ) -> Any:
        """마크 가격 캔들 (GET /fapi/v1/markPriceKlines)"""
        validate_required_parameters(symbol=symbol, interval=interval)
        return await self._public(
            "GET",
            "/fapi/v1/markPriceKlines",
            merge_params(options, symbol=symbol, interval=interval),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def blvt_klines(
        self,
        symbol: str,
        interval: KlineInterval | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[FilterOptions],
    ) -> Any:
        """BLVT NAV 캔들 (GET /fapi/v1/lvtKlines)"""
        validate_required_parameters(symbol=symbol, interval=interval)
        return await self._public(
            "GET",
            "/fapi/v1/lvtKlines",
            merge_params(options, symbol=symbol, interval=interval),
            credentials=credentials,
            endpoint=endpoint,
        )

    # -------------------------------------------------------------------------
    # 가격 / 티커
    # -------------------------------------------------------------------------

    async def mark_price(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SymbolOptions],
    ) -> Any:
        """마크 가격 / 펀딩비 (GET /fapi/v1/premiumIndex)"""
        return await self._public(
            "GET", "/fapi/v1/premiumIndex", options, credentials=credentials, endpoint=endpoint
        )

    async def funding_rate(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[FundingRateHistoryOptions],
    ) -> Any:
        """펀딩비 내역 (GET /fapi/v1/fundingRate)"""
        return await self._public(
            "GET", "/fapi/v1/fundingRate", options, credentials=credentials, endpoint=endpoint
        )

    async def ticker_24hr(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SymbolOptions],
    ) -> Any:
        """24시간 변동 통계 (GET /fapi/v1/ticker/24hr)"""
        return await self._public(
            "GET", "/fapi/v1/ticker/24hr", options, credentials=credentials, endpoint=endpoint
        )

    async def ticker_price(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SymbolOptions],
    ) -> Any:
        """최근 가격 (GET /fapi/v1/ticker/price)"""
        return await self._public(
            "GET", "/fapi/v1/ticker/price", options, credentials=credentials, endpoint=endpoint
        )

    async def book_ticker(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SymbolOptions],
    ) -> Any:
        """최우선 호가 (GET /fapi/v1/ticker/bookTicker)"""
        return await self._public(
            "GET", "/fapi/v1/ticker/bookTicker", options, credentials=credentials, endpoint=endpoint
        )

    async def open_interest(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
    ) -> Any:
        """미결제 약정 (GET /fapi/v1/openInterest)"""
        validate_required_parameters(symbol=symbol)
        return await self._public(
            "GET",
            "/fapi/v1/openInterest",
            {"symbol": symbol},
            credentials=credentials,
            endpoint=endpoint,
        )

    async def index_info(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SymbolOptions],
    ) -> Any:
        """복합 인덱스 구성 (GET /fapi/v1/indexInfo)"""
        return await self._public(
            "GET", "/fapi/v1/indexInfo", options, credentials=credentials, endpoint=endpoint
        )

    async def asset_index(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SymbolOptions],
    ) -> Any:
        """멀티 에셋 모드 자산 인덱스 (GET /fapi/v1/assetIndex)"""
        return await self._public(
            "GET", "/fapi/v1/assetIndex", options, credentials=credentials, endpoint=endpoint
        )

    # -------------------------------------------------------------------------
    # 통계 (/futures/data)
    # -------------------------------------------------------------------------

    async def _period_statistics(
        self,
        path: str,
        symbol: str,
        period: FuturePeriod | str,
        options: FilterOptions,
        credentials: Credentials | None,
        endpoint: str | None,
    ) -> Any:
        validate_required_parameters(symbol=symbol, period=period)
        return await self._public(
            "GET",
            path,
            merge_params(options, symbol=symbol, period=period),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def open_interest_hist(
        self,
        symbol: str,
        period: FuturePeriod | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[FilterOptions],
    ) -> Any:
        """미결제 약정 통계 (GET /futures/data/openInterestHist)"""
        return await self._period_statistics(
            "/futures/data/openInterestHist", symbol, period, options, credentials, endpoint
        )

    async def top_long_short_account_ratio(
        self,
        symbol: str,
        period: FuturePeriod | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[FilterOptions],
    ) -> Any:
        """상위 트레이더 롱/숏 계정 비율 (GET /futures/data/topLongShortAccountRatio)"""
        return await self._period_statistics(
            "/futures/data/topLongShortAccountRatio", symbol, period, options, credentials, endpoint
        )

    async def top_long_short_position_ratio(
        self,
        symbol: str,
        period: FuturePeriod | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[FilterOptions],
    ) -> Any:
        """상위 트레이더 롱/숏 포지션 비율 (GET /futures/data/topLongShortPositionRatio)"""
        return await self._period_statistics(
            "/futures/data/topLongShortPositionRatio", symbol, period, options, credentials, endpoint
        )

    async def long_short_ratio(
        self,
        symbol: str,
        period: FuturePeriod | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[FilterOptions],
    ) -> Any:
        """전체 롱/숏 계정 비율 (GET /futures/data/globalLongShortAccountRatio)"""
        return await self._period_statistics(
            "/futures/data/globalLongShortAccountRatio", symbol, period, options, credentials, endpoint
        )

    async def taker_long_short_ratio(
        self,
        symbol: str,
        period: FuturePeriod | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[FilterOptions],
    ) -> Any:
        """테이커 매수/매도 거래량 (GET /futures/data/takerlongshortRatio)"""
        return await self._period_statistics(
            "/futures/data/takerlongshortRatio", symbol, period, options, credentials, endpoint
        )
