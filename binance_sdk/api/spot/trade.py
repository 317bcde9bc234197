"""
Spot 주문 / 계정 API (/api/v3)

주문 생성, 취소, 조회, OCO, 체결 내역. 모두 서명 요청.
symbol / side / type 은 대문자로 변환한다.
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.options import Number, RecvWindowOptions
from binance_sdk.api.spot.options import (
    AllOrdersOptions,
    CancelOcoOrderOptions,
    CancelOrderOptions,
    GetOcoOrderOptions,
    GetOcoOrdersOptions,
    GetOrderOptions,
    MyTradesOptions,
    NewOcoOrderOptions,
    NewOrderOptions,
    OpenOrdersOptions,
)
from binance_sdk.core.config.loader import Credentials
from binance_sdk.core.types import OrderSide, OrderType
from binance_sdk.core.utils.params import merge_params, upper_fields
from binance_sdk.core.utils.validation import validate_required_parameters


class TradeApi(ApiGroup):
    """Spot 주문 API"""

    # -------------------------------------------------------------------------
    # 주문
    # -------------------------------------------------------------------------

    async def new_order_test(
        self,
        symbol: str,
        side: OrderSide | str,
        type: OrderType | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[NewOrderOptions],
    ) -> Any:
        """주문 테스트 (POST /api/v3/order/test)

        매칭 엔진으로 보내지 않고 검증만 수행.
        """
        validate_required_parameters(symbol=symbol, side=side, type=type)
        return await self._signed(
            "POST",
            "/api/v3/order/test",
            merge_params(options, symbol=symbol.upper(), side=side.upper(), type=type.upper()),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def new_order(
        self,
        symbol: str,
        side: OrderSide | str,
        type: OrderType | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[NewOrderOptions],
    ) -> Any:
        """신규 주문 (POST /api/v3/order)

        Args:
            symbol: 심볼
            side: BUY / SELL
            type: LIMIT, MARKET, STOP_LOSS_LIMIT ...
            timeInForce / quantity / price ...: 주문 유형별 필수 옵션

        Raises:
            ParameterRequiredError: symbol/side/type 누락
            BinanceApiError: 주문 거부
        """
        validate_required_parameters(symbol=symbol, side=side, type=type)
        return await self._signed(
            "POST",
            "/api/v3/order",
            merge_params(options, symbol=symbol.upper(), side=side.upper(), type=type.upper()),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def cancel_order(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[CancelOrderOptions],
    ) -> Any:
        """주문 취소 (DELETE /api/v3/order)

        orderId 또는 origClientOrderId 중 하나가 필요하다.
        """
        validate_required_parameters(symbol=symbol)
        return await self._signed(
            "DELETE",
            "/api/v3/order",
            merge_params(options, symbol=symbol.upper()),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def cancel_open_orders(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """심볼의 미체결 주문 전체 취소 (DELETE /api/v3/openOrders)"""
        validate_required_parameters(symbol=symbol)
        return await self._signed(
            "DELETE",
            "/api/v3/openOrders",
            merge_params(options, symbol=symbol.upper()),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def get_order(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[GetOrderOptions],
    ) -> Any:
        """주문 조회 (GET /api/v3/order)"""
        validate_required_parameters(symbol=symbol)
        return await self._signed(
            "GET",
            "/api/v3/order",
            merge_params(options, symbol=symbol.upper()),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def get_open_orders(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[OpenOrdersOptions],
    ) -> Any:
        """미체결 주문 목록 (GET /api/v3/openOrders)

        symbol 없이 호출하면 전체 심볼 (weight 큼).
        """
        return await self._signed(
            "GET",
            "/api/v3/openOrders",
            upper_fields(options, "symbol"),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def get_orders(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[AllOrdersOptions],
    ) -> Any:
        """전체 주문 내역 (GET /api/v3/allOrders)"""
        validate_required_parameters(symbol=symbol)
        return await self._signed(
            "GET",
            "/api/v3/allOrders",
            merge_params(options, symbol=symbol.upper()),
            credentials=credentials,
            endpoint=endpoint,
        )

    # -------------------------------------------------------------------------
    # OCO
    # -------------------------------------------------------------------------

    async def new_oco_order(
        self,
        symbol: str,
        side: OrderSide | str,
        quantity: Number,
        price: Number,
        stop_price: Number,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[NewOcoOrderOptions],
    ) -> Any:
        """OCO 주문 (POST /api/v3/order/oco)"""
        validate_required_parameters(
            symbol=symbol, side=side, quantity=quantity, price=price, stopPrice=stop_price
        )
        return await self._signed(
            "POST",
            "/api/v3/order/oco",
            merge_params(
                options,
                symbol=symbol.upper(),
                side=side.upper(),
                quantity=quantity,
                price=price,
                stopPrice=stop_price,
            ),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def cancel_oco_order(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[CancelOcoOrderOptions],
    ) -> Any:
        """OCO 주문 취소 (DELETE /api/v3/orderList)"""
        validate_required_parameters(symbol=symbol)
        return await self._signed(
            "DELETE",
            "/api/v3/orderList",
            merge_params(options, symbol=symbol.upper()),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def get_oco_order(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[GetOcoOrderOptions],
    ) -> Any:
        """OCO 주문 조회 (GET /api/v3/orderList)"""
        return await self._signed(
            "GET", "/api/v3/orderList", options, credentials=credentials, endpoint=endpoint
        )

    async def get_oco_orders(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[GetOcoOrdersOptions],
    ) -> Any:
        """OCO 주문 내역 (GET /api/v3/allOrderList)"""
        return await self._signed(
            "GET", "/api/v3/allOrderList", options, credentials=credentials, endpoint=endpoint
        )

    async def get_open_oco_orders(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """미체결 OCO 주문 (GET /api/v3/openOrderList)"""
        return await self._signed(
            "GET", "/api/v3/openOrderList", options, credentials=credentials, endpoint=endpoint
        )

    # -------------------------------------------------------------------------
    # 계정
    # -------------------------------------------------------------------------

    async def account(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """계정 정보 / 잔고 (GET /api/v3/account)"""
        return await self._signed(
            "GET", "/api/v3/account", options, credentials=credentials, endpoint=endpoint
        )

    async def my_trades(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[MyTradesOptions],
    ) -> Any:
        """체결 내역 (GET /api/v3/myTrades)"""
        validate_required_parameters(symbol=symbol)
        return await self._signed(
            "GET",
            "/api/v3/myTrades",
            merge_params(options, symbol=symbol.upper()),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def get_order_rate_limit(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """미체결 주문 수 한도 사용량 (GET /api/v3/rateLimit/order)"""
        return await self._signed(
            "GET", "/api/v3/rateLimit/order", options, credentials=credentials, endpoint=endpoint
        )
