"""
COIN-M 선물 Account / Trade API

모든 요청은 서명 요청.
USD-M과 달리 주문 수정(PUT)과 pair 단위 조회를 지원한다.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup, encode_batch_orders
from binance_sdk.api.coinm.options import (
    AccountTradeListOptions,
    AllOrdersOptions,
    ModifyOrderOptions,
    OrderModifyHistoryOptions,
    PairRecvWindowOptions,
    PositionRiskOptions,
    SymbolPairRecvWindowOptions,
)
from binance_sdk.api.options import Number, RecvWindowOptions
from binance_sdk.api.usdm.options import (
    CancelMultipleOrdersOptions,
    ForceOrdersOptions,
    IncomeHistoryOptions,
    ModifyIsolatedPositionMarginOptions,
    NewOrderOptions,
    OrderIdOptions,
    PositionMarginHistoryOptions,
    SymbolRecvWindowOptions,
)
from binance_sdk.core.config.loader import Credentials
from binance_sdk.core.types import MarginType, OrderSide, OrderType
from binance_sdk.core.utils.params import merge_params
from binance_sdk.core.utils.validation import validate_required_parameters


class CoinMTradeApi(ApiGroup):
    """COIN-M 선물 주문 / 계정 API"""

    async def change_position_mode(
        self,
        dual_side_position: bool | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """포지션 모드 변경 (POST /dapi/v1/positionSide/dual)"""
        validate_required_parameters(dualSidePosition=dual_side_position)
        return await self._signed(
            "POST",
            "/dapi/v1/positionSide/dual",
            merge_params(options, dualSidePosition=dual_side_position),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def get_position_mode(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """현재 포지션 모드 (GET /dapi/v1/positionSide/dual)"""
        return await self._signed(
            "GET", "/dapi/v1/positionSide/dual", options, credentials=credentials, endpoint=endpoint
        )

    # -------------------------------------------------------------------------
    # 주문
    # -------------------------------------------------------------------------

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
        """신규 주문 (POST /dapi/v1/order)"""
        validate_required_parameters(symbol=symbol, side=side, type=type)
        return await self._signed(
            "POST",
            "/dapi/v1/order",
            merge_params(options, symbol=symbol, side=side, type=type),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def modify_order(
        self,
        symbol: str,
        side: OrderSide | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[ModifyOrderOptions],
    ) -> Any:
        """지정가 주문 수정 (PUT /dapi/v1/order)

        orderId 또는 origClientOrderId로 대상 주문을 지정한다.
        """
        validate_required_parameters(symbol=symbol, side=side)
        return await self._signed(
            "PUT",
            "/dapi/v1/order",
            merge_params(options, symbol=symbol, side=side),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def new_batch_orders(
        self,
        batch_orders: Sequence[Mapping[str, Any]] | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """복수 주문 (POST /dapi/v1/batchOrders)"""
        validate_required_parameters(batchOrders=batch_orders)
        return await self._signed(
            "POST",
            "/dapi/v1/batchOrders",
            merge_params(options, batchOrders=encode_batch_orders(batch_orders)),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def modify_batch_orders(
        self,
        batch_orders: Sequence[Mapping[str, Any]] | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """복수 주문 수정 (PUT /dapi/v1/batchOrders)"""
        validate_required_parameters(batchOrders=batch_orders)
        return await self._signed(
            "PUT",
            "/dapi/v1/batchOrders",
            merge_params(options, batchOrders=encode_batch_orders(batch_orders)),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def order_modify_history(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[OrderModifyHistoryOptions],
    ) -> Any:
        """주문 수정 내역 (GET /dapi/v1/orderAmendment)"""
        validate_required_parameters(symbol=symbol)
        return await self._signed(
            "GET",
            "/dapi/v1/orderAmendment",
            merge_params(options, symbol=symbol),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def get_order(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[OrderIdOptions],
    ) -> Any:
        """주문 조회 (GET /dapi/v1/order)"""
        validate_required_parameters(symbol=symbol)
        return await self._signed(
            "GET",
            "/dapi/v1/order",
            merge_params(options, symbol=symbol),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def cancel_order(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[OrderIdOptions],
    ) -> Any:
        """주문 취소 (DELETE /dapi/v1/order)"""
        validate_required_parameters(symbol=symbol)
        return await self._signed(
            "DELETE",
            "/dapi/v1/order",
            merge_params(options, symbol=symbol),
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
        """심볼의 모든 미체결 주문 취소 (DELETE /dapi/v1/allOpenOrders)"""
        validate_required_parameters(symbol=symbol)
        return await self._signed(
            "DELETE",
            "/dapi/v1/allOpenOrders",
            merge_params(options, symbol=symbol),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def cancel_batch_orders(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[CancelMultipleOrdersOptions],
    ) -> Any:
        """복수 주문 취소 (DELETE /dapi/v1/batchOrders)"""
        validate_required_parameters(symbol=symbol)
        return await self._signed(
            "DELETE",
            "/dapi/v1/batchOrders",
            merge_params(options, symbol=symbol),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def countdown_cancel_all(
        self,
        symbol: str,
        countdown_time: int,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """자동 전체 취소 카운트다운 (POST /dapi/v1/countdownCancelAll)"""
        validate_required_parameters(symbol=symbol, countdownTime=countdown_time)
        return await self._signed(
            "POST",
            "/dapi/v1/countdownCancelAll",
            merge_params(options, symbol=symbol, countdownTime=countdown_time),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def get_open_order(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[OrderIdOptions],
    ) -> Any:
        """미체결 주문 단건 (GET /dapi/v1/openOrder)"""
        validate_required_parameters(symbol=symbol)
        return await self._signed(
            "GET",
            "/dapi/v1/openOrder",
            merge_params(options, symbol=symbol),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def get_open_orders(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SymbolPairRecvWindowOptions],
    ) -> Any:
        """미체결 주문 목록 (GET /dapi/v1/openOrders)"""
        return await self._signed(
            "GET", "/dapi/v1/openOrders", options, credentials=credentials, endpoint=endpoint
        )

    async def get_orders(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[AllOrdersOptions],
    ) -> Any:
        """전체 주문 내역 (GET /dapi/v1/allOrders, symbol 또는 pair)"""
        return await self._signed(
            "GET", "/dapi/v1/allOrders", options, credentials=credentials, endpoint=endpoint
        )

    # -------------------------------------------------------------------------
    # 계정 / 포지션
    # -------------------------------------------------------------------------

    async def balance(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """선물 지갑 잔고 (GET /dapi/v1/balance)"""
        return await self._signed(
            "GET", "/dapi/v1/balance", options, credentials=credentials, endpoint=endpoint
        )

    async def account(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """계정 정보 (GET /dapi/v1/account)"""
        return await self._signed(
            "GET", "/dapi/v1/account", options, credentials=credentials, endpoint=endpoint
        )

    async def change_leverage(
        self,
        symbol: str,
        leverage: int,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """레버리지 변경 (POST /dapi/v1/leverage)"""
        validate_required_parameters(symbol=symbol, leverage=leverage)
        return await self._signed(
            "POST",
            "/dapi/v1/leverage",
            merge_params(options, symbol=symbol, leverage=leverage),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def change_margin_type(
        self,
        symbol: str,
        margin_type: MarginType | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """마진 타입 변경 (POST /dapi/v1/marginType)"""
        validate_required_parameters(symbol=symbol, marginType=margin_type)
        return await self._signed(
            "POST",
            "/dapi/v1/marginType",
            merge_params(options, symbol=symbol, marginType=margin_type),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def modify_isolated_position_margin(
        self,
        symbol: str,
        amount: Number,
        type: int,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[ModifyIsolatedPositionMarginOptions],
    ) -> Any:
        """격리 포지션 증거금 조정 (POST /dapi/v1/positionMargin)

        Args:
            type: 1 = 추가, 2 = 감소
        """
        validate_required_parameters(symbol=symbol, amount=amount, type=type)
        return await self._signed(
            "POST",
            "/dapi/v1/positionMargin",
            merge_params(options, symbol=symbol, amount=amount, type=type),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def position_margin_history(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[PositionMarginHistoryOptions],
    ) -> Any:
        """포지션 증거금 변경 내역 (GET /dapi/v1/positionMargin/history)"""
        validate_required_parameters(symbol=symbol)
        return await self._signed(
            "GET",
            "/dapi/v1/positionMargin/history",
            merge_params(options, symbol=symbol),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def position_risk(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[PositionRiskOptions],
    ) -> Any:
        """포지션 정보 (GET /dapi/v1/positionRisk)"""
        return await self._signed(
            "GET", "/dapi/v1/positionRisk", options, credentials=credentials, endpoint=endpoint
        )

    async def my_trades(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[AccountTradeListOptions],
    ) -> Any:
        """계정 체결 내역 (GET /dapi/v1/userTrades, symbol 또는 pair)"""
        return await self._signed(
            "GET", "/dapi/v1/userTrades", options, credentials=credentials, endpoint=endpoint
        )

    async def income(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[IncomeHistoryOptions],
    ) -> Any:
        """손익 내역 (GET /dapi/v1/income)"""
        return await self._signed(
            "GET", "/dapi/v1/income", options, credentials=credentials, endpoint=endpoint
        )

    async def leverage_brackets(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[PairRecvWindowOptions],
    ) -> Any:
        """pair 기준 레버리지 구간 (GET /dapi/v1/leverageBracket)"""
        return await self._signed(
            "GET", "/dapi/v1/leverageBracket", options, credentials=credentials, endpoint=endpoint
        )

    async def leverage_brackets_for_symbol(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SymbolRecvWindowOptions],
    ) -> Any:
        """심볼 기준 레버리지 구간 (GET /dapi/v2/leverageBracket)"""
        return await self._signed(
            "GET", "/dapi/v2/leverageBracket", options, credentials=credentials, endpoint=endpoint
        )

    async def force_orders(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[ForceOrdersOptions],
    ) -> Any:
        """강제 청산 주문 (GET /dapi/v1/forceOrders)"""
        return await self._signed(
            "GET", "/dapi/v1/forceOrders", options, credentials=credentials, endpoint=endpoint
        )

    async def adl_quantile(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SymbolRecvWindowOptions],
    ) -> Any:
        """ADL 분위 추정 (GET /dapi/v1/adlQuantile)"""
        return await self._signed(
            "GET", "/dapi/v1/adlQuantile", options, credentials=credentials, endpoint=endpoint
        )

    async def commission_rate(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """수수료율 (GET /dapi/v1/commissionRate)"""
        validate_required_parameters(symbol=symbol)
        return await self._signed(
            "GET",
            "/dapi/v1/commissionRate",
            merge_params(options, symbol=symbol),
            credentials=credentials,
            endpoint=endpoint,
        )
