"""
Margin API (/sapi/v1/margin)

Cross / Isolated 마진 이체, 대출, 상환, 주문, 조회.
marginAsset / marginPair / allAssets / allPairs / priceIndex만 공개 요청.
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.options import Number, RecvWindowOptions
from binance_sdk.api.spot.options import (
    CancelMarginOcoOrderOptions,
    CancelMarginOrderOptions,
    GetMarginOcoOrderOptions,
    GetMarginOcoOrdersOptions,
    GetMarginOpenOcoOrdersOptions,
    IsolatedMarginAccountInfoOptions,
    IsolatedMarginTierOptions,
    IsolatedMarginTransferHistoryOptions,
    IsolatedOptions,
    MarginAllOrdersOptions,
    MarginBorrowOptions,
    MarginFeeOptions,
    MarginForceLiquidationRecordOptions,
    MarginInterestHistoryOptions,
    MarginInterestRateHistoryOptions,
    MarginLoanRecordOptions,
    MarginMaxBorrowableOptions,
    MarginMyTradesOptions,
    MarginOcoOrderOptions,
    MarginOpenOrdersOptions,
    MarginOrderCountOptions,
    MarginOrderOptions,
    MarginTransferHistoryOptions,
    NewMarginOrderOptions,
)
from binance_sdk.core.config.loader import Credentials
from binance_sdk.core.types import OrderSide, OrderType
from binance_sdk.core.utils.params import merge_params
from binance_sdk.core.utils.validation import (
    has_one_of_parameters,
    validate_required_parameters,
)


class MarginApi(ApiGroup):
    """Margin API"""

    # -------------------------------------------------------------------------
    # 이체 / 대출 / 상환
    # -------------------------------------------------------------------------

    async def margin_transfer(
        self,
        asset: str,
        amount: Number,
        type: int,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """Spot ↔ Cross Margin 이체 (POST /sapi/v1/margin/transfer)

        Args:
            asset: 자산
            amount: 수량
            type: 1 = spot → margin, 2 = margin → spot
        """
        validate_required_parameters(asset=asset, amount=amount, type=type)
        return await self._signed(
            "POST",
            "/sapi/v1/margin/transfer",
            merge_params(options, asset=asset.upper(), amount=amount, type=type),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def margin_borrow(
        self,
        asset: str,
        amount: Number,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[MarginBorrowOptions],
    ) -> Any:
        """마진 대출 (POST /sapi/v1/margin/loan)"""
        validate_required_parameters(asset=asset, amount=amount)
        return await self._signed(
            "POST",
            "/sapi/v1/margin/loan",
            merge_params(options, asset=asset.upper(), amount=amount),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def margin_repay(
        self,
        asset: str,
        amount: Number,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[MarginBorrowOptions],
    ) -> Any:
        """마진 상환 (POST /sapi/v1/margin/repay)"""
        validate_required_parameters(asset=asset, amount=amount)
        return await self._signed(
            "POST",
            "/sapi/v1/margin/repay",
            merge_params(options, asset=asset.upper(), amount=amount),
            credentials=credentials,
            endpoint=endpoint,
        )

    # -------------------------------------------------------------------------
    # 공개 조회
    # -------------------------------------------------------------------------

    async def margin_asset(
        self,
        asset: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
    ) -> Any:
        """마진 자산 조회 (GET /sapi/v1/margin/asset)"""
        validate_required_parameters(asset=asset)
        return await self._public(
            "GET",
            "/sapi/v1/margin/asset",
            {"asset": asset.upper()},
            credentials=credentials,
            endpoint=endpoint,
        )

    async def margin_pair(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
    ) -> Any:
        """Cross Margin 페어 조회 (GET /sapi/v1/margin/pair)"""
        validate_required_parameters(symbol=symbol)
        return await self._public(
            "GET",
            "/sapi/v1/margin/pair",
            {"symbol": symbol.upper()},
            credentials=credentials,
            endpoint=endpoint,
        )

    async def margin_all_assets(
        self, *, credentials: Credentials | None = None, endpoint: str | None = None
    ) -> Any:
        """전체 마진 자산 (GET /sapi/v1/margin/allAssets)"""
        return await self._public(
            "GET", "/sapi/v1/margin/allAssets", credentials=credentials, endpoint=endpoint
        )

    async def margin_all_pairs(
        self, *, credentials: Credentials | None = None, endpoint: str | None = None
    ) -> Any:
        """전체 Cross Margin 페어 (GET /sapi/v1/margin/allPairs)"""
        return await self._public(
            "GET", "/sapi/v1/margin/allPairs", credentials=credentials, endpoint=endpoint
        )

    async def margin_pair_index(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
    ) -> Any:
        """마진 가격 지수 (GET /sapi/v1/margin/priceIndex)"""
        validate_required_parameters(symbol=symbol)
        return await self._public(
            "GET",
            "/sapi/v1/margin/priceIndex",
            {"symbol": symbol.upper()},
            credentials=credentials,
            endpoint=endpoint,
        )

    # -------------------------------------------------------------------------
    # 주문
    # -------------------------------------------------------------------------

    async def new_margin_order(
        self,
        symbol: str,
        side: OrderSide | str,
        type: OrderType | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[NewMarginOrderOptions],
    ) -> Any:
        """마진 주문 (POST /sapi/v1/margin/order)"""
        validate_required_parameters(symbol=symbol, side=side, type=type)
        return await self._signed(
            "POST",
            "/sapi/v1/margin/order",
            merge_params(options, symbol=symbol.upper(), side=side.upper(), type=type.upper()),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def cancel_margin_order(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[CancelMarginOrderOptions],
    ) -> Any:
        """마진 주문 취소 (DELETE /sapi/v1/margin/order)"""
        validate_required_parameters(symbol=symbol)
        return await self._signed(
            "DELETE",
            "/sapi/v1/margin/order",
            merge_params(options, symbol=symbol.upper()),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def cancel_all_open_margin_order(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[IsolatedOptions],
    ) -> Any:
        """심볼의 미체결 마진 주문 전체 취소 (DELETE /sapi/v1/margin/openOrders)"""
        validate_required_parameters(symbol=symbol)
        return await self._signed(
            "DELETE",
            "/sapi/v1/margin/openOrders",
            merge_params(options, symbol=symbol.upper()),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def margin_order(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[MarginOrderOptions],
    ) -> Any:
        """마진 주문 조회 (GET /sapi/v1/margin/order)"""
        validate_required_parameters(symbol=symbol)
        return await self._signed(
            "GET",
            "/sapi/v1/margin/order",
            merge_params(options, symbol=symbol.upper()),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def margin_open_orders(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[MarginOpenOrdersOptions],
    ) -> Any:
        """미체결 마진 주문 (GET /sapi/v1/margin/openOrders)"""
        return await self._signed(
            "GET",
            "/sapi/v1/margin/openOrders",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    async def margin_all_orders(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[MarginAllOrdersOptions],
    ) -> Any:
        """마진 주문 내역 (GET /sapi/v1/margin/allOrders)"""
        validate_required_parameters(symbol=symbol)
        return await self._signed(
            "GET",
            "/sapi/v1/margin/allOrders",
            merge_params(options, symbol=symbol.upper()),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def margin_oco_order(
        self,
        symbol: str,
        side: OrderSide | str,
        quantity: Number,
        price: Number,
        stop_price: Number,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[MarginOcoOrderOptions],
    ) -> Any:
        """마진 OCO 주문 (POST /sapi/v1/margin/order/oco)"""
        validate_required_parameters(
            symbol=symbol, side=side, quantity=quantity, price=price, stopPrice=stop_price
        )
        return await self._signed(
            "POST",
            "/sapi/v1/margin/order/oco",
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

    async def cancel_margin_oco_order(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[CancelMarginOcoOrderOptions],
    ) -> Any:
        """마진 OCO 주문 취소 (DELETE /sapi/v1/margin/orderList)

        orderListId 또는 listClientOrderId 중 하나가 필요하다.
        """
        validate_required_parameters(symbol=symbol)
        has_one_of_parameters(
            orderListId=options.get("orderListId"),
            listClientOrderId=options.get("listClientOrderId"),
        )
        return await self._signed(
            "DELETE",
            "/sapi/v1/margin/orderList",
            merge_params(options, symbol=symbol.upper()),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def get_margin_oco_order(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[GetMarginOcoOrderOptions],
    ) -> Any:
        """마진 OCO 주문 조회 (GET /sapi/v1/margin/orderList)

        orderListId 또는 origClientOrderId 중 하나가 필요하다.
        """
        has_one_of_parameters(
            orderListId=options.get("orderListId"),
            origClientOrderId=options.get("origClientOrderId"),
        )
        return await self._signed(
            "GET",
            "/sapi/v1/margin/orderList",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    async def get_margin_oco_orders(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[GetMarginOcoOrdersOptions],
    ) -> Any:
        """마진 OCO 주문 내역 (GET /sapi/v1/margin/allOrderList)"""
        return await self._signed(
            "GET",
            "/sapi/v1/margin/allOrderList",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    async def get_margin_open_oco_orders(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[GetMarginOpenOcoOrdersOptions],
    ) -> Any:
        """미체결 마진 OCO 주문 (GET /sapi/v1/margin/openOrderList)"""
        return await self._signed(
            "GET",
            "/sapi/v1/margin/openOrderList",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    async def margin_my_trades(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[MarginMyTradesOptions],
    ) -> Any:
        """마진 체결 내역 (GET /sapi/v1/margin/myTrades)"""
        validate_required_parameters(symbol=symbol)
        return await self._signed(
            "GET",
            "/sapi/v1/margin/myTrades",
            merge_params(options, symbol=symbol.upper()),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def margin_order_count(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[MarginOrderCountOptions],
    ) -> Any:
        """마진 주문 수 사용량 (GET /sapi/v1/margin/rateLimit/order)"""
        return await self._signed(
            "GET",
            "/sapi/v1/margin/rateLimit/order",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    # -------------------------------------------------------------------------
    # 내역 / 계정
    # -------------------------------------------------------------------------

    async def margin_transfer_history(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[MarginTransferHistoryOptions],
    ) -> Any:
        """Cross Margin 이체 내역 (GET /sapi/v1/margin/transfer)"""
        return await self._signed(
            "GET",
            "/sapi/v1/margin/transfer",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    async def margin_loan_record(
        self,
        asset: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[MarginLoanRecordOptions],
    ) -> Any:
        """대출 기록 (GET /sapi/v1/margin/loan)"""
        validate_required_parameters(asset=asset)
        return await self._signed(
            "GET",
            "/sapi/v1/margin/loan",
            merge_params(options, asset=asset.upper()),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def margin_repay_record(
        self,
        asset: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[MarginLoanRecordOptions],
    ) -> Any:
        """상환 기록 (GET /sapi/v1/margin/repay)"""
        validate_required_parameters(asset=asset)
        return await self._signed(
            "GET",
            "/sapi/v1/margin/repay",
            merge_params(options, asset=asset.upper()),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def margin_interest_history(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[MarginInterestHistoryOptions],
    ) -> Any:
        """이자 내역 (GET /sapi/v1/margin/interestHistory)"""
        return await self._signed(
            "GET",
            "/sapi/v1/margin/interestHistory",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    async def margin_force_liquidation_record(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[MarginForceLiquidationRecordOptions],
    ) -> Any:
        """강제 청산 기록 (GET /sapi/v1/margin/forceLiquidationRec)"""
        return await self._signed(
            "GET",
            "/sapi/v1/margin/forceLiquidationRec",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    async def margin_account(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """Cross Margin 계정 상세 (GET /sapi/v1/margin/account)"""
        return await self._signed(
            "GET",
            "/sapi/v1/margin/account",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    async def margin_max_borrowable(
        self,
        asset: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[MarginMaxBorrowableOptions],
    ) -> Any:
        """최대 대출 가능량 (GET /sapi/v1/margin/maxBorrowable)"""
        validate_required_parameters(asset=asset)
        return await self._signed(
            "GET",
            "/sapi/v1/margin/maxBorrowable",
            merge_params(options, asset=asset.upper()),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def margin_max_transferable(
        self,
        asset: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[MarginMaxBorrowableOptions],
    ) -> Any:
        """최대 이체 가능량 (GET /sapi/v1/margin/maxTransferable)"""
        validate_required_parameters(asset=asset)
        return await self._signed(
            "GET",
            "/sapi/v1/margin/maxTransferable",
            merge_params(options, asset=asset.upper()),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def margin_interest_rate_history(
        self,
        asset: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[MarginInterestRateHistoryOptions],
    ) -> Any:
        """이자율 내역 (GET /sapi/v1/margin/interestRateHistory)"""
        validate_required_parameters(asset=asset)
        return await self._signed(
            "GET",
            "/sapi/v1/margin/interestRateHistory",
            merge_params(options, asset=asset),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def margin_fee(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[MarginFeeOptions],
    ) -> Any:
        """Cross Margin 수수료 데이터 (GET /sapi/v1/margin/crossMarginData)"""
        return await self._signed(
            "GET",
            "/sapi/v1/margin/crossMarginData",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    # -------------------------------------------------------------------------
    # Isolated Margin
    # -------------------------------------------------------------------------

    async def isolated_margin_transfer(
        self,
        asset: str,
        symbol: str,
        trans_from: str,
        trans_to: str,
        amount: Number,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """Spot ↔ Isolated Margin 이체 (POST /sapi/v1/margin/isolated/transfer)

        Args:
            trans_from / trans_to: "SPOT" | "ISOLATED_MARGIN"
        """
        validate_required_parameters(
            asset=asset, symbol=symbol, transFrom=trans_from, transTo=trans_to, amount=amount
        )
        return await self._signed(
            "POST",
            "/sapi/v1/margin/isolated/transfer",
            merge_params(
                options,
                asset=asset,
                symbol=symbol,
                transFrom=trans_from,
                transTo=trans_to,
                amount=amount,
            ),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def isolated_margin_transfer_history(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[IsolatedMarginTransferHistoryOptions],
    ) -> Any:
        """Isolated Margin 이체 내역 (GET /sapi/v1/margin/isolated/transfer)"""
        validate_required_parameters(symbol=symbol)
        return await self._signed(
            "GET",
            "/sapi/v1/margin/isolated/transfer",
            merge_params(options, symbol=symbol),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def isolated_margin_account_info(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[IsolatedMarginAccountInfoOptions],
    ) -> Any:
        """Isolated Margin 계정 정보 (GET /sapi/v1/margin/isolated/account)"""
        return await self._signed(
            "GET",
            "/sapi/v1/margin/isolated/account",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    async def disable_isolated_margin_account(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """Isolated Margin 계정 비활성화 (DELETE /sapi/v1/margin/isolated/account)"""
        validate_required_parameters(symbol=symbol)
        return await self._signed(
            "DELETE",
            "/sapi/v1/margin/isolated/account",
            merge_params(options, symbol=symbol),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def enable_isolated_margin_account(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """Isolated Margin 계정 활성화 (POST /sapi/v1/margin/isolated/account)"""
        validate_required_parameters(symbol=symbol)
        return await self._signed(
            "POST",
            "/sapi/v1/margin/isolated/account",
            merge_params(options, symbol=symbol),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def isolated_margin_account_limit(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """활성화 가능한 Isolated 계정 수 (GET /sapi/v1/margin/isolated/accountLimit)"""
        return await self._signed(
            "GET",
            "/sapi/v1/margin/isolated/accountLimit",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    async def isolated_margin_symbol(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """Isolated Margin 심볼 (GET /sapi/v1/margin/isolated/pair)"""
        validate_required_parameters(symbol=symbol)
        return await self._signed(
            "GET",
            "/sapi/v1/margin/isolated/pair",
            merge_params(options, symbol=symbol),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def isolated_margin_all_symbols(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """전체 Isolated Margin 심볼 (GET /sapi/v1/margin/isolated/allPairs)"""
        return await self._signed(
            "GET",
            "/sapi/v1/margin/isolated/allPairs",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    async def isolated_margin_fee(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[MarginFeeOptions],
    ) -> Any:
        """Isolated Margin 수수료 데이터 (GET /sapi/v1/margin/isolatedMarginData)"""
        return await self._signed(
            "GET",
            "/sapi/v1/margin/isolatedMarginData",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    async def isolated_margin_tier(
        self,
        symbol: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[IsolatedMarginTierOptions],
    ) -> Any:
        """Isolated Margin 티어 데이터 (GET /sapi/v1/margin/isolatedMarginTier)"""
        validate_required_parameters(symbol=symbol)
        return await self._signed(
            "GET",
            "/sapi/v1/margin/isolatedMarginTier",
            merge_params(options, symbol=symbol),
            credentials=credentials,
            endpoint=endpoint,
        )
