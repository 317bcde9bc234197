"""
Convert API (/sapi/v1/convert)

견적 요청 → 수락 → 주문 상태 조회 순서로 사용.
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.options import RecvWindowOptions
from binance_sdk.api.spot.options import ConvertQuoteOptions, ConvertTradeHistoryOptions
from binance_sdk.core.config.loader import Credentials
from binance_sdk.core.utils.params import merge_params
from binance_sdk.core.utils.validation import (
    has_one_of_parameters,
    validate_required_parameters,
)


class ConvertApi(ApiGroup):
    """Convert API"""

    async def list_all_convert_pairs(
        self,
        from_asset: str,
        to_asset: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
    ) -> Any:
        """전환 가능 페어 (GET /sapi/v1/convert/exchangeInfo)"""
        validate_required_parameters(fromAsset=from_asset, toAsset=to_asset)
        return await self._signed(
            "GET",
            "/sapi/v1/convert/exchangeInfo",
            {"fromAsset": from_asset, "toAsset": to_asset},
            credentials=credentials,
            endpoint=endpoint,
        )

    async def query_order_quantity_precision(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """자산별 수량 정밀도 (GET /sapi/v1/convert/assetInfo)"""
        return await self._signed(
            "GET",
            "/sapi/v1/convert/assetInfo",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    async def send_quote_request(
        self,
        from_asset: str,
        to_asset: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[ConvertQuoteOptions],
    ) -> Any:
        """견적 요청 (POST /sapi/v1/convert/getQuote)

        fromAmount 또는 toAmount 중 하나가 필요하다.

        Returns:
            quoteId, ratio, validTimestamp 등
        """
        validate_required_parameters(fromAsset=from_asset, toAsset=to_asset)
        has_one_of_parameters(
            fromAmount=options.get("fromAmount"),
            toAmount=options.get("toAmount"),
        )
        return await self._signed(
            "POST",
            "/sapi/v1/convert/getQuote",
            merge_params(options, fromAsset=from_asset, toAsset=to_asset),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def accept_quote(
        self,
        quote_id: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """견적 수락 (POST /sapi/v1/convert/acceptQuote)"""
        validate_required_parameters(quoteId=quote_id)
        return await self._signed(
            "POST",
            "/sapi/v1/convert/acceptQuote",
            merge_params(options, quoteId=quote_id),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def convert_order_status(
        self,
        order_id: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
    ) -> Any:
        """전환 주문 상태 (GET /sapi/v1/convert/orderStatus)"""
        validate_required_parameters(orderId=order_id)
        return await self._signed(
            "GET",
            "/sapi/v1/convert/orderStatus",
            {"orderId": order_id},
            credentials=credentials,
            endpoint=endpoint,
        )

    async def convert_trade_history(
        self,
        start_time: int,
        end_time: int,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[ConvertTradeHistoryOptions],
    ) -> Any:
        """전환 내역 (GET /sapi/v1/convert/tradeFlow)"""
        validate_required_parameters(startTime=start_time, endTime=end_time)
        return await self._signed(
            "GET",
            "/sapi/v1/convert/tradeFlow",
            merge_params(options, startTime=start_time, endTime=end_time),
            credentials=credentials,
            endpoint=endpoint,
        )
