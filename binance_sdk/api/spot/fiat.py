"""
Fiat API

transaction_type: 0 = 입금/구매, 1 = 출금/판매
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.spot.options import FiatHistoryOptions
from binance_sdk.core.config.loader import Credentials
from binance_sdk.core.utils.params import merge_params
from binance_sdk.core.utils.validation import validate_required_parameters


class FiatApi(ApiGroup):
    """Fiat API"""

    async def deposit_withdrawal_history(
        self,
        transaction_type: int | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[FiatHistoryOptions],
    ) -> Any:
        """법정화폐 입출금 내역 (GET /sapi/v1/fiat/orders)"""
        validate_required_parameters(transactionType=transaction_type)
        return await self._signed(
            "GET",
            "/sapi/v1/fiat/orders",
            merge_params(options, transactionType=transaction_type),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def payment_history(
        self,
        transaction_type: int | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[FiatHistoryOptions],
    ) -> Any:
        """법정화폐 결제 내역 (GET /sapi/v1/fiat/payments)"""
        validate_required_parameters(transactionType=transaction_type)
        return await self._signed(
            "GET",
            "/sapi/v1/fiat/payments",
            merge_params(options, transactionType=transaction_type),
            credentials=credentials,
            endpoint=endpoint,
        )
