"""
Crypto Loan API
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.spot.options import LoanHistoryOptions
from binance_sdk.core.config.loader import Credentials
from binance_sdk.core.utils.params import merge_params
from binance_sdk.core.utils.validation import validate_required_parameters


class LoanApi(ApiGroup):
    async def loan_history(
        self,
        asset: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[LoanHistoryOptions],
    ) -> Any:
        """대출 손익 내역 (GET /sapi/v1/loan/income)"""
        validate_required_parameters(asset=asset)
        return await self._signed(
            "GET",
            "/sapi/v1/loan/income",
            merge_params(options, asset=asset),
            credentials=credentials,
            endpoint=endpoint,
        )
