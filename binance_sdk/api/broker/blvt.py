"""
Broker 하위 계정 BLVT 활성화
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.options import RecvWindowOptions
from binance_sdk.core.config.loader import Credentials
from binance_sdk.core.utils.params import merge_params
from binance_sdk.core.utils.validation import validate_required_parameters


class BrokerBlvtApi(ApiGroup):
    async def enable_blvt(
        self,
        sub_account_id: str,
        blvt: bool | str = True,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """하위 계정 BLVT 활성화 (POST /sapi/v1/broker/subAccount/blvt)"""
        validate_required_parameters(subAccountId=sub_account_id, blvt=blvt)
        return await self._signed(
            "POST",
            "/sapi/v1/broker/subAccount/blvt",
            merge_params(options, subAccountId=sub_account_id, blvt=blvt),
            credentials=credentials,
            endpoint=endpoint,
        )
