"""
Broker 하위 계정 BNB Burn 설정
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.options import RecvWindowOptions
from binance_sdk.core.config.loader import Credentials
from binance_sdk.core.utils.params import merge_params
from binance_sdk.core.utils.validation import validate_required_parameters


class BrokerBnbBurnApi(ApiGroup):
    """BNB Burn API"""

    async def change_spot_bnb_burn(
        self,
        sub_account_id: str,
        spot_bnb_burn: bool | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """현물 수수료 BNB 차감 설정 (POST /sapi/v1/broker/subAccount/bnbBurn/spot)"""
        validate_required_parameters(subAccountId=sub_account_id, spotBNBBurn=spot_bnb_burn)
        return await self._signed(
            "POST",
            "/sapi/v1/broker/subAccount/bnbBurn/spot",
            merge_params(options, subAccountId=sub_account_id, spotBNBBurn=spot_bnb_burn),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def change_margin_interest_bnb_burn(
        self,
        sub_account_id: str,
        interest_bnb_burn: bool | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """마진 이자 BNB 차감 설정 (POST /sapi/v1/broker/subAccount/bnbBurn/marginInterest)"""
        validate_required_parameters(
            subAccountId=sub_account_id, interestBNBBurn=interest_bnb_burn
        )
        return await self._signed(
            "POST",
            "/sapi/v1/broker/subAccount/bnbBurn/marginInterest",
            merge_params(options, subAccountId=sub_account_id, interestBNBBurn=interest_bnb_burn),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def bnb_burn_status(
        self,
        sub_account_id: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """BNB Burn 상태 (GET /sapi/v1/broker/subAccount/bnbBurn/status)"""
        validate_required_parameters(subAccountId=sub_account_id)
        return await self._signed(
            "GET",
            "/sapi/v1/broker/subAccount/bnbBurn/status",
            merge_params(options, subAccountId=sub_account_id),
            credentials=credentials,
            endpoint=endpoint,
        )
