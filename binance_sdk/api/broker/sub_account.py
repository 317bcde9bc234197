"""
Broker 하위 계정 / 하위 계정 API Key 관리
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.broker.options import (
    CreateApiKeyOptions,
    CreateSubAccountOptions,
    QueryApiKeyOptions,
    SubAccountListOptions,
)
from binance_sdk.api.options import RecvWindowOptions
from binance_sdk.core.config.loader import Credentials
from binance_sdk.core.utils.params import merge_params
from binance_sdk.core.utils.validation import validate_required_parameters


class BrokerSubAccountApi(ApiGroup):
    """Broker 하위 계정 API"""

    async def create_sub_account(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[CreateSubAccountOptions],
    ) -> Any:
        """하위 계정 생성 (POST /sapi/v1/broker/subAccount)"""
        return await self._signed(
            "POST", "/sapi/v1/broker/subAccount", options, credentials=credentials, endpoint=endpoint
        )

    async def sub_account_list(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SubAccountListOptions],
    ) -> Any:
        """하위 계정 목록 (GET /sapi/v1/broker/subAccount)"""
        return await self._signed(
            "GET", "/sapi/v1/broker/subAccount", options, credentials=credentials, endpoint=endpoint
        )

    async def enable_margin(
        self,
        sub_account_id: str,
        margin: bool | str = True,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """하위 계정 마진 활성화 (POST /sapi/v1/broker/subAccount/margin)"""
        validate_required_parameters(subAccountId=sub_account_id, margin=margin)
        return await self._signed(
            "POST",
            "/sapi/v1/broker/subAccount/margin",
            merge_params(options, subAccountId=sub_account_id, margin=margin),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def enable_futures(
        self,
        sub_account_id: str,
        futures: bool | str = True,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """하위 계정 선물 활성화 (POST /sapi/v1/broker/subAccount/futures)"""
        validate_required_parameters(subAccountId=sub_account_id, futures=futures)
        return await self._signed(
            "POST",
            "/sapi/v1/broker/subAccount/futures",
            merge_params(options, subAccountId=sub_account_id, futures=futures),
            credentials=credentials,
            endpoint=endpoint,
        )

    # -------------------------------------------------------------------------
    # 하위 계정 API Key
    # -------------------------------------------------------------------------

    async def create_api_key(
        self,
        sub_account_id: str,
        can_trade: bool | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[CreateApiKeyOptions],
    ) -> Any:
        """하위 계정 API Key 생성 (POST /sapi/v1/broker/subAccountApi)"""
        validate_required_parameters(subAccountId=sub_account_id, canTrade=can_trade)
        return await self._signed(
            "POST",
            "/sapi/v1/broker/subAccountApi",
            merge_params(options, subAccountId=sub_account_id, canTrade=can_trade),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def delete_api_key(
        self,
        sub_account_id: str,
        sub_account_api_key: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """하위 계정 API Key 삭제 (DELETE /sapi/v1/broker/subAccountApi)"""
        validate_required_parameters(
            subAccountId=sub_account_id, subAccountApiKey=sub_account_api_key
        )
        return await self._signed(
            "DELETE",
            "/sapi/v1/broker/subAccountApi",
            merge_params(options, subAccountId=sub_account_id, subAccountApiKey=sub_account_api_key),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def query_api_key(
        self,
        sub_account_id: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[QueryApiKeyOptions],
    ) -> Any:
        """하위 계정 API Key 조회 (GET /sapi/v1/broker/subAccountApi)"""
        validate_required_parameters(subAccountId=sub_account_id)
        return await self._signed(
            "GET",
            "/sapi/v1/broker/subAccountApi",
            merge_params(options, subAccountId=sub_account_id),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def change_permission(
        self,
        sub_account_id: str,
        sub_account_api_key: str,
        can_trade: bool | str,
        margin_trade: bool | str,
        futures_trade: bool | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """API Key 권한 변경 (POST /sapi/v1/broker/subAccountApi/permission)

        False도 유효한 값이므로 빈 값으로 취급하지 않는다.
        """
        validate_required_parameters(
            subAccountId=sub_account_id,
            subAccountApiKey=sub_account_api_key,
            canTrade=can_trade,
            marginTrade=margin_trade,
            futuresTrade=futures_trade,
        )
        return await self._signed(
            "POST",
            "/sapi/v1/broker/subAccountApi/permission",
            merge_params(
                options,
                subAccountId=sub_account_id,
                subAccountApiKey=sub_account_api_key,
                canTrade=can_trade,
                marginTrade=margin_trade,
                futuresTrade=futures_trade,
            ),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def enable_vanilla_options(
        self,
        sub_account_id: str,
        sub_account_api_key: str,
        can_vanilla_options: bool | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """API Key 옵션 거래 권한 (POST /sapi/v1/broker/subAccountApi/permission/vanillaOptions)"""
        validate_required_parameters(
            subAccountId=sub_account_id,
            subAccountApiKey=sub_account_api_key,
            canVanillaOptions=can_vanilla_options,
        )
        return await self._signed(
            "POST",
            "/sapi/v1/broker/subAccountApi/permission/vanillaOptions",
            merge_params(
                options,
                subAccountId=sub_account_id,
                subAccountApiKey=sub_account_api_key,
                canVanillaOptions=can_vanilla_options,
            ),
            credentials=credentials,
            endpoint=endpoint,
        )
