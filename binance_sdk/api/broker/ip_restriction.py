"""
Broker 하위 계정 API Key IP 제한
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.options import RecvWindowOptions
from binance_sdk.core.config.loader import Credentials
from binance_sdk.core.utils.params import merge_params
from binance_sdk.core.utils.validation import validate_required_parameters

_IP_RESTRICTION_PATH = "/sapi/v1/broker/subAccountApi/ipRestriction"
_IP_LIST_PATH = "/sapi/v1/broker/subAccountApi/ipRestriction/ipList"


class BrokerIpRestrictionApi(ApiGroup):
    """IP 제한 API"""

    async def change_ip_restriction(
        self,
        sub_account_id: str,
        sub_account_api_key: str,
        ip_restrict: bool | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """IP 제한 사용 여부 변경 (POST)"""
        validate_required_parameters(
            subAccountId=sub_account_id,
            subAccountApiKey=sub_account_api_key,
            ipRestrict=ip_restrict,
        )
        return await self._signed(
            "POST",
            _IP_RESTRICTION_PATH,
            merge_params(
                options,
                subAccountId=sub_account_id,
                subAccountApiKey=sub_account_api_key,
                ipRestrict=ip_restrict,
            ),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def ip_restriction(
        self,
        sub_account_id: str,
        sub_account_api_key: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """IP 제한 조회 (GET)"""
        validate_required_parameters(
            subAccountId=sub_account_id, subAccountApiKey=sub_account_api_key
        )
        return await self._signed(
            "GET",
            _IP_RESTRICTION_PATH,
            merge_params(options, subAccountId=sub_account_id, subAccountApiKey=sub_account_api_key),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def add_ip_restriction(
        self,
        sub_account_id: str,
        sub_account_api_key: str,
        ip_address: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """허용 IP 추가 (POST .../ipList)"""
        validate_required_parameters(
            subAccountId=sub_account_id,
            subAccountApiKey=sub_account_api_key,
            ipAddress=ip_address,
        )
        return await self._signed(
            "POST",
            _IP_LIST_PATH,
            merge_params(
                options,
                subAccountId=sub_account_id,
                subAccountApiKey=sub_account_api_key,
                ipAddress=ip_address,
            ),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def delete_ip_restriction(
        self,
        sub_account_id: str,
        sub_account_api_key: str,
        ip_address: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """허용 IP 삭제 (DELETE .../ipList)"""
        validate_required_parameters(
            subAccountId=sub_account_id,
            subAccountApiKey=sub_account_api_key,
            ipAddress=ip_address,
        )
        return await self._signed(
            "DELETE",
            _IP_LIST_PATH,
            merge_params(
                options,
                subAccountId=sub_account_id,
                subAccountApiKey=sub_account_api_key,
                ipAddress=ip_address,
            ),
            credentials=credentials,
            endpoint=endpoint,
        )
