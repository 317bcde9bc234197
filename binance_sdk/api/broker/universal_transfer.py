"""
Broker 유니버설 이체

account type: SPOT | USDT_FUTURE | COIN_FUTURE
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.broker.options import TransferOptions, UniversalTransferHistoryOptions
from binance_sdk.api.options import Number, RecvWindowOptions
from binance_sdk.core.config.loader import Credentials
from binance_sdk.core.utils.params import merge_params
from binance_sdk.core.utils.validation import validate_required_parameters


class BrokerUniversalTransferApi(ApiGroup):
    """Broker 유니버설 이체 API"""

    async def universal_transfer(
        self,
        from_account_type: str,
        to_account_type: str,
        asset: str,
        amount: Number,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[TransferOptions],
    ) -> Any:
        """유니버설 이체 (POST /sapi/v1/broker/universalTransfer)"""
        validate_required_parameters(
            fromAccountType=from_account_type,
            toAccountType=to_account_type,
            asset=asset,
            amount=amount,
        )
        return await self._signed(
            "POST",
            "/sapi/v1/broker/universalTransfer",
            merge_params(
                options,
                fromAccountType=from_account_type,
                toAccountType=to_account_type,
                asset=asset,
                amount=amount,
            ),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def universal_transfer_history(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[UniversalTransferHistoryOptions],
    ) -> Any:
        """유니버설 이체 내역 (GET /sapi/v1/broker/universalTransfer)"""
        return await self._signed(
            "GET",
            "/sapi/v1/broker/universalTransfer",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    async def enable_universal_transfer(
        self,
        sub_account_id: str,
        sub_account_api_key: str,
        can_universal_transfer: bool | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """API Key 유니버설 이체 권한 (POST /sapi/v1/broker/subAccountApi/permission/universalTransfer)"""
        validate_required_parameters(
            subAccountId=sub_account_id,
            subAccountApiKey=sub_account_api_key,
            canUniversalTransfer=can_universal_transfer,
        )
        return await self._signed(
            "POST",
            "/sapi/v1/broker/subAccountApi/permission/universalTransfer",
            merge_params(
                options,
                subAccountId=sub_account_id,
                subAccountApiKey=sub_account_api_key,
                canUniversalTransfer=can_universal_transfer,
            ),
            credentials=credentials,
            endpoint=endpoint,
        )
