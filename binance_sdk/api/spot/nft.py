"""
NFT API (/sapi/v1/nft)
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.spot.options import NftAssetOptions, NftHistoryOptions
from binance_sdk.core.config.loader import Credentials
from binance_sdk.core.utils.params import merge_params
from binance_sdk.core.utils.validation import validate_required_parameters


class NftApi(ApiGroup):
    """NFT API"""

    async def nft_transaction_history(
        self,
        order_type: int | str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[NftHistoryOptions],
    ) -> Any:
        """NFT 거래 내역 (GET /sapi/v1/nft/history/transactions)

        Args:
            order_type: 0 구매, 1 판매, 2 로열티, 3 민팅, 4 수수료
        """
        validate_required_parameters(orderType=order_type)
        return await self._signed(
            "GET",
            "/sapi/v1/nft/history/transactions",
            merge_params(options, orderType=order_type),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def nft_deposit_history(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[NftHistoryOptions],
    ) -> Any:
        """NFT 입금 내역 (GET /sapi/v1/nft/history/deposit)"""
        return await self._signed(
            "GET", "/sapi/v1/nft/history/deposit", options, credentials=credentials, endpoint=endpoint
        )

    async def nft_withdraw_history(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[NftHistoryOptions],
    ) -> Any:
        """NFT 출금 내역 (GET /sapi/v1/nft/history/withdraw)"""
        return await self._signed(
            "GET", "/sapi/v1/nft/history/withdraw", options, credentials=credentials, endpoint=endpoint
        )

    async def nft_asset(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[NftAssetOptions],
    ) -> Any:
        """보유 NFT 자산 (GET /sapi/v1/nft/user/getAsset)"""
        return await self._signed(
            "GET", "/sapi/v1/nft/user/getAsset", options, credentials=credentials, endpoint=endpoint
        )
