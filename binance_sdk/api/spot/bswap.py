"""
BSwap (Binance Liquid Swap) API (/sapi/v1/bswap)
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.options import Number, RecvWindowOptions
from binance_sdk.api.spot.options import (
    BswapClaimedHistoryOptions,
    BswapLiquidityAddOptions,
    BswapLiquidityOperationRecordOptions,
    BswapRewardOptions,
    BswapSwapHistoryOptions,
    PoolIdOptions,
)
from binance_sdk.core.config.loader import Credentials
from binance_sdk.core.utils.params import merge_params
from binance_sdk.core.utils.validation import validate_required_parameters


class BswapApi(ApiGroup):
    """BSwap API"""

    # -------------------------------------------------------------------------
    # 풀 / 유동성
    # -------------------------------------------------------------------------

    async def bswap_pools(
        self, *, credentials: Credentials | None = None, endpoint: str | None = None
    ) -> Any:
        """전체 스왑 풀 (GET /sapi/v1/bswap/pools)"""
        return await self._signed(
            "GET", "/sapi/v1/bswap/pools", credentials=credentials, endpoint=endpoint
        )

    async def bswap_liquidity(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[PoolIdOptions],
    ) -> Any:
        """풀 유동성 정보 (GET /sapi/v1/bswap/liquidity)"""
        return await self._signed(
            "GET", "/sapi/v1/bswap/liquidity", options, credentials=credentials, endpoint=endpoint
        )

    async def bswap_liquidity_add(
        self,
        pool_id: int,
        asset: str,
        quantity: Number,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[BswapLiquidityAddOptions],
    ) -> Any:
        """유동성 추가 (POST /sapi/v1/bswap/liquidityAdd)"""
        validate_required_parameters(poolId=pool_id, asset=asset, quantity=quantity)
        return await self._signed(
            "POST",
            "/sapi/v1/bswap/liquidityAdd",
            merge_params(options, poolId=pool_id, asset=asset, quantity=quantity),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def bswap_liquidity_remove(
        self,
        pool_id: int,
        type: str,
        asset: str,
        share_amount: Number,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """유동성 제거 (POST /sapi/v1/bswap/liquidityRemove)

        Args:
            type: "SINGLE" | "COMBINATION"
        """
        validate_required_parameters(
            poolId=pool_id, type=type, asset=asset, shareAmount=share_amount
        )
        return await self._signed(
            "POST",
            "/sapi/v1/bswap/liquidityRemove",
            merge_params(options, poolId=pool_id, type=type, asset=asset, shareAmount=share_amount),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def bswap_liquidity_operation_record(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[BswapLiquidityOperationRecordOptions],
    ) -> Any:
        """유동성 작업 내역 (GET /sapi/v1/bswap/liquidityOps)"""
        return await self._signed(
            "GET", "/sapi/v1/bswap/liquidityOps", options, credentials=credentials, endpoint=endpoint
        )

    async def bswap_get_pool_config(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[PoolIdOptions],
    ) -> Any:
        """풀 설정 (GET /sapi/v1/bswap/poolConfigure)"""
        return await self._signed(
            "GET", "/sapi/v1/bswap/poolConfigure", options, credentials=credentials, endpoint=endpoint
        )

    async def bswap_add_liquidity_preview(
        self,
        pool_id: int,
        type: str,
        quote_asset: str,
        quote_qty: Number,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """유동성 추가 미리보기 (GET /sapi/v1/bswap/addLiquidityPreview)"""
        validate_required_parameters(
            poolId=pool_id, type=type, quoteAsset=quote_asset, quoteQty=quote_qty
        )
        return await self._signed(
            "GET",
            "/sapi/v1/bswap/addLiquidityPreview",
            merge_params(options, poolId=pool_id, type=type, quoteAsset=quote_asset, quoteQty=quote_qty),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def bswap_remove_liquidity_preview(
        self,
        pool_id: int,
        type: str,
        quote_asset: str,
        share_amount: Number,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """유동성 제거 미리보기 (GET /sapi/v1/bswap/removeLiquidityPreview)"""
        validate_required_parameters(
            poolId=pool_id, type=type, quoteAsset=quote_asset, shareAmount=share_amount
        )
        return await self._signed(
            "GET",
            "/sapi/v1/bswap/removeLiquidityPreview",
            merge_params(
                options, poolId=pool_id, type=type, quoteAsset=quote_asset, shareAmount=share_amount
            ),
            credentials=credentials,
            endpoint=endpoint,
        )

    # -------------------------------------------------------------------------
    # 스왑
    # -------------------------------------------------------------------------

    async def bswap_request_quote(
        self,
        quote_asset: str,
        base_asset: str,
        quote_qty: Number,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """스왑 견적 (GET /sapi/v1/bswap/quote)"""
        validate_required_parameters(
            quoteAsset=quote_asset, baseAsset=base_asset, quoteQty=quote_qty
        )
        return await self._signed(
            "GET",
            "/sapi/v1/bswap/quote",
            merge_params(options, quoteAsset=quote_asset, baseAsset=base_asset, quoteQty=quote_qty),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def bswap_swap(
        self,
        quote_asset: str,
        base_asset: str,
        quote_qty: Number,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """스왑 실행 (POST /sapi/v1/bswap/swap)"""
        validate_required_parameters(
            quoteAsset=quote_asset, baseAsset=base_asset, quoteQty=quote_qty
        )
        return await self._signed(
            "POST",
            "/sapi/v1/bswap/swap",
            merge_params(options, quoteAsset=quote_asset, baseAsset=base_asset, quoteQty=quote_qty),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def bswap_swap_history(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[BswapSwapHistoryOptions],
    ) -> Any:
        """스왑 내역 (GET /sapi/v1/bswap/swap)"""
        return await self._signed(
            "GET", "/sapi/v1/bswap/swap", options, credentials=credentials, endpoint=endpoint
        )

    # -------------------------------------------------------------------------
    # 보상
    # -------------------------------------------------------------------------

    async def bswap_unclaimed_rewards(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[BswapRewardOptions],
    ) -> Any:
        """미수령 보상 (GET /sapi/v1/bswap/unclaimedRewards)"""
        return await self._signed(
            "GET", "/sapi/v1/bswap/unclaimedRewards", options, credentials=credentials, endpoint=endpoint
        )

    async def bswap_claim_rewards(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[BswapRewardOptions],
    ) -> Any:
        """보상 수령 (POST /sapi/v1/bswap/claimRewards)"""
        return await self._signed(
            "POST", "/sapi/v1/bswap/claimRewards", options, credentials=credentials, endpoint=endpoint
        )

    async def bswap_claimed_history(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[BswapClaimedHistoryOptions],
    ) -> Any:
        """보상 수령 내역 (GET /sapi/v1/bswap/claimedHistory)"""
        return await self._signed(
            "GET", "/sapi/v1/bswap/claimedHistory", options, credentials=credentials, endpoint=endpoint
        )
