"""
Staking API (/sapi/v1/staking)

product: "STAKING" | "F_DEFI" | "L_DEFI"
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.options import Number, RecvWindowOptions
from binance_sdk.api.spot.options import (
    StakingHistoryOptions,
    StakingProductListOptions,
    StakingProductPositionOptions,
    StakingPurchaseProductOptions,
    StakingRedeemProductOptions,
)
from binance_sdk.core.config.loader import Credentials
from binance_sdk.core.utils.params import merge_params
from binance_sdk.core.utils.validation import validate_required_parameters


class StakingApi(ApiGroup):
    """Staking API"""

    async def staking_product_list(
        self,
        product: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[StakingProductListOptions],
    ) -> Any:
        """Staking 상품 목록 (GET /sapi/v1/staking/productList)"""
        validate_required_parameters(product=product)
        return await self._signed(
            "GET",
            "/sapi/v1/staking/productList",
            merge_params(options, product=product),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def staking_purchase_product(
        self,
        product: str,
        product_id: str | int,
        amount: Number,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[StakingPurchaseProductOptions],
    ) -> Any:
        """Staking 가입 (POST /sapi/v1/staking/purchase)"""
        validate_required_parameters(product=product, productId=product_id, amount=amount)
        return await self._signed(
            "POST",
            "/sapi/v1/staking/purchase",
            merge_params(options, product=product, productId=product_id, amount=amount),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def staking_redeem_product(
        self,
        product: str,
        product_id: str | int,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[StakingRedeemProductOptions],
    ) -> Any:
        """Staking 상환 (POST /sapi/v1/staking/redeem)"""
        validate_required_parameters(product=product, productId=product_id)
        return await self._signed(
            "POST",
            "/sapi/v1/staking/redeem",
            merge_params(options, product=product, productId=product_id),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def staking_product_position(
        self,
        product: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[StakingProductPositionOptions],
    ) -> Any:
        """Staking 보유 현황 (GET /sapi/v1/staking/position)"""
        validate_required_parameters(product=product)
        return await self._signed(
            "GET",
            "/sapi/v1/staking/position",
            merge_params(options, product=product),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def staking_history(
        self,
        product: str,
        txn_type: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[StakingHistoryOptions],
    ) -> Any:
        """Staking 내역 (GET /sapi/v1/staking/stakingRecord)

        Args:
            txn_type: "SUBSCRIPTION" | "REDEMPTION" | "INTEREST"
        """
        validate_required_parameters(product=product, txnType=txn_type)
        return await self._signed(
            "GET",
            "/sapi/v1/staking/stakingRecord",
            merge_params(options, product=product, txnType=txn_type),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def staking_set_auto_staking(
        self,
        product: str,
        position_id: str,
        renewable: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """자동 재예치 설정 (POST /sapi/v1/staking/setAutoStaking)"""
        validate_required_parameters(
            product=product, positionId=position_id, renewable=renewable
        )
        return await self._signed(
            "POST",
            "/sapi/v1/staking/setAutoStaking",
            merge_params(options, product=product, positionId=position_id, renewable=renewable),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def staking_product_quota(
        self,
        product: str,
        product_id: str | int,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """개인 잔여 한도 (GET /sapi/v1/staking/personalLeftQuota)"""
        validate_required_parameters(product=product, productId=product_id)
        return await self._signed(
            "GET",
            "/sapi/v1/staking/personalLeftQuota",
            merge_params(options, product=product, productId=product_id),
            credentials=credentials,
            endpoint=endpoint,
        )
