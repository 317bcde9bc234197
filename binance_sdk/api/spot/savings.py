"""
Savings API (/sapi/v1/lending)

Flexible / Fixed / Activity 상품 조회, 가입, 상환, 내역.
"""

from typing import Any, Unpack

from binance_sdk.api.base import ApiGroup
from binance_sdk.api.options import Number, RecvWindowOptions
from binance_sdk.api.spot.options import (
    SavingsCustomizedPositionOptions,
    SavingsFlexibleProductsOptions,
    SavingsProductListOptions,
    SavingsRecordOptions,
)
from binance_sdk.core.config.loader import Credentials
from binance_sdk.core.utils.params import merge_params
from binance_sdk.core.utils.validation import validate_required_parameters


class SavingsApi(ApiGroup):
    """Savings API"""

    # -------------------------------------------------------------------------
    # Flexible
    # -------------------------------------------------------------------------

    async def savings_flexible_products(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SavingsFlexibleProductsOptions],
    ) -> Any:
        """Flexible 상품 목록 (GET /sapi/v1/lending/daily/product/list)"""
        return await self._signed(
            "GET",
            "/sapi/v1/lending/daily/product/list",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    async def savings_flexible_user_left_quota(
        self,
        product_id: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """Flexible 상품 잔여 가입 한도 (GET /sapi/v1/lending/daily/userLeftQuota)"""
        validate_required_parameters(productId=product_id)
        return await self._signed(
            "GET",
            "/sapi/v1/lending/daily/userLeftQuota",
            merge_params(options, productId=product_id),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def savings_purchase_flexible_product(
        self,
        product_id: str,
        amount: Number,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """Flexible 상품 가입 (POST /sapi/v1/lending/daily/purchase)"""
        validate_required_parameters(productId=product_id, amount=amount)
        return await self._signed(
            "POST",
            "/sapi/v1/lending/daily/purchase",
            merge_params(options, productId=product_id, amount=amount),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def savings_flexible_user_redemption_quota(
        self,
        product_id: str,
        type: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """Flexible 상환 한도 (GET /sapi/v1/lending/daily/userRedemptionQuota)

        Args:
            type: "FAST" | "NORMAL"
        """
        validate_required_parameters(productId=product_id, type=type)
        return await self._signed(
            "GET",
            "/sapi/v1/lending/daily/userRedemptionQuota",
            merge_params(options, productId=product_id, type=type),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def savings_flexible_redeem(
        self,
        product_id: str,
        amount: Number,
        type: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """Flexible 상환 (POST /sapi/v1/lending/daily/redeem)"""
        validate_required_parameters(productId=product_id, amount=amount, type=type)
        return await self._signed(
            "POST",
            "/sapi/v1/lending/daily/redeem",
            merge_params(options, productId=product_id, amount=amount, type=type),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def savings_flexible_product_position(
        self,
        asset: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """Flexible 보유 현황 (GET /sapi/v1/lending/daily/token/position)"""
        validate_required_parameters(asset=asset)
        return await self._signed(
            "GET",
            "/sapi/v1/lending/daily/token/position",
            merge_params(options, asset=asset),
            credentials=credentials,
            endpoint=endpoint,
        )

    # -------------------------------------------------------------------------
    # Fixed / Activity
    # -------------------------------------------------------------------------

    async def savings_product_list(
        self,
        type: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SavingsProductListOptions],
    ) -> Any:
        """Fixed / Activity 상품 목록 (GET /sapi/v1/lending/project/list)

        Args:
            type: "ACTIVITY" | "CUSTOMIZED_FIXED"
        """
        validate_required_parameters(type=type)
        return await self._signed(
            "GET",
            "/sapi/v1/lending/project/list",
            merge_params(options, type=type),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def savings_purchase_customized_project(
        self,
        project_id: str,
        lot: Number,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """Fixed / Activity 상품 가입 (POST /sapi/v1/lending/customizedFixed/purchase)"""
        validate_required_parameters(projectId=project_id, lot=lot)
        return await self._signed(
            "POST",
            "/sapi/v1/lending/customizedFixed/purchase",
            merge_params(options, projectId=project_id, lot=lot),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def savings_customized_position(
        self,
        asset: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SavingsCustomizedPositionOptions],
    ) -> Any:
        """Fixed / Activity 보유 현황 (GET /sapi/v1/lending/project/position/list)"""
        validate_required_parameters(asset=asset)
        return await self._signed(
            "GET",
            "/sapi/v1/lending/project/position/list",
            merge_params(options, asset=asset),
            credentials=credentials,
            endpoint=endpoint,
        )

    # -------------------------------------------------------------------------
    # 계정 / 내역
    # -------------------------------------------------------------------------

    async def savings_account(
        self,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[RecvWindowOptions],
    ) -> Any:
        """Savings 계정 (GET /sapi/v1/lending/union/account)"""
        return await self._signed(
            "GET",
            "/sapi/v1/lending/union/account",
            options,
            credentials=credentials,
            endpoint=endpoint,
        )

    async def savings_purchase_record(
        self,
        lending_type: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SavingsRecordOptions],
    ) -> Any:
        """가입 내역 (GET /sapi/v1/lending/union/purchaseRecord)

        Args:
            lending_type: "DAILY" | "ACTIVITY" | "CUSTOMIZED_FIXED"
        """
        validate_required_parameters(lendingType=lending_type)
        return await self._signed(
            "GET",
            "/sapi/v1/lending/union/purchaseRecord",
            merge_params(options, lendingType=lending_type),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def savings_redemption_record(
        self,
        lending_type: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SavingsRecordOptions],
    ) -> Any:
        """상환 내역 (GET /sapi/v1/lending/union/redemptionRecord)"""
        validate_required_parameters(lendingType=lending_type)
        return await self._signed(
            "GET",
            "/sapi/v1/lending/union/redemptionRecord",
            merge_params(options, lendingType=lending_type),
            credentials=credentials,
            endpoint=endpoint,
        )

    async def savings_interest_history(
        self,
        lending_type: str,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
        **options: Unpack[SavingsRecordOptions],
    ) -> Any:
        """이자 내역 (GET /sapi/v1/lending/union/interestHistory)"""
        validate_required_parameters(lendingType=lending_type)
        return await self._signed(
            "GET",
            "/sapi/v1/lending/union/interestHistory",
            merge_params(options, lendingType=lending_type),
            credentials=credentials,
            endpoint=endpoint,
        )
