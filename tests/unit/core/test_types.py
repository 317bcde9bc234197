"""
core/types.py 테스트

모든 Enum이 str을 상속해 쿼리 값으로 그대로 쓸 수 있는지 확인
"""

import pytest

from binance_sdk.core.types import (
    AccountSnapshotType,
    ContractType,
    FuturePeriod,
    HttpMethod,
    KlineInterval,
    MarginType,
    OrderSide,
    OrderType,
    PositionSide,
    Product,
    TimeInForce,
    TradingMode,
    UniversalTransferType,
)


ALL_ENUMS = [
    TradingMode,
    Product,
    HttpMethod,
    OrderSide,
    OrderType,
    TimeInForce,
    PositionSide,
    KlineInterval,
    ContractType,
    MarginType,
    UniversalTransferType,
    AccountSnapshotType,
    FuturePeriod,
]


class TestTradingMode:
    """TradingMode 테스트"""

    def test_values(self) -> None:
        assert TradingMode.PRODUCTION.value == "production"
        assert TradingMode.TESTNET.value == "testnet"

    def test_from_string(self) -> None:
        """문자열에서 생성"""
        assert TradingMode("production") == TradingMode.PRODUCTION
        assert TradingMode("testnet") == TradingMode.TESTNET

    def test_invalid_value(self) -> None:
        with pytest.raises(ValueError):
            TradingMode("paper")


class TestStrEnums:
    """str 상속 확인"""

    @pytest.mark.parametrize("enum_cls", ALL_ENUMS)
    def test_is_str(self, enum_cls) -> None:
        """모든 멤버가 str 인스턴스"""
        for member in enum_cls:
            assert isinstance(member, str)
            assert member == member.value


class TestKlineInterval:
    """KlineInterval 테스트"""

    def test_case_sensitive_month(self) -> None:
        """1m(분)과 1M(월)은 구분"""
        assert KlineInterval.ONE_MINUTE.value == "1m"
        assert KlineInterval.ONE_MONTH.value == "1M"

    def test_second_interval(self) -> None:
        assert KlineInterval("1s") == KlineInterval.ONE_SECOND


class TestFuturePeriod:
    """FuturePeriod 테스트"""

    def test_values(self) -> None:
        assert [p.value for p in FuturePeriod] == [
            "5m", "15m", "30m", "1h", "2h", "4h", "6h", "12h", "1d",
        ]


class TestOrderEnums:
    """주문 관련 Enum 테스트"""

    def test_order_side(self) -> None:
        assert OrderSide.BUY == "BUY"
        assert OrderSide.SELL == "SELL"

    def test_futures_order_types(self) -> None:
        assert OrderType("STOP_MARKET") == OrderType.STOP_MARKET
        assert OrderType("TRAILING_STOP_MARKET") == OrderType.TRAILING_STOP_MARKET

    def test_gtx_time_in_force(self) -> None:
        """GTX (Post Only)는 선물 전용"""
        assert TimeInForce.GTX.value == "GTX"

    def test_position_side(self) -> None:
        assert {p.value for p in PositionSide} == {"BOTH", "LONG", "SHORT"}
