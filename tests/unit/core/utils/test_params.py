"""
core/utils/params.py 테스트

빈 값 제거, 쿼리 직렬화, 파라미터 병합 확인
"""

import math
from decimal import Decimal
from urllib.parse import parse_qsl

import pytest

from binance_sdk.core.types import OrderSide, TimeInForce
from binance_sdk.core.utils.params import (
    build_query_string,
    is_empty_value,
    merge_params,
    remove_empty_value,
    upper_fields,
)


class TestIsEmptyValue:
    """is_empty_value 테스트"""

    @pytest.mark.parametrize(
        "value",
        [None, "", "   ", "\t\n", math.nan, Decimal("NaN"), {}, [], (), set()],
    )
    def test_empty(self, value) -> None:
        assert is_empty_value(value) is True

    @pytest.mark.parametrize(
        "value",
        [False, True, 0, 0.0, Decimal("0"), "0", "a", ["a"], {"a": 1}, OrderSide.BUY],
    )
    def test_not_empty(self, value) -> None:
        """False와 0은 유지"""
        assert is_empty_value(value) is False


class TestRemoveEmptyValue:
    """remove_empty_value 테스트"""

    def test_removes_empty(self) -> None:
        params = {
            "symbol": "BTCUSDT",
            "a": None,
            "b": "",
            "c": "  ",
            "d": float("nan"),
            "e": {},
            "f": [],
            "limit": 0,
            "reduceOnly": False,
        }

        assert remove_empty_value(params) == {
            "symbol": "BTCUSDT",
            "limit": 0,
            "reduceOnly": False,
        }

    def test_preserves_order(self) -> None:
        params = {"z": 1, "a": None, "m": 2, "b": 3}
        assert list(remove_empty_value(params)) == ["z", "m", "b"]

    def test_does_not_mutate_input(self) -> None:
        params = {"a": None, "b": 1}
        result = remove_empty_value(params)

        assert params == {"a": None, "b": 1}
        assert result is not params

    def test_idempotent(self) -> None:
        params = {"a": "", "b": 0, "c": [], "d": "x"}
        once = remove_empty_value(params)
        assert remove_empty_value(once) == once

    @pytest.mark.parametrize("value", [None, "symbol=BTCUSDT", 42, ["a"]])
    def test_non_mapping(self, value) -> None:
        """mapping이 아니면 빈 dict"""
        assert remove_empty_value(value) == {}


class TestBuildQueryString:
    """build_query_string 테스트"""

    def test_empty(self) -> None:
        assert build_query_string({}) == ""

    def test_insertion_order(self) -> None:
        query = build_query_string({"symbol": "BTCUSDT", "limit": 5, "fromId": 10})
        assert query == "symbol=BTCUSDT&limit=5&fromId=10"

    def test_array_literal(self) -> None:
        """배열은 반복 키가 아니라 하나의 리터럴로 인코딩"""
        assert build_query_string({"k": ["a", "b"]}) == "k=%5B%22a%22%2C%22b%22%5D"

    def test_array_of_symbols(self) -> None:
        query = build_query_string({"symbols": ["BTCUSDT", "ETHUSDT"]})
        assert query == "symbols=%5B%22BTCUSDT%22%2C%22ETHUSDT%22%5D"
        assert query.count("symbols=") == 1

    def test_uri_component_encoding(self) -> None:
        """encodeURIComponent와 같은 안전 문자 집합"""
        query = build_query_string({"v": "a b/c:d?e&f=g-_.!~*'()"})
        assert query == "v=a%20b%2Fc%3Ad%3Fe%26f%3Dg-_.!~*'()"

    def test_unicode(self) -> None:
        assert build_query_string({"v": "é"}) == "v=%C3%A9"

    def test_bool(self) -> None:
        query = build_query_string({"dualSidePosition": True, "reduceOnly": False})
        assert query == "dualSidePosition=true&reduceOnly=false"

    def test_enum(self) -> None:
        query = build_query_string({"side": OrderSide.SELL, "timeInForce": TimeInForce.GTC})
        assert query == "side=SELL&timeInForce=GTC"

    def test_numbers(self) -> None:
        """정수 float은 .0 없이, 나머지는 그대로"""
        query = build_query_string(
            {"a": 5.0, "b": 0.001, "c": Decimal("1.50"), "d": 0}
        )
        assert query == "a=5&b=0.001&c=1.50&d=0"

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0.00001, "0.00001"),
            (1e-7, "0.0000001"),
            (1.5e-5, "0.000015"),
            (Decimal("1E-5"), "0.00001"),
            (Decimal("1E+2"), "100"),
        ],
    )
    def test_small_numbers_without_exponent(self, value, expected) -> None:
        """작은 수량도 지수 표기 없이 고정 소수점"""
        assert build_query_string({"quantity": value}) == f"quantity={expected}"

    def test_round_trip_scalars(self) -> None:
        """스칼라 값은 디코딩하면 문자열 표현으로 복원"""
        params = {"symbol": "BTC USDT", "price": "0.1", "note": "a&b=c", "limit": 10}
        decoded = dict(parse_qsl(build_query_string(params)))
        assert decoded == {"symbol": "BTC USDT", "price": "0.1", "note": "a&b=c", "limit": "10"}


class TestMergeParams:
    """merge_params 테스트"""

    def test_required_first(self) -> None:
        merged = merge_params({"limit": 5}, symbol="BTCUSDT")
        assert list(merged) == ["symbol", "limit"]

    def test_required_wins(self) -> None:
        """같은 키면 필수 인자 우선"""
        merged = merge_params({"symbol": "ETHUSDT", "limit": 5}, symbol="BTCUSDT")
        assert merged == {"symbol": "BTCUSDT", "limit": 5}

    def test_no_options(self) -> None:
        assert merge_params(None, symbol="BTCUSDT") == {"symbol": "BTCUSDT"}
        assert merge_params() == {}

    def test_does_not_mutate_options(self) -> None:
        options = {"limit": 5}
        merged = merge_params(options, symbol="BTCUSDT")
        merged["extra"] = 1

        assert options == {"limit": 5}


class TestUpperFields:
    """upper_fields 테스트"""

    def test_string_and_list(self) -> None:
        params = {"symbol": "btcusdt", "symbols": ["ethusdt", "bnbusdt"], "limit": 5}
        result = upper_fields(params, "symbol", "symbols")

        assert result == {"symbol": "BTCUSDT", "symbols": ["ETHUSDT", "BNBUSDT"], "limit": 5}
        assert params["symbol"] == "btcusdt"

    def test_missing_key_ignored(self) -> None:
        assert upper_fields({"limit": 5}, "symbol") == {"limit": 5}
