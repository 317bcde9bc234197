"""
core/utils/validation.py 테스트
"""

import pytest

from binance_sdk.core.errors import ParameterRequiredError
from binance_sdk.core.utils.validation import (
    has_one_of_parameters,
    validate_required_parameters,
)


class TestValidateRequiredParameters:
    """validate_required_parameters 테스트"""

    def test_all_present(self) -> None:
        validate_required_parameters(symbol="BTCUSDT", limit=0, reduceOnly=False)

    def test_single_missing(self) -> None:
        with pytest.raises(ParameterRequiredError) as exc_info:
            validate_required_parameters(symbol="BTCUSDT", interval="")

        assert exc_info.value.names == ["interval"]
        assert str(exc_info.value) == (
            "One or more of required parameters is missing: interval"
        )

    def test_reports_all_missing(self) -> None:
        """비어 있는 필수 인자 이름을 모두 보고"""
        with pytest.raises(ParameterRequiredError) as exc_info:
            validate_required_parameters(symbol=None, side="BUY", type="  ")

        assert exc_info.value.names == ["symbol", "type"]

    def test_empty_list_missing(self) -> None:
        with pytest.raises(ParameterRequiredError):
            validate_required_parameters(batchOrders=[])


class TestHasOneOfParameters:
    """has_one_of_parameters 테스트"""

    def test_one_present(self) -> None:
        has_one_of_parameters(orderId=None, origClientOrderId="abc")

    def test_all_present(self) -> None:
        has_one_of_parameters(orderId=1, origClientOrderId="abc")

    def test_none_present(self) -> None:
        with pytest.raises(ParameterRequiredError) as exc_info:
            has_one_of_parameters(orderId=None, origClientOrderId="")

        assert exc_info.value.names == ["orderId", "origClientOrderId"]
        assert str(exc_info.value) == (
            "One of the following parameters is required: orderId, origClientOrderId"
        )
