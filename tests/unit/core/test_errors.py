"""
core/errors.py 테스트

예외 계층과 문자열 표현 확인
"""

import pytest

from binance_sdk.core.errors import (
    BinanceApiError,
    BinanceClientError,
    MissingSecretError,
    ParameterRequiredError,
)


class TestParameterRequiredError:
    """ParameterRequiredError 테스트"""

    def test_default_message(self) -> None:
        """누락 파라미터 이름을 모두 포함"""
        error = ParameterRequiredError(["symbol", "side"])

        assert error.names == ["symbol", "side"]
        assert str(error) == (
            "One or more of required parameters is missing: symbol, side"
        )

    def test_custom_message(self) -> None:
        error = ParameterRequiredError(["a", "b"], "One of a, b")
        assert str(error) == "One of a, b"

    def test_is_value_error(self) -> None:
        """ValueError로도 잡을 수 있음"""
        with pytest.raises(ValueError):
            raise ParameterRequiredError(["symbol"])

    def test_is_client_error(self) -> None:
        assert issubclass(ParameterRequiredError, BinanceClientError)


class TestMissingSecretError:
    """MissingSecretError 테스트"""

    def test_message(self) -> None:
        assert "apiSecret" in str(MissingSecretError())

    def test_is_client_error(self) -> None:
        assert isinstance(MissingSecretError(), BinanceClientError)


class TestBinanceApiError:
    """BinanceApiError 테스트"""

    def test_http_error(self) -> None:
        """HTTP 응답이 있는 실패"""
        error = BinanceApiError(
            400,
            "Invalid symbol.",
            raw_body={"code": -1121, "msg": "Invalid symbol."},
            code=-1121,
        )

        assert error.http_status == 400
        assert error.message == "Invalid symbol."
        assert error.code == -1121
        assert error.raw_body == {"code": -1121, "msg": "Invalid symbol."}
        assert str(error) == "Code #400 - Message: Invalid symbol."
        assert error.is_network_error is False

    def test_network_error(self) -> None:
        """응답 없는 실패는 상태 코드 0으로 표시"""
        error = BinanceApiError(None)

        assert error.http_status is None
        assert error.message == "network error"
        assert error.raw_body is None
        assert error.code is None
        assert str(error) == "Code #0 - Message: network error"
        assert error.is_network_error is True

    def test_repr(self) -> None:
        error = BinanceApiError(418, "banned", code=-1003)
        assert repr(error) == (
            "BinanceApiError(http_status=418, code=-1003, message='banned')"
        )
