"""
필수 파라미터 검증

요청을 만들기 전에 호출해 빈 필수 인자를 이름과 함께 보고한다.
"""

from typing import Any

from binance_sdk.core.errors import ParameterRequiredError
from binance_sdk.core.utils.params import is_empty_value


def validate_required_parameters(**params: Any) -> None:
    """모든 필수 파라미터가 비어 있지 않은지 검증

    Raises:
        ParameterRequiredError: 하나 이상 비어 있는 경우 (누락된 이름 전부 포함)

    Example:
        >>> validate_required_parameters(symbol="BTCUSDT", interval="")
        Traceback (most recent call last):
        ...
        ParameterRequiredError: One or more of required parameters is missing: interval
    """
    missing = [name for name, value in params.items() if is_empty_value(value)]
    if missing:
        raise ParameterRequiredError(missing)


def has_one_of_parameters(**params: Any) -> None:
    """주어진 파라미터 중 최소 하나는 값이 있는지 검증

    Raises:
        ParameterRequiredError: 전부 비어 있는 경우
    """
    if params and all(is_empty_value(value) for value in params.values()):
        names = list(params)
        raise ParameterRequiredError(
            names,
            "One of the following parameters is required: " + ", ".join(names),
        )
