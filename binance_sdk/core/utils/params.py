"""
요청 파라미터 정리 / 직렬화

- remove_empty_value: 빈 값 제거 (새 dict 반환, 입력 불변)
- build_query_string: encodeURIComponent 규칙의 쿼리 스트링 생성
- merge_params: 필수 인자 + 옵션을 새 dict로 병합

서명 대상 문자열과 실제 전송 문자열이 같아야 하므로
직렬화 규칙은 여기 한 곳에서만 정의한다.
"""

import math
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any
from urllib.parse import quote


# encodeURIComponent가 인코딩하지 않는 문자 (영숫자 외)
_URI_COMPONENT_SAFE = "-_.!~*'()"


def is_empty_value(value: Any) -> bool:
    """빈 값 판정

    빈 값: None, NaN, 공백뿐인 문자열, 빈 mapping, 빈 list/tuple/set.
    False와 0은 의미 있는 값이므로 빈 값이 아니다.
    """
    if value is None:
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (Mapping, list, tuple, set, frozenset)):
        return len(value) == 0
    return False


def remove_empty_value(params: Any) -> dict[str, Any]:
    """빈 값을 가진 항목 제거

    Args:
        params: 요청 파라미터 mapping (mapping이 아니면 빈 dict 반환)

    Returns:
        빈 값이 제거된 새 dict (입력 순서 유지)
    """
    if not isinstance(params, Mapping):
        return {}
    return {key: value for key, value in params.items() if not is_empty_value(value)}


def _stringify(value: Any) -> str:
    """단일 값을 문자열로 변환 (인코딩 전)

    float / Decimal은 지수 표기 없이 고정 소수점으로 쓴다 (1e-05 → 0.00001).
    """
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value):
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    if isinstance(value, Decimal) and value.is_finite():
        return format(value, "f")
    if isinstance(value, (list, tuple)):
        return '["' + '","'.join(_stringify(item) for item in value) + '"]'
    return str(value)


def build_query_string(params: Mapping[str, Any]) -> str:
    """쿼리 스트링 생성

    key=value 쌍을 입력 순서대로 '&'로 연결한다.
    배열은 반복 키가 아니라 ["a","b"] 리터럴 하나로 인코딩한다.

    Args:
        params: 정리된 요청 파라미터

    Returns:
        쿼리 스트링 (비어 있으면 "")

    Example:
        >>> build_query_string({"symbols": ["BTCUSDT", "ETHUSDT"]})
        'symbols=%5B%22BTCUSDT%22%2C%22ETHUSDT%22%5D'
    """
    if not params:
        return ""
    return "&".join(
        f"{key}={quote(_stringify(value), safe=_URI_COMPONENT_SAFE)}"
        for key, value in params.items()
    )


def merge_params(options: Mapping[str, Any] | None = None, **required: Any) -> dict[str, Any]:
    """필수 인자와 옵션을 새 dict로 병합

    필수 인자가 먼저 오고, 같은 키가 있으면 필수 인자가 우선한다.
    호출자의 options는 수정하지 않는다.
    """
    merged: dict[str, Any] = dict(required)
    if options:
        for key, value in options.items():
            if key not in merged:
                merged[key] = value
    return merged


def upper_fields(params: Mapping[str, Any], *keys: str) -> dict[str, Any]:
    """지정한 키의 문자열 값(또는 문자열 배열)을 대문자로 바꾼 새 dict 반환"""
    result = dict(params)
    for key in keys:
        value = result.get(key)
        if isinstance(value, str):
            result[key] = value.upper()
        elif isinstance(value, (list, tuple)):
            result[key] = [item.upper() if isinstance(item, str) else item for item in value]
    return result
