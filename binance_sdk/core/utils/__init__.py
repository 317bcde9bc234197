"""요청 파라미터 유틸리티"""

from binance_sdk.core.utils.params import (
    build_query_string,
    is_empty_value,
    merge_params,
    remove_empty_value,
    upper_fields,
)
from binance_sdk.core.utils.validation import (
    has_one_of_parameters,
    validate_required_parameters,
)

__all__ = [
    "build_query_string",
    "is_empty_value",
    "merge_params",
    "remove_empty_value",
    "upper_fields",
    "has_one_of_parameters",
    "validate_required_parameters",
]
