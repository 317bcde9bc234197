"""
공통 요청 옵션 (TypedDict)

키 이름은 Binance 파라미터 이름 그대로 (camelCase).
모든 필드는 선택값.
"""

from typing import TypedDict

Number = int | float | str


class RecvWindowOptions(TypedDict, total=False):
    recvWindow: int


class LimitOptions(TypedDict, total=False):
    limit: int


class TimeFilterOptions(TypedDict, total=False):
    startTime: int
    endTime: int


class FilterOptions(LimitOptions, TimeFilterOptions, total=False):
    pass


class RecvWindowFilterOptions(RecvWindowOptions, FilterOptions, total=False):
    pass


class RecvWindowTimeOptions(RecvWindowOptions, TimeFilterOptions, total=False):
    pass


class PagingOptions(RecvWindowOptions, total=False):
    """current / size 페이지 조회"""

    current: int
    size: int


class PagedTimeOptions(PagingOptions, TimeFilterOptions, total=False):
    pass
