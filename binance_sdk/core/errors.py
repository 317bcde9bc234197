"""
SDK 예외 정의

- BinanceClientError: 모든 SDK 예외의 기반
- ParameterRequiredError: 필수 파라미터 누락 (요청 전 발생)
- MissingSecretError: 서명 요청에 apiSecret 없음 (요청 전 발생)
- BinanceApiError: HTTP 응답 실패 / 네트워크 실패의 정규화된 형태
"""

from typing import Any

from binance_sdk.core.constants import Defaults


class BinanceClientError(Exception):
    """SDK 예외 기반 클래스"""

    pass


class ParameterRequiredError(BinanceClientError, ValueError):
    """필수 파라미터 누락 예외

    Attributes:
        names: 누락된 파라미터 이름 목록
    """

    def __init__(self, names: list[str], message: str | None = None):
        self.names = list(names)
        if message is None:
            message = (
                "One or more of required parameters is missing: "
                + ", ".join(self.names)
            )
        super().__init__(message)


class MissingSecretError(BinanceClientError):
    """서명 요청인데 apiSecret이 설정되지 않음"""

    def __init__(self, message: str = "apiSecret is required for signed requests"):
        super().__init__(message)


class BinanceApiError(BinanceClientError):
    """API 호출 실패

    non-2xx 응답이면 http_status에 상태 코드, message에 응답의 msg 필드.
    응답 자체가 없으면 (연결 실패, 타임아웃) http_status는 None.

    str() 형태는 "Code #<status> - Message: <message>" 로 고정.
    """

    def __init__(
        self,
        http_status: int | None,
        message: str = Defaults.NETWORK_ERROR_MESSAGE,
        raw_body: Any | None = None,
        code: int | None = None,
    ):
        self.http_status = http_status
        self.message = message
        self.raw_body = raw_body
        self.code = code
        super().__init__(f"Code #{http_status or 0} - Message: {message}")

    @property
    def is_network_error(self) -> bool:
        """응답 없이 실패했는지 여부"""
        return self.http_status is None

    def __repr__(self) -> str:
        return (
            f"BinanceApiError(http_status={self.http_status!r}, "
            f"code={self.code!r}, message={self.message!r})"
        )
