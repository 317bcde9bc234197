"""
REST 요청 디스패처

공개 요청 / 서명 요청을 만들고 한 번 전송한 뒤,
실패를 BinanceApiError 하나로 정규화한다.

- 재시도 없음, Rate Limit 추적 없음
- 호출자의 params는 수정하지 않음
- 서명한 쿼리 스트링을 그대로 URL에 붙여 전송 (httpx params 재인코딩 없음)
"""

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx

from binance_sdk.core.config.loader import ClientConfig, Credentials
from binance_sdk.core.constants import Defaults, Headers
from binance_sdk.core.errors import BinanceApiError, MissingSecretError
from binance_sdk.core.signer import generate_signature
from binance_sdk.core.types import HttpMethod, Product
from binance_sdk.core.utils.params import build_query_string, remove_empty_value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreparedRequest:
    """전송 직전의 요청

    url은 path + 쿼리 스트링 (+ signature), endpoint는 호스트.
    """

    method: str
    endpoint: str
    url: str
    headers: dict[str, str] = field(default_factory=dict, repr=False)

    @property
    def full_url(self) -> str:
        return f"{self.endpoint}{self.url}"


def _normalize_method(method: HttpMethod | str) -> str:
    """HTTP 메서드를 대문자 문자열로 정규화

    Raises:
        ValueError: GET / POST / PUT / DELETE 외의 메서드
    """
    return HttpMethod(method.upper()).value


class RequestDispatcher:
    """제품군 하나에 묶인 요청 디스패처

    Args:
        config: 클라이언트 설정 (불변)
        product: 기본 호스트를 고를 제품군
        http_client: 외부에서 주입한 httpx.AsyncClient (주입 시 close()가 닫지 않음)
    """

    def __init__(
        self,
        config: ClientConfig,
        product: Product = Product.SPOT,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.config = config
        self.product = product
        self._client = http_client
        self._owns_client = http_client is None

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTP 클라이언트 가져오기 (lazy initialization)"""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.config.timeout)
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """직접 만든 HTTP 클라이언트만 종료"""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "RequestDispatcher":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _get_timestamp(self) -> int:
        """현재 시각 (밀리초)"""
        return int(time.time() * 1000)

    def _resolve(
        self,
        credentials: Credentials | None,
        endpoint: str | None,
    ) -> tuple[Credentials, str]:
        creds = credentials if credentials is not None else self.config.credentials
        base = endpoint or self.config.base_url_for(self.product)
        return creds, base.rstrip("/")

    def _headers(self, credentials: Credentials) -> dict[str, str]:
        return {
            Headers.API_KEY: credentials.api_key or "",
            Headers.USER_AGENT: self.config.user_agent,
        }

    # -------------------------------------------------------------------------
    # 요청 생성
    # -------------------------------------------------------------------------

    def prepare_public_request(
        self,
        method: HttpMethod | str,
        path: str,
        params: Mapping[str, Any] | None = None,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
    ) -> PreparedRequest:
        """공개 요청 생성 (timestamp / signature 없음)

        쿼리가 비어 있으면 '?'를 붙이지 않는다.
        """
        creds, base = self._resolve(credentials, endpoint)
        query_string = build_query_string(remove_empty_value(params or {}))
        url = f"{path}?{query_string}" if query_string else path
        return PreparedRequest(
            method=_normalize_method(method),
            endpoint=base,
            url=url,
            headers=self._headers(creds),
        )

    def prepare_signed_request(
        self,
        method: HttpMethod | str,
        path: str,
        params: Mapping[str, Any] | None = None,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
    ) -> PreparedRequest:
        """서명 요청 생성

        순서: 빈 값 제거 → recvWindow(설정 시) → timestamp → 직렬화 → 서명 → &signature=

        Raises:
            MissingSecretError: apiSecret이 비어 있는 경우 (요청 생성 전)
        """
        creds, base = self._resolve(credentials, endpoint)
        if not creds.api_secret:
            raise MissingSecretError()

        request_params = remove_empty_value(params or {})
        if self.config.recv_window is not None and "recvWindow" not in request_params:
            request_params["recvWindow"] = self.config.recv_window
        request_params["timestamp"] = self._get_timestamp()

        query_string = build_query_string(request_params)
        signature = generate_signature(creds.api_secret, query_string)

        headers = self._headers(creds)
        headers[Headers.CONTENT_TYPE] = Headers.JSON_CONTENT_TYPE

        return PreparedRequest(
            method=_normalize_method(method),
            endpoint=base,
            url=f"{path}?{query_string}&signature={signature}",
            headers=headers,
        )

    # -------------------------------------------------------------------------
    # 요청 전송
    # -------------------------------------------------------------------------

    async def public_request(
        self,
        method: HttpMethod | str,
        path: str,
        params: Mapping[str, Any] | None = None,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
    ) -> Any:
        """공개 요청 전송

        Returns:
            JSON 응답

        Raises:
            BinanceApiError: non-2xx 응답 또는 네트워크 실패
        """
        request = self.prepare_public_request(
            method, path, params, credentials=credentials, endpoint=endpoint
        )
        return await self._send(request, path)

    async def sign_request(
        self,
        method: HttpMethod | str,
        path: str,
        params: Mapping[str, Any] | None = None,
        *,
        credentials: Credentials | None = None,
        endpoint: str | None = None,
    ) -> Any:
        """서명 요청 전송

        Returns:
            JSON 응답

        Raises:
            MissingSecretError: apiSecret이 없는 경우
            BinanceApiError: non-2xx 응답 또는 네트워크 실패
        """
        request = self.prepare_signed_request(
            method, path, params, credentials=credentials, endpoint=endpoint
        )
        return await self._send(request, path)

    async def _send(self, request: PreparedRequest, path: str) -> Any:
        """요청 1회 전송 및 실패 정규화

        쿼리/서명은 로그에 남기지 않는다 (path만 기록).
        """
        client = await self._get_client()
        try:
            response = await client.request(
                request.method,
                request.full_url,
                headers=request.headers,
            )
        except httpx.RequestError as e:
            logger.warning(
                "Request failed without response",
                extra={"method": request.method, "path": path, "error": type(e).__name__},
            )
            raise BinanceApiError(None, Defaults.NETWORK_ERROR_MESSAGE) from e

        logger.debug(
            "Request completed",
            extra={"method": request.method, "path": path, "status": response.status_code},
        )

        if not 200 <= response.status_code < 300:
            raise self._to_api_error(response)

        try:
            return response.json()
        except ValueError as e:
            logger.warning(
                "Response body is not JSON",
                extra={"method": request.method, "path": path, "status": response.status_code},
            )
            raise BinanceApiError(
                response.status_code, Defaults.NETWORK_ERROR_MESSAGE, raw_body=response.text
            ) from e

    @staticmethod
    def _to_api_error(response: httpx.Response) -> BinanceApiError:
        """non-2xx 응답을 BinanceApiError로 변환"""
        raw_body: Any
        try:
            raw_body = response.json()
        except ValueError:
            raw_body = response.text

        message = None
        code = None
        if isinstance(raw_body, dict):
            message = raw_body.get("msg")
            code = raw_body.get("code")

        return BinanceApiError(
            response.status_code,
            message or Defaults.NETWORK_ERROR_MESSAGE,
            raw_body=raw_body,
            code=code if isinstance(code, int) else None,
        )
