"""
core/dispatcher.py 테스트

요청 생성 (공개 / 서명), 전송, 실패 정규화, 클라이언트 수명 관리
"""

import hashlib
import hmac
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from binance_sdk.core.config.loader import ClientConfig, Credentials
from binance_sdk.core.dispatcher import PreparedRequest, RequestDispatcher
from binance_sdk.core.errors import BinanceApiError, MissingSecretError
from binance_sdk.core.types import HttpMethod, Product


FIXED_TS = 1700000000000


def _sign(secret: str, query: str) -> str:
    return hmac.new(secret.encode(), query.encode(), hashlib.sha256).hexdigest()


@pytest.fixture
def dispatcher(client_config: ClientConfig, mock_http_client: AsyncMock) -> RequestDispatcher:
    return RequestDispatcher(client_config, Product.SPOT, mock_http_client)


class TestPreparedRequest:
    """PreparedRequest 테스트"""

    def test_full_url(self) -> None:
        request = PreparedRequest("GET", "https://api.binance.com", "/api/v3/time")
        assert request.full_url == "https://api.binance.com/api/v3/time"

    def test_headers_not_in_repr(self) -> None:
        request = PreparedRequest("GET", "h", "/p", {"X-MBX-APIKEY": "visible"})
        assert "visible" not in repr(request)


class TestPreparePublicRequest:
    """공개 요청 생성 테스트"""

    def test_no_params_no_question_mark(self, dispatcher: RequestDispatcher) -> None:
        request = dispatcher.prepare_public_request("GET", "/api/v3/time")

        assert request.url == "/api/v3/time"
        assert "?" not in request.full_url
        assert request.endpoint == "https://api.binance.com"

    def test_only_empty_params(self, dispatcher: RequestDispatcher) -> None:
        """빈 값만 있으면 '?' 없음"""
        request = dispatcher.prepare_public_request("GET", "/x", {"a": None, "b": ""})
        assert request.url == "/x"

    def test_with_params(self, dispatcher: RequestDispatcher) -> None:
        request = dispatcher.prepare_public_request(
            "get", "/api/v3/depth", {"symbol": "BTCUSDT", "limit": 5}
        )

        assert request.method == "GET"
        assert request.url == "/api/v3/depth?symbol=BTCUSDT&limit=5"
        assert "timestamp" not in request.url
        assert "signature" not in request.url

    def test_headers(self, dispatcher: RequestDispatcher) -> None:
        request = dispatcher.prepare_public_request("GET", "/x")

        assert request.headers == {
            "X-MBX-APIKEY": "test_api_key",
            "User-Agent": "binance-sdk-python/0.1.0",
        }

    def test_empty_api_key_allowed(self) -> None:
        """공개 요청은 API 키 없이도 생성"""
        dispatcher = RequestDispatcher(ClientConfig())
        request = dispatcher.prepare_public_request("GET", "/x")

        assert request.headers["X-MBX-APIKEY"] == ""

    def test_endpoint_override(self, dispatcher: RequestDispatcher) -> None:
        """호출별 호스트 재정의 (끝 '/' 제거)"""
        request = dispatcher.prepare_public_request(
            "GET", "/x", endpoint="https://example.test/"
        )
        assert request.full_url == "https://example.test/x"

    def test_credentials_override(self, dispatcher: RequestDispatcher) -> None:
        request = dispatcher.prepare_public_request(
            "GET", "/x", credentials=Credentials("other_key", "")
        )
        assert request.headers["X-MBX-APIKEY"] == "other_key"

    def test_product_host(self, client_config: ClientConfig) -> None:
        usdm = RequestDispatcher(client_config, Product.USDM)
        coinm = RequestDispatcher(client_config, Product.COINM)

        assert usdm.prepare_public_request("GET", "/x").endpoint == "https://fapi.binance.com"
        assert coinm.prepare_public_request("GET", "/x").endpoint == "https://dapi.binance.com"

    def test_http_method_enum(self, dispatcher: RequestDispatcher) -> None:
        """HttpMethod 멤버도 값 그대로 전송"""
        request = dispatcher.prepare_public_request(HttpMethod.GET, "/x")
        assert request.method == "GET"

    def test_unknown_method(self, dispatcher: RequestDispatcher) -> None:
        with pytest.raises(ValueError):
            dispatcher.prepare_public_request("PATCH", "/x")


class TestPrepareSignedRequest:
    """서명 요청 생성 테스트"""

    def test_signed_url(self) -> None:
        """recvWindow → timestamp → signature 순서, 서명 대상과 전송 문자열 일치"""
        config = ClientConfig(credentials=Credentials("K", "S"), recv_window=5000)
        dispatcher = RequestDispatcher(config)

        with patch.object(dispatcher, "_get_timestamp", return_value=FIXED_TS):
            request = dispatcher.prepare_signed_request(
                "GET", "/x", {"symbol": "BTCUSDT"}
            )

        query = f"symbol=BTCUSDT&recvWindow=5000&timestamp={FIXED_TS}"
        assert request.url == f"/x?{query}&signature={_sign('S', query)}"

    def test_recv_window_in_params(self) -> None:
        """설정 없이 params로 준 recvWindow는 입력 순서대로 서명"""
        dispatcher = RequestDispatcher(ClientConfig(credentials=Credentials("K", "S")))

        with patch.object(dispatcher, "_get_timestamp", return_value=FIXED_TS):
            request = dispatcher.prepare_signed_request(
                HttpMethod.POST, "/x", {"symbol": "BTCUSDT", "recvWindow": 5000}
            )

        query = f"symbol=BTCUSDT&recvWindow=5000&timestamp={FIXED_TS}"
        assert request.method == "POST"
        assert request.url == f"/x?{query}&signature={_sign('S', query)}"

    def test_no_recv_window_configured(self, dispatcher: RequestDispatcher) -> None:
        with patch.object(dispatcher, "_get_timestamp", return_value=FIXED_TS):
            request = dispatcher.prepare_signed_request("GET", "/x", {"symbol": "BTCUSDT"})

        query = f"symbol=BTCUSDT&timestamp={FIXED_TS}"
        assert request.url == f"/x?{query}&signature={_sign('test_api_secret', query)}"

    def test_caller_recv_window_kept(self) -> None:
        """호출자가 준 recvWindow는 설정값으로 덮지 않음"""
        config = ClientConfig(credentials=Credentials("K", "S"), recv_window=5000)
        dispatcher = RequestDispatcher(config)

        with patch.object(dispatcher, "_get_timestamp", return_value=FIXED_TS):
            request = dispatcher.prepare_signed_request("GET", "/x", {"recvWindow": 1000})

        assert request.url.startswith(f"/x?recvWindow=1000&timestamp={FIXED_TS}&signature=")

    def test_no_params(self, dispatcher: RequestDispatcher) -> None:
        with patch.object(dispatcher, "_get_timestamp", return_value=FIXED_TS):
            request = dispatcher.prepare_signed_request("GET", "/api/v3/account")

        assert request.url.startswith(f"/api/v3/account?timestamp={FIXED_TS}&signature=")

    def test_headers(self, dispatcher: RequestDispatcher) -> None:
        request = dispatcher.prepare_signed_request("POST", "/x")

        assert request.headers["X-MBX-APIKEY"] == "test_api_key"
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["User-Agent"] == "binance-sdk-python/0.1.0"

    def test_secret_not_in_url_or_headers(self, dispatcher: RequestDispatcher) -> None:
        request = dispatcher.prepare_signed_request("GET", "/x", {"symbol": "BTCUSDT"})

        assert "test_api_secret" not in request.full_url
        assert "test_api_secret" not in request.headers.values()

    def test_missing_secret(self) -> None:
        dispatcher = RequestDispatcher(ClientConfig(credentials=Credentials("K", "")))

        with pytest.raises(MissingSecretError):
            dispatcher.prepare_signed_request("GET", "/x")

    def test_params_not_mutated(self, dispatcher: RequestDispatcher) -> None:
        params = {"symbol": "BTCUSDT", "empty": None}
        dispatcher.prepare_signed_request("GET", "/x", params)

        assert params == {"symbol": "BTCUSDT", "empty": None}

    def test_empty_values_removed(self, dispatcher: RequestDispatcher) -> None:
        with patch.object(dispatcher, "_get_timestamp", return_value=FIXED_TS):
            request = dispatcher.prepare_signed_request(
                "GET", "/x", {"a": "", "b": None, "limit": 0}
            )

        assert request.url.startswith(f"/x?limit=0&timestamp={FIXED_TS}&signature=")


class TestSend:
    """요청 전송 및 실패 정규화 테스트"""

    @pytest.mark.asyncio
    async def test_public_success(
        self,
        dispatcher: RequestDispatcher,
        mock_http_client: AsyncMock,
        mock_response: MagicMock,
    ) -> None:
        mock_response.json.return_value = {"serverTime": 1}

        result = await dispatcher.public_request("GET", "/api/v3/time")

        assert result == {"serverTime": 1}
        mock_http_client.request.assert_awaited_once_with(
            "GET",
            "https://api.binance.com/api/v3/time",
            headers={
                "X-MBX-APIKEY": "test_api_key",
                "User-Agent": "binance-sdk-python/0.1.0",
            },
        )

    @pytest.mark.asyncio
    async def test_signed_sends_prepared_url(
        self,
        dispatcher: RequestDispatcher,
        mock_http_client: AsyncMock,
    ) -> None:
        """서명한 문자열이 그대로 전송됨"""
        with patch.object(dispatcher, "_get_timestamp", return_value=FIXED_TS):
            await dispatcher.sign_request("GET", "/x", {"symbol": "BTCUSDT"})

        query = f"symbol=BTCUSDT&timestamp={FIXED_TS}"
        args, _ = mock_http_client.request.call_args
        assert args == (
            "GET",
            f"https://api.binance.com/x?{query}&signature={_sign('test_api_secret', query)}",
        )

    @pytest.mark.asyncio
    async def test_missing_secret_no_io(self, mock_http_client: AsyncMock) -> None:
        dispatcher = RequestDispatcher(
            ClientConfig(credentials=Credentials("K", "")), http_client=mock_http_client
        )

        with pytest.raises(MissingSecretError):
            await dispatcher.sign_request("GET", "/x")

        mock_http_client.request.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_http_error(
        self,
        dispatcher: RequestDispatcher,
        mock_http_client: AsyncMock,
    ) -> None:
        """non-2xx → msg를 담은 BinanceApiError"""
        body = {"code": -1121, "msg": "Invalid symbol."}
        mock_http_client.request.return_value = httpx.Response(400, json=body)

        with pytest.raises(BinanceApiError) as exc_info:
            await dispatcher.public_request("GET", "/x")

        error = exc_info.value
        assert str(error) == "Code #400 - Message: Invalid symbol."
        assert error.http_status == 400
        assert error.code == -1121
        assert error.raw_body == body

    @pytest.mark.asyncio
    async def test_http_error_without_msg(
        self,
        dispatcher: RequestDispatcher,
        mock_http_client: AsyncMock,
    ) -> None:
        """msg 없는 본문은 기본 메시지"""
        mock_http_client.request.return_value = httpx.Response(
            502, text="<html>Bad Gateway</html>"
        )

        with pytest.raises(BinanceApiError) as exc_info:
            await dispatcher.public_request("GET", "/x")

        error = exc_info.value
        assert error.http_status == 502
        assert error.message == "network error"
        assert error.raw_body == "<html>Bad Gateway</html>"
        assert error.code is None

    @pytest.mark.asyncio
    async def test_success_with_non_json_body(
        self,
        dispatcher: RequestDispatcher,
        mock_http_client: AsyncMock,
    ) -> None:
        """2xx인데 JSON이 아닌 본문도 BinanceApiError"""
        mock_http_client.request.return_value = httpx.Response(200, text="<html>ok</html>")

        with pytest.raises(BinanceApiError) as exc_info:
            await dispatcher.public_request("GET", "/x")

        error = exc_info.value
        assert error.http_status == 200
        assert error.message == "network error"
        assert error.raw_body == "<html>ok</html>"
        assert isinstance(error.__cause__, ValueError)

    @pytest.mark.asyncio
    async def test_network_error(
        self,
        dispatcher: RequestDispatcher,
        mock_http_client: AsyncMock,
    ) -> None:
        """응답 없는 실패 → http_status None"""
        mock_http_client.request.side_effect = httpx.ConnectError("refused")

        with pytest.raises(BinanceApiError) as exc_info:
            await dispatcher.public_request("GET", "/x")

        error = exc_info.value
        assert error.http_status is None
        assert error.message == "network error"
        assert error.raw_body is None
        assert isinstance(error.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_timeout_is_network_error(
        self,
        dispatcher: RequestDispatcher,
        mock_http_client: AsyncMock,
    ) -> None:
        mock_http_client.request.side_effect = httpx.ReadTimeout("timeout")

        with pytest.raises(BinanceApiError) as exc_info:
            await dispatcher.sign_request("GET", "/x")

        assert exc_info.value.is_network_error

    @pytest.mark.asyncio
    async def test_single_attempt(
        self,
        dispatcher: RequestDispatcher,
        mock_http_client: AsyncMock,
    ) -> None:
        """재시도 없음"""
        mock_http_client.request.return_value = httpx.Response(500, json={"msg": "boom"})

        with pytest.raises(BinanceApiError):
            await dispatcher.public_request("GET", "/x")

        assert mock_http_client.request.await_count == 1

    @pytest.mark.asyncio
    async def test_uses_get_client(self, client_config: ClientConfig) -> None:
        """주입하지 않으면 _get_client로 얻은 클라이언트 사용"""
        dispatcher = RequestDispatcher(client_config)
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.json.return_value = [1, 2]

        with patch.object(dispatcher, "_get_client") as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.request.return_value = mock_response
            mock_get_client.return_value = mock_http_client

            result = await dispatcher.public_request("GET", "/x")

        assert result == [1, 2]
        mock_http_client.request.assert_awaited_once()


class TestClientLifecycle:
    """HTTP 클라이언트 수명 관리 테스트"""

    @pytest.mark.asyncio
    async def test_lazy_owned_client(self, client_config: ClientConfig) -> None:
        dispatcher = RequestDispatcher(client_config)

        client = await dispatcher._get_client()
        assert isinstance(client, httpx.AsyncClient)
        assert await dispatcher._get_client() is client

        await dispatcher.close()
        assert client.is_closed

    @pytest.mark.asyncio
    async def test_injected_client_not_closed(
        self,
        dispatcher: RequestDispatcher,
        mock_http_client: AsyncMock,
    ) -> None:
        await dispatcher.close()
        mock_http_client.aclose.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_context_manager(self, client_config: ClientConfig) -> None:
        async with RequestDispatcher(client_config) as dispatcher:
            client = await dispatcher._get_client()

        assert client.is_closed

    @pytest.mark.asyncio
    async def test_close_without_client(self, client_config: ClientConfig) -> None:
        """한 번도 사용하지 않은 디스패처 close"""
        dispatcher = RequestDispatcher(client_config)
        await dispatcher.close()
