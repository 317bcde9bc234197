"""
pytest 공통 fixture 정의

- 임시 디렉토리 / secrets.yaml
- 자격 증명, 클라이언트 설정
- 200 응답을 돌려주는 httpx.AsyncClient 대역과 마지막 요청 분해 헬퍼
"""

import inspect
import tempfile
from pathlib import Path
from typing import Any, NamedTuple
from unittest.mock import AsyncMock, MagicMock
from urllib.parse import parse_qsl, urlsplit

import pytest

from binance_sdk.core.config.loader import ClientConfig, Credentials


TEST_API_KEY = "test_api_key"
TEST_API_SECRET = "test_api_secret"


class SentRequest(NamedTuple):
    """mock HTTP 클라이언트로 전송된 요청 분해 결과"""

    method: str
    host: str
    path: str
    query: str
    params: dict[str, str]
    headers: dict[str, str]


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_secrets_file(temp_dir: Path) -> Path:
    """테스트용 secrets.yaml 파일 생성"""
    secrets_content = """# 테스트용 secrets.yaml
mode: testnet

production:
  api_key: "prod_api_key_12345"
  api_secret: "prod_api_secret_67890"

testnet:
  api_key: "test_api_key_abcde"
  api_secret: "test_api_secret_fghij"
"""
    secrets_path = temp_dir / "secrets.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


@pytest.fixture
def temp_secrets_file_production(temp_dir: Path) -> Path:
    """테스트용 secrets.yaml 파일 생성 (production 모드)"""
    secrets_content = """mode: production

production:
  api_key: "prod_api_key_12345"
  api_secret: "prod_api_secret_67890"

testnet:
  api_key: "test_api_key_abcde"
  api_secret: "test_api_secret_fghij"
"""
    secrets_path = temp_dir / "secrets_prod.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


@pytest.fixture
def temp_secrets_file_invalid_mode(temp_dir: Path) -> Path:
    """잘못된 모드의 secrets.yaml 파일 생성"""
    secrets_content = """mode: invalid_mode

production:
  api_key: "prod_api_key"
  api_secret: "prod_api_secret"

testnet:
  api_key: "test_api_key"
  api_secret: "test_api_secret"
"""
    secrets_path = temp_dir / "secrets_invalid.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


# =============================================================================
# 클라이언트 fixture
# =============================================================================


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(api_key=TEST_API_KEY, api_secret=TEST_API_SECRET)


@pytest.fixture
def client_config(credentials: Credentials) -> ClientConfig:
    return ClientConfig(credentials=credentials)


@pytest.fixture
def mock_response() -> MagicMock:
    """200 / {} 응답"""
    response = MagicMock()
    response.status_code = 200
    response.json.return_value = {}
    response.headers = {}
    return response


@pytest.fixture
def mock_http_client(mock_response: MagicMock) -> AsyncMock:
    """httpx.AsyncClient 대역 (request()가 mock_response 반환)"""
    http_client = AsyncMock()
    http_client.request.return_value = mock_response
    http_client.is_closed = False
    return http_client


@pytest.fixture
def last_request(mock_http_client: AsyncMock):
    """마지막으로 전송된 요청을 SentRequest로 분해하는 함수"""

    def _last_request() -> SentRequest:
        args, kwargs = mock_http_client.request.call_args
        method, url = args
        split = urlsplit(url)
        headers: dict[str, Any] = kwargs.get("headers", {})
        return SentRequest(
            method=method,
            host=f"{split.scheme}://{split.netloc}",
            path=split.path,
            query=split.query,
            params=dict(parse_qsl(split.query, keep_blank_values=True)),
            headers=headers,
        )

    return _last_request


@pytest.fixture
def required_wrappers():
    """필수 위치 인자를 가진 모든 래퍼 메서드를 (이름, 메서드, 인자 수)로 나열하는 함수"""
    from binance_sdk.api.base import ApiGroup

    def _required_wrappers(client) -> list[tuple[str, Any, int]]:
        found = []
        for attr, group in vars(client).items():
            if not isinstance(group, ApiGroup):
                continue
            for name, method in inspect.getmembers(group, inspect.iscoroutinefunction):
                if name.startswith("_"):
                    continue
                required = [
                    p
                    for p in inspect.signature(method).parameters.values()
                    if p.kind == p.POSITIONAL_OR_KEYWORD and p.default is p.empty
                ]
                if required:
                    found.append((f"{attr}.{name}", method, len(required)))
        return found

    return _required_wrappers
