"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from pathlib import Path


# 프로젝트 루트 (이 파일 기준 3단계 상위: binance_sdk/core/constants.py → repo/)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent.parent

SDK_VERSION: str = "0.1.0"


class BinanceEndpoints:
    """Binance REST API 호스트 (고정값)

    제품군(spot / USD-M / COIN-M)마다 기본 호스트가 다르다.
    공식 문서: https://binance-docs.github.io/apidocs/spot/en/#general-info
    """

    # Production
    SPOT_REST_URL: str = "https://api.binance.com"
    USDM_REST_URL: str = "https://fapi.binance.com"
    COINM_REST_URL: str = "https://dapi.binance.com"

    # Testnet
    TEST_SPOT_REST_URL: str = "https://testnet.binance.vision"
    TEST_USDM_REST_URL: str = "https://testnet.binancefuture.com"
    TEST_COINM_REST_URL: str = "https://testnet.binancefuture.com"


class Headers:
    """요청 헤더 이름 / 값"""

    API_KEY: str = "X-MBX-APIKEY"
    USER_AGENT: str = "User-Agent"
    CONTENT_TYPE: str = "Content-Type"

    DEFAULT_USER_AGENT: str = f"binance-sdk-python/{SDK_VERSION}"
    JSON_CONTENT_TYPE: str = "application/json"


class Defaults:
    """기본값 상수"""

    TIMEOUT_SEC: float = 10.0
    NETWORK_ERROR_MESSAGE: str = "network error"


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # 설정 파일
    SECRETS_FILE: Path = CONFIG_DIR / "secrets.yaml"
