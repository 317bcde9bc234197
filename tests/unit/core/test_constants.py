"""
core/constants.py 테스트

모든 경로가 pathlib.Path 타입이고, 호스트 상수가 정상적으로 접근 가능한지 확인
"""

from pathlib import Path

from binance_sdk.core.constants import (
    PROJECT_ROOT,
    SDK_VERSION,
    BinanceEndpoints,
    Defaults,
    Headers,
    Paths,
)


class TestProjectRoot:
    """PROJECT_ROOT 테스트"""

    def test_project_root_is_path(self) -> None:
        assert isinstance(PROJECT_ROOT, Path)

    def test_project_root_is_absolute(self) -> None:
        assert PROJECT_ROOT.is_absolute()

    def test_project_root_contains_package(self) -> None:
        """PROJECT_ROOT에 binance_sdk 패키지가 있는지 확인"""
        assert (PROJECT_ROOT / "binance_sdk").exists()


class TestBinanceEndpoints:
    """BinanceEndpoints 테스트"""

    def test_production_urls(self) -> None:
        assert BinanceEndpoints.SPOT_REST_URL == "https://api.binance.com"
        assert BinanceEndpoints.USDM_REST_URL == "https://fapi.binance.com"
        assert BinanceEndpoints.COINM_REST_URL == "https://dapi.binance.com"

    def test_testnet_urls(self) -> None:
        assert BinanceEndpoints.TEST_SPOT_REST_URL == "https://testnet.binance.vision"
        assert BinanceEndpoints.TEST_USDM_REST_URL == "https://testnet.binancefuture.com"
        assert BinanceEndpoints.TEST_COINM_REST_URL == "https://testnet.binancefuture.com"

    def test_urls_have_no_trailing_slash(self) -> None:
        """경로 결합 시 '//' 방지"""
        urls = [
            BinanceEndpoints.SPOT_REST_URL,
            BinanceEndpoints.USDM_REST_URL,
            BinanceEndpoints.COINM_REST_URL,
            BinanceEndpoints.TEST_SPOT_REST_URL,
            BinanceEndpoints.TEST_USDM_REST_URL,
            BinanceEndpoints.TEST_COINM_REST_URL,
        ]
        assert all(not url.endswith("/") for url in urls)


class TestHeaders:
    """Headers 테스트"""

    def test_api_key_header(self) -> None:
        assert Headers.API_KEY == "X-MBX-APIKEY"

    def test_user_agent_contains_version(self) -> None:
        assert Headers.DEFAULT_USER_AGENT == f"binance-sdk-python/{SDK_VERSION}"


class TestDefaults:
    """Defaults 테스트"""

    def test_timeout_positive(self) -> None:
        assert Defaults.TIMEOUT_SEC > 0

    def test_network_error_message(self) -> None:
        assert Defaults.NETWORK_ERROR_MESSAGE == "network error"

    def test_no_log_level(self) -> None:
        """로그 레벨은 setup_logging 인자로만 지정"""
        assert not hasattr(Defaults, "LOG_LEVEL")


class TestPaths:
    """Paths 테스트"""

    def test_all_paths_are_path_type(self) -> None:
        assert isinstance(Paths.CONFIG_DIR, Path)
        assert isinstance(Paths.LOGS_DIR, Path)
        assert isinstance(Paths.SECRETS_FILE, Path)

    def test_secrets_file_in_config_dir(self) -> None:
        assert Paths.SECRETS_FILE.parent == Paths.CONFIG_DIR
        assert Paths.SECRETS_FILE.name == "secrets.yaml"
