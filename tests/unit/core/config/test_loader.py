"""
core/config/loader.py 테스트

secrets.yaml 로드, 검증, 클라이언트 설정 생성 테스트
"""

from pathlib import Path

import pytest

from binance_sdk.core.config.loader import (
    ClientConfig,
    Credentials,
    Secrets,
    SecretsLoadError,
    get_client_config,
    load_secrets,
)
from binance_sdk.core.constants import BinanceEndpoints, Defaults, Headers
from binance_sdk.core.types import Product, TradingMode


class TestCredentials:
    """Credentials 데이터클래스 테스트"""

    def test_defaults_empty(self) -> None:
        """공개 엔드포인트용 빈 자격 증명"""
        credentials = Credentials()
        assert credentials.api_key == ""
        assert credentials.api_secret == ""

    def test_frozen(self) -> None:
        credentials = Credentials("key", "secret")
        with pytest.raises(AttributeError):
            credentials.api_key = "other"  # type: ignore

    def test_secret_not_in_repr(self) -> None:
        """repr에 api_secret 노출 안 됨"""
        credentials = Credentials("visible_key", "hidden_secret")
        assert "visible_key" in repr(credentials)
        assert "hidden_secret" not in repr(credentials)


class TestClientConfig:
    """ClientConfig 테스트"""

    def test_defaults(self) -> None:
        config = ClientConfig()

        assert config.credentials == Credentials()
        assert config.spot_url == BinanceEndpoints.SPOT_REST_URL
        assert config.usdm_url == BinanceEndpoints.USDM_REST_URL
        assert config.coinm_url == BinanceEndpoints.COINM_REST_URL
        assert config.timeout == Defaults.TIMEOUT_SEC
        assert config.recv_window is None
        assert config.user_agent == Headers.DEFAULT_USER_AGENT

    def test_testnet(self) -> None:
        """테스트넷 호스트"""
        credentials = Credentials("k", "s")
        config = ClientConfig.testnet(credentials, recv_window=5000)

        assert config.credentials == credentials
        assert config.spot_url == BinanceEndpoints.TEST_SPOT_REST_URL
        assert config.usdm_url == BinanceEndpoints.TEST_USDM_REST_URL
        assert config.coinm_url == BinanceEndpoints.TEST_COINM_REST_URL
        assert config.recv_window == 5000

    def test_base_url_for(self) -> None:
        config = ClientConfig()

        assert config.base_url_for(Product.SPOT) == "https://api.binance.com"
        assert config.base_url_for(Product.USDM) == "https://fapi.binance.com"
        assert config.base_url_for(Product.COINM) == "https://dapi.binance.com"

    def test_with_credentials(self) -> None:
        """원본은 유지하고 새 설정 반환"""
        config = ClientConfig(timeout=3.0)
        updated = config.with_credentials(Credentials("k", "s"))

        assert updated.credentials.api_key == "k"
        assert updated.timeout == 3.0
        assert config.credentials.api_key == ""

    def test_frozen(self) -> None:
        config = ClientConfig()
        with pytest.raises(AttributeError):
            config.timeout = 1.0  # type: ignore


class TestSecrets:
    """Secrets 데이터클래스 테스트"""

    def test_creation(self) -> None:
        secrets = Secrets(
            mode=TradingMode.TESTNET,
            api_key="test_key",
            api_secret="test_secret",
        )

        assert secrets.mode == TradingMode.TESTNET
        assert secrets.api_key == "test_key"
        assert secrets.api_secret == "test_secret"

    def test_frozen(self) -> None:
        """불변성 확인"""
        secrets = Secrets(mode=TradingMode.TESTNET, api_key="key", api_secret="secret")

        with pytest.raises(AttributeError):
            secrets.api_key = "new_key"  # type: ignore

    def test_credentials(self) -> None:
        secrets = Secrets(mode=TradingMode.TESTNET, api_key="key", api_secret="secret")
        assert secrets.credentials == Credentials("key", "secret")

    def test_secret_not_in_repr(self) -> None:
        secrets = Secrets(mode=TradingMode.TESTNET, api_key="key", api_secret="very_secret")
        assert "very_secret" not in repr(secrets)


class TestLoadSecrets:
    """load_secrets 함수 테스트"""

    def test_load_testnet(self, temp_secrets_file: Path) -> None:
        """testnet 모드 로드"""
        secrets = load_secrets(temp_secrets_file)

        assert secrets.mode == TradingMode.TESTNET
        assert secrets.api_key == "test_api_key_abcde"
        assert secrets.api_secret == "test_api_secret_fghij"

    def test_load_production(self, temp_secrets_file_production: Path) -> None:
        """production 모드 로드"""
        secrets = load_secrets(temp_secrets_file_production)

        assert secrets.mode == TradingMode.PRODUCTION
        assert secrets.api_key == "prod_api_key_12345"
        assert secrets.api_secret == "prod_api_secret_67890"

    def test_file_not_found(self, temp_dir: Path) -> None:
        """파일 없음 에러"""
        with pytest.raises(SecretsLoadError) as exc_info:
            load_secrets(temp_dir / "nonexistent.yaml")

        assert "찾을 수 없습니다" in str(exc_info.value)

    def test_invalid_mode(self, temp_secrets_file_invalid_mode: Path) -> None:
        """잘못된 모드 에러"""
        with pytest.raises(ValueError) as exc_info:
            load_secrets(temp_secrets_file_invalid_mode)

        assert "유효하지 않은 mode" in str(exc_info.value)

    def test_empty_file(self, temp_dir: Path) -> None:
        """빈 파일 에러"""
        empty_file = temp_dir / "empty.yaml"
        empty_file.write_text("", encoding="utf-8")

        with pytest.raises(SecretsLoadError) as exc_info:
            load_secrets(empty_file)

        assert "비어 있습니다" in str(exc_info.value)

    def test_invalid_yaml(self, temp_dir: Path) -> None:
        """YAML 파싱 실패"""
        broken = temp_dir / "broken.yaml"
        broken.write_text("mode: [testnet\n", encoding="utf-8")

        with pytest.raises(SecretsLoadError) as exc_info:
            load_secrets(broken)

        assert "파싱 실패" in str(exc_info.value)

    def test_not_mapping(self, temp_dir: Path) -> None:
        listed = temp_dir / "list.yaml"
        listed.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(SecretsLoadError):
            load_secrets(listed)

    def test_missing_mode(self, temp_dir: Path) -> None:
        """mode 필드 누락 에러"""
        no_mode_file = temp_dir / "no_mode.yaml"
        no_mode_file.write_text(
            """testnet:
  api_key: "key"
  api_secret: "secret"
""",
            encoding="utf-8",
        )

        with pytest.raises(SecretsLoadError) as exc_info:
            load_secrets(no_mode_file)

        assert "'mode' 필드가 없습니다" in str(exc_info.value)

    def test_missing_mode_section(self, temp_dir: Path) -> None:
        """mode에 해당하는 섹션 누락"""
        path = temp_dir / "no_section.yaml"
        path.write_text(
            """mode: production
testnet:
  api_key: "key"
  api_secret: "secret"
""",
            encoding="utf-8",
        )

        with pytest.raises(SecretsLoadError) as exc_info:
            load_secrets(path)

        assert "'production' 설정이 없습니다" in str(exc_info.value)

    def test_missing_api_key(self, temp_dir: Path) -> None:
        """api_key 누락 에러"""
        no_key_file = temp_dir / "no_key.yaml"
        no_key_file.write_text(
            """mode: testnet
testnet:
  api_secret: "secret"
""",
            encoding="utf-8",
        )

        with pytest.raises(SecretsLoadError) as exc_info:
            load_secrets(no_key_file)

        assert "'api_key'가 없습니다" in str(exc_info.value)

    def test_missing_api_secret(self, temp_dir: Path) -> None:
        """api_secret 누락 에러"""
        no_secret_file = temp_dir / "no_secret.yaml"
        no_secret_file.write_text(
            """mode: testnet
testnet:
  api_key: "key"
""",
            encoding="utf-8",
        )

        with pytest.raises(SecretsLoadError) as exc_info:
            load_secrets(no_secret_file)

        assert "'api_secret'가 없습니다" in str(exc_info.value)


class TestGetClientConfig:
    """get_client_config 함수 테스트"""

    def test_production_config(self) -> None:
        """production 설정"""
        secrets = Secrets(mode=TradingMode.PRODUCTION, api_key="k", api_secret="s")
        config = get_client_config(secrets)

        assert config.spot_url == BinanceEndpoints.SPOT_REST_URL
        assert config.usdm_url == BinanceEndpoints.USDM_REST_URL
        assert config.coinm_url == BinanceEndpoints.COINM_REST_URL
        assert config.credentials == Credentials("k", "s")

    def test_testnet_config(self) -> None:
        """testnet 설정"""
        secrets = Secrets(mode=TradingMode.TESTNET, api_key="k", api_secret="s")
        config = get_client_config(secrets)

        assert config.spot_url == BinanceEndpoints.TEST_SPOT_REST_URL
        assert config.usdm_url == BinanceEndpoints.TEST_USDM_REST_URL
        assert config.credentials == Credentials("k", "s")

    def test_extra_fields(self) -> None:
        """추가 필드 전달"""
        secrets = Secrets(mode=TradingMode.PRODUCTION, api_key="k", api_secret="s")
        config = get_client_config(secrets, timeout=2.5, recv_window=6000)

        assert config.timeout == 2.5
        assert config.recv_window == 6000
