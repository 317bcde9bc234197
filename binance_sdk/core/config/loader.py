"""
설정 로더

클라이언트 설정(불변 값) 정의 및 secrets.yaml 로드.
설정은 인스턴스마다 명시적으로 전달하며 전역 기본값은 두지 않는다.
"""

from dataclasses import dataclass, field, replace
from pathlib import Path

import yaml

from binance_sdk.core.constants import BinanceEndpoints, Defaults, Headers, Paths
from binance_sdk.core.types import Product, TradingMode


@dataclass(frozen=True)
class Credentials:
    """API 자격 증명

    api_secret은 repr에 노출하지 않는다.
    공개 엔드포인트만 쓸 때는 둘 다 빈 문자열이어도 된다.
    """

    api_key: str = ""
    api_secret: str = field(default="", repr=False)


@dataclass(frozen=True)
class ClientConfig:
    """클라이언트 연결 설정

    제품군별 기본 호스트와 자격 증명, 타임아웃을 담는 불변 값.
    """

    credentials: Credentials = field(default_factory=Credentials)
    spot_url: str = BinanceEndpoints.SPOT_REST_URL
    usdm_url: str = BinanceEndpoints.USDM_REST_URL
    coinm_url: str = BinanceEndpoints.COINM_REST_URL
    timeout: float = Defaults.TIMEOUT_SEC
    recv_window: int | None = None
    user_agent: str = Headers.DEFAULT_USER_AGENT

    @classmethod
    def testnet(cls, credentials: Credentials | None = None, **kwargs) -> "ClientConfig":
        """테스트넷 호스트를 사용하는 설정 생성"""
        return cls(
            credentials=credentials or Credentials(),
            spot_url=BinanceEndpoints.TEST_SPOT_REST_URL,
            usdm_url=BinanceEndpoints.TEST_USDM_REST_URL,
            coinm_url=BinanceEndpoints.TEST_COINM_REST_URL,
            **kwargs,
        )

    def base_url_for(self, product: Product) -> str:
        """제품군의 기본 호스트 반환"""
        if product == Product.USDM:
            return self.usdm_url
        if product == Product.COINM:
            return self.coinm_url
        return self.spot_url

    def with_credentials(self, credentials: Credentials) -> "ClientConfig":
        """자격 증명만 바꾼 새 설정 반환"""
        return replace(self, credentials=credentials)


@dataclass(frozen=True)
class Secrets:
    """보안 설정 (secrets.yaml에서 로드)

    불변 데이터 구조로 설정 변경 방지
    """

    mode: TradingMode
    api_key: str
    api_secret: str = field(repr=False)

    @property
    def credentials(self) -> Credentials:
        return Credentials(api_key=self.api_key, api_secret=self.api_secret)


class SecretsLoadError(Exception):
    """Secrets 로드 실패 예외"""

    pass


def load_secrets(path: Path | None = None) -> Secrets:
    """secrets.yaml 파일 로드

    형식:
        mode: testnet
        production:
          api_key: "..."
          api_secret: "..."
        testnet:
          api_key: "..."
          api_secret: "..."

    Args:
        path: secrets.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Secrets 인스턴스

    Raises:
        SecretsLoadError: 파일이 없거나 형식이 잘못된 경우
        ValueError: 유효하지 않은 mode인 경우
    """
    if path is None:
        path = Paths.SECRETS_FILE

    if not path.exists():
        raise SecretsLoadError(f"secrets.yaml 파일을 찾을 수 없습니다: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SecretsLoadError(f"secrets.yaml 파싱 실패: {e}") from e

    if data is None:
        raise SecretsLoadError("secrets.yaml이 비어 있습니다")

    if not isinstance(data, dict):
        raise SecretsLoadError("secrets.yaml 최상위는 mapping이어야 합니다")

    # mode 검증
    mode_str = data.get("mode")
    if mode_str is None:
        raise SecretsLoadError("secrets.yaml에 'mode' 필드가 없습니다")

    try:
        mode = TradingMode(mode_str)
    except ValueError as e:
        valid_modes = [m.value for m in TradingMode]
        raise ValueError(
            f"유효하지 않은 mode입니다: '{mode_str}'. "
            f"유효한 값: {valid_modes}"
        ) from e

    # 해당 모드의 API 키 로드
    mode_config = data.get(mode.value)
    if not isinstance(mode_config, dict):
        raise SecretsLoadError(
            f"secrets.yaml에 '{mode.value}' 설정이 없습니다"
        )

    api_key = mode_config.get("api_key")
    api_secret = mode_config.get("api_secret")

    if not api_key:
        raise SecretsLoadError(
            f"secrets.yaml의 {mode.value} 섹션에 'api_key'가 없습니다"
        )
    if not api_secret:
        raise SecretsLoadError(
            f"secrets.yaml의 {mode.value} 섹션에 'api_secret'가 없습니다"
        )

    return Secrets(
        mode=mode,
        api_key=str(api_key),
        api_secret=str(api_secret),
    )


def get_client_config(secrets: Secrets, **kwargs) -> ClientConfig:
    """모드에 따른 클라이언트 설정 반환

    Args:
        secrets: Secrets 인스턴스
        **kwargs: ClientConfig 추가 필드 (timeout, recv_window 등)

    Returns:
        ClientConfig 인스턴스 (Production 또는 Testnet)
    """
    if secrets.mode == TradingMode.PRODUCTION:
        return ClientConfig(credentials=secrets.credentials, **kwargs)
    else:
        return ClientConfig.testnet(credentials=secrets.credentials, **kwargs)
