"""설정 모듈"""

from binance_sdk.core.config.loader import (
    ClientConfig,
    Credentials,
    Secrets,
    SecretsLoadError,
    get_client_config,
    load_secrets,
)

__all__ = [
    "ClientConfig",
    "Credentials",
    "Secrets",
    "SecretsLoadError",
    "get_client_config",
    "load_secrets",
]
