"""
HMAC-SHA256 서명

Binance SIGNED 엔드포인트는 직렬화된 쿼리 스트링 전체를
apiSecret으로 서명한 소문자 hex 값을 signature 파라미터로 요구한다.
"""

import hashlib
import hmac

from binance_sdk.core.errors import MissingSecretError


def generate_signature(secret: str, query_string: str) -> str:
    """쿼리 스트링 서명

    Args:
        secret: apiSecret
        query_string: 전송될 쿼리 스트링 그대로 (timestamp 포함)

    Returns:
        64자 소문자 hex

    Raises:
        MissingSecretError: secret이 비어 있는 경우
    """
    if not secret:
        raise MissingSecretError()
    return hmac.new(
        secret.encode("utf-8"),
        query_string.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()
