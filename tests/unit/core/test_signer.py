"""
core/signer.py 테스트

HMAC-SHA256 서명 형태와 결정성 확인
"""

import hashlib
import hmac
import re

import pytest

from binance_sdk.core.errors import MissingSecretError
from binance_sdk.core.signer import generate_signature


class TestGenerateSignature:
    """generate_signature 테스트"""

    def test_shape(self) -> None:
        """64자 소문자 hex"""
        signature = generate_signature("secret", "symbol=BTCUSDT&timestamp=1")
        assert re.fullmatch(r"[0-9a-f]{64}", signature)

    def test_matches_hmac_sha256(self) -> None:
        query = "symbol=BTCUSDT&recvWindow=5000&timestamp=1700000000000"
        expected = hmac.new(b"S", query.encode(), hashlib.sha256).hexdigest()

        assert generate_signature("S", query) == expected

    def test_binance_documented_example(self) -> None:
        """Binance API 문서의 서명 예시"""
        secret = "NhqPtmdSJYdKjVHjA7PZj4Mge3R5YNiP1e3UZjInClVN65XAbvqqM6A7H5fATj0j"
        query = (
            "symbol=LTCBTC&side=BUY&type=LIMIT&timeInForce=GTC&quantity=1"
            "&price=0.1&recvWindow=5000&timestamp=1499827319559"
        )

        assert generate_signature(secret, query) == (
            "c8db56825ae71d6d79447849e617115f4a920fa2acdcab2b053c4b2838bd6b71"
        )

    def test_deterministic(self) -> None:
        assert generate_signature("k", "a=1") == generate_signature("k", "a=1")

    def test_input_sensitive(self) -> None:
        """쿼리나 secret이 1바이트만 달라도 서명이 다름"""
        base = generate_signature("k", "a=1")
        assert generate_signature("k", "a=2") != base
        assert generate_signature("K", "a=1") != base

    def test_every_byte_changes_signature(self) -> None:
        """쿼리의 어느 위치 한 글자를 바꿔도 서명이 다름"""
        query = "symbol=BTCUSDT&recvWindow=5000&timestamp=1700000000000"
        base = generate_signature("secret", query)

        for i, char in enumerate(query):
            replacement = "x" if char != "x" else "y"
            changed = query[:i] + replacement + query[i + 1:]
            assert generate_signature("secret", changed) != base, i

    def test_empty_query(self) -> None:
        assert len(generate_signature("k", "")) == 64

    def test_missing_secret(self) -> None:
        with pytest.raises(MissingSecretError):
            generate_signature("", "a=1")
