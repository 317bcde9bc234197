#!/usr/bin/env python3
"""
연결 확인 스크립트

흐름:
1. secrets.yaml 로드 (없으면 공개 요청만)
2. Spot / USD-M / COIN-M ping + 서버 시간
3. --signed 옵션 시 Spot 계정 조회 (서명 요청)
"""

import argparse
import asyncio
import logging
import sys
import time
from pathlib import Path

# 프로젝트 루트를 Python 경로에 추가
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from binance_sdk import BinanceClient, BinanceApiError, ClientConfig
from binance_sdk.core.config.loader import SecretsLoadError, get_client_config, load_secrets
from binance_sdk.core.constants import Paths
from binance_sdk.core.logging import setup_logging

logger = logging.getLogger(__name__)


def build_config(secrets_path: Path | None, testnet: bool) -> ClientConfig:
    """secrets.yaml이 있으면 자격 증명 포함 설정, 없으면 공개 요청용 설정"""
    try:
        secrets = load_secrets(secrets_path)
    except SecretsLoadError as e:
        logger.warning(f"secrets 로드 실패, 공개 요청만 실행: {e}")
        return ClientConfig.testnet() if testnet else ClientConfig()

    logger.info(f"secrets 로드 완료 (mode={secrets.mode.value})")
    return get_client_config(secrets)


async def check_product(name: str, market) -> bool:
    """ping + 서버 시간 차이 출력"""
    try:
        await market.ping()
        server_time = (await market.time())["serverTime"]
    except BinanceApiError as e:
        logger.error(f"[{name}] 연결 실패: {e}")
        return False

    drift_ms = server_time - int(time.time() * 1000)
    logger.info(f"[{name}] OK (serverTime={server_time}, drift={drift_ms}ms)")
    return True


async def main() -> int:
    parser = argparse.ArgumentParser(description="Binance REST 연결 확인")
    parser.add_argument("--secrets", type=Path, default=None, help="secrets.yaml 경로")
    parser.add_argument("--testnet", action="store_true", help="secrets 없이 테스트넷 호스트 사용")
    parser.add_argument("--signed", action="store_true", help="Spot 계정 조회(서명 요청)까지 확인")
    parser.add_argument("--log-file", action="store_true", help="logs/ 에 파일 로그 기록")
    args = parser.parse_args()

    setup_logging(
        "check_connectivity",
        log_dir=Paths.LOGS_DIR if args.log_file else None,
    )

    config = build_config(args.secrets, args.testnet)

    async with BinanceClient(config) as client:
        results = [
            await check_product("spot", client.spot.market),
            await check_product("usdm", client.usdm.market),
            await check_product("coinm", client.coinm.market),
        ]

        if args.signed:
            try:
                account = await client.spot.trade.account()
                logger.info(f"[spot] 계정 조회 OK (canTrade={account.get('canTrade')})")
                results.append(True)
            except BinanceApiError as e:
                logger.error(f"[spot] 계정 조회 실패: {e}")
                results.append(False)

    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
