"""
core/logging.py 테스트
"""

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

import pytest

from binance_sdk.core.logging import (
    LOG_FILE_BACKUP_COUNT,
    NOISY_LOGGERS,
    get_log_file_path,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    """테스트 후 루트 로거 핸들러/레벨 복원"""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestSetupLogging:
    """setup_logging 테스트"""

    def test_console_only(self, restore_root_logger) -> None:
        """log_dir 없으면 콘솔 핸들러만"""
        root = setup_logging("unit")

        assert root is logging.getLogger()
        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0], TimedRotatingFileHandler)
        assert root.handlers[0].level == logging.INFO

    def test_with_file(self, restore_root_logger, temp_dir: Path) -> None:
        """log_dir 지정 시 daily 롤링 파일 핸들러 추가"""
        log_dir = temp_dir / "logs"
        root = setup_logging("unit", file_level=logging.DEBUG, log_dir=log_dir)

        file_handlers = [
            h for h in root.handlers if isinstance(h, TimedRotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert file_handlers[0].backupCount == LOG_FILE_BACKUP_COUNT
        assert file_handlers[0].level == logging.DEBUG
        assert log_dir.exists()
        assert (log_dir / "unit.log").exists()

    def test_repeated_setup_no_duplicates(self, restore_root_logger) -> None:
        """재호출해도 핸들러가 중복되지 않음"""
        setup_logging("unit")
        root = setup_logging("unit")
        assert len(root.handlers) == 1

    def test_noisy_loggers_quieted(self, restore_root_logger) -> None:
        """httpx 로거는 WARNING 이상만 (서명된 URL 노출 방지)"""
        setup_logging("unit")
        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING


class TestGetLogFilePath:
    """get_log_file_path 테스트"""

    def test_path(self, temp_dir: Path) -> None:
        assert get_log_file_path("bot", temp_dir) == temp_dir / "bot.log"
