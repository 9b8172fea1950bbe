"""로깅 설정"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FILE_NAME = "unicode_gacha.log"


def setup_logging(log_dir: str | Path | None = None, level: int = logging.INFO) -> Path:
    """파일 로깅 설정 (RotatingFileHandler)

    같은 파일에 대한 핸들러는 한 번만 등록한다.

    Returns:
        로그 파일 경로
    """
    if log_dir is None:
        from .config import config

        log_dir = config.log_dir

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = (log_dir / LOG_FILE_NAME).resolve()

    root = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers:
        if isinstance(handler, RotatingFileHandler) and Path(handler.baseFilename) == log_path:
            return log_path

    handler = RotatingFileHandler(
        log_path,
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=2,  # 최대 3개 파일 보존
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    return log_path
