import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Union

LOG_FORMAT = "%(levelname)-8s - %(asctime)s - %(name)s - %(filename)s:%(lineno)d - %(message)s"

# 第三方库只保留警告以上，避免 SQL 和访问日志刷屏
QUIET_LOGGERS = ("uvicorn", "uvicorn.access", "fastapi", "sqlalchemy", "aiosqlite", "asyncpg")

MAX_LOG_BYTES = 10 * 1024 * 1024  # 10MB
LOG_BACKUP_COUNT = 5


def _build_handlers(app_name: str, log_to_file: bool, log_dir: Union[str, Path]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_to_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(
            log_path / f"{app_name}.log",
            maxBytes=MAX_LOG_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8"
        ))
    return handlers


def setup_logging(
    app_name: str = "movie_catalog",
    log_level: Union[int, str] = logging.INFO,
    log_to_file: bool = False,
    log_dir: Union[str, Path] = "logs",
) -> logging.Logger:
    """
    配置根日志记录器，重复调用会替换之前的处理器

    Args:
        app_name: 日志文件名（不含扩展名）
        log_level: 日志级别，数字或名称（如 "INFO"、"debug"）
        log_to_file: 是否额外写入滚动日志文件
        log_dir: 日志文件目录
    """
    if isinstance(log_level, str):
        log_level = logging.getLevelName(log_level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in _build_handlers(app_name, log_to_file, log_dir):
        handler.setFormatter(formatter)
        handler.setLevel(log_level)
        root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger
