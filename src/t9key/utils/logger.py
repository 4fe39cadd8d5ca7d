"""
日誌與計時工具

所有 logger 都掛在 "t9key" 命名空間之下，預設不輸出任何訊息，
使用者可以透過標準 logging 或 verbose 參數開啟。

使用方式:
    from t9key import enable_debug_logging
    enable_debug_logging()

    # 或使用標準 logging
    import logging
    logging.getLogger("t9key").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import functools
import logging
import time
from typing import Callable, Optional

ROOT_LOGGER_NAME = "t9key"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

TimingCallback = Callable[[str, float], None]

# 函式庫預設靜默
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得 t9key 命名空間下的 logger

    Args:
        name: 子 logger 名稱（如 "builder"），None 則返回根 logger

    Returns:
        logging.Logger: 例如 "t9key.builder"
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    設定根 logger 的等級與輸出

    重複呼叫只會調整等級，不會重複掛上 handler。
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    stream_handlers = [
        h for h in logger.handlers if isinstance(h, logging.StreamHandler)
    ]
    if not stream_handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)
    for handler in stream_handlers:
        handler.setLevel(level)

    return logger


def enable_debug_logging() -> logging.Logger:
    """開啟 DEBUG 等級日誌（含每個字元的讀音查詢細節）"""
    return setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> logging.Logger:
    """只開啟計時日誌"""
    setup_logger(level=logging.INFO)
    timing_logger = get_logger("timing")
    timing_logger.setLevel(logging.DEBUG)
    return timing_logger


class TimingContext:
    """
    計時 context manager

    範例:
        >>> with TimingContext("T9KeyBuilder.build", logger, logging.DEBUG):
        ...     builder.build("張三")
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[TimingCallback] = None,
    ):
        self.operation = operation
        self.logger = logger or get_logger("timing")
        self.level = level
        self.callback = callback
        self.elapsed: float = 0.0
        self._start: float = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        if self.logger.isEnabledFor(self.level):
            status = "failed" if exc_type is not None else "done"
            self.logger.log(
                self.level,
                f"[Timing] {self.operation} {status} in {self.elapsed * 1000:.3f}ms",
            )
        if self.callback is not None:
            self.callback(self.operation, self.elapsed)
        return False


def log_timing(
    operation: Optional[str] = None,
    level: int = logging.DEBUG,
    callback: Optional[TimingCallback] = None,
):
    """計時裝飾器，未指定 operation 時使用函式的 qualname"""

    def decorator(func):
        name = operation or func.__qualname__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with TimingContext(name, get_logger("timing"), level, callback):
                return func(*args, **kwargs)

        return wrapper

    return decorator
