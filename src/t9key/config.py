"""
全域配置模組

提供統一的配置類別，控制日誌、計時與候選數上限。

使用方式:
    from t9key import T9KeyBuilder

    # 簡單開啟 verbose 模式
    builder = T9KeyBuilder(provider, verbose=True)

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("t9key").setLevel(logging.DEBUG)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .utils.logger import setup_logger

# 多音字連續出現時候選數呈指數成長，預設在此截斷
DEFAULT_MAX_CANDIDATES = 10000


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    Args:
        verbose: 是否開啟詳細日誌
    """
    if verbose:
        setup_logger(level=logging.DEBUG)
    else:
        # 不主動設定，讓使用者可以透過標準 logging 控制
        pass


@dataclass
class T9KeyConfig:
    """
    T9 key 建構配置類別

    屬性:
        verbose: 是否開啟詳細日誌
        on_timing: 計時回呼函數 (operation: str, elapsed: float) -> None
        max_candidates: 候選鍵數量上限，None 表示不限制（與原始行為相同）

    使用範例:
        config = T9KeyConfig(max_candidates=256)
        builder = T9KeyBuilder(provider, config=config)

        def my_callback(op, elapsed):
            print(f"{op} took {elapsed:.3f}s")

        builder = T9KeyBuilder(provider, on_timing=my_callback)
    """

    # 日誌控制
    verbose: bool = False

    # 計時回呼
    on_timing: Optional[Callable[[str, float], None]] = None

    # 展開上限
    max_candidates: Optional[int] = DEFAULT_MAX_CANDIDATES

    def __post_init__(self):
        if self.max_candidates is not None and self.max_candidates < 1:
            raise ValueError(f"max_candidates must be >= 1, got {self.max_candidates}")
        configure_logging(self.verbose)


# 預設配置實例 (靜默模式)
DEFAULT_CONFIG = T9KeyConfig(verbose=False)
