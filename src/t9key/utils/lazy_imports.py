"""
延遲導入工具

pypinyin 只有在使用 PypinyinProvider 時才會載入，
核心編碼引擎（classifier / expander / builder）不依賴任何第三方套件。
"""

from __future__ import annotations

import importlib
from typing import Any

CHINESE_INSTALL_HINT = (
    "缺少中文拼音依賴。請執行:\n"
    "  pip install pypinyin\n"
    "或重新安裝:\n"
    "  pip install t9key"
)

_pypinyin = None


def _get_pypinyin() -> Any:
    """延遲載入 pypinyin 模組"""
    global _pypinyin

    if _pypinyin is not None:
        return _pypinyin

    try:
        _pypinyin = importlib.import_module("pypinyin")
    except ImportError as exc:
        raise ImportError(CHINESE_INSTALL_HINT) from exc
    return _pypinyin


def is_chinese_available() -> bool:
    """檢查 pypinyin 是否可用"""
    try:
        _get_pypinyin()
    except ImportError:
        return False
    return True


def check_chinese_dependencies() -> None:
    """
    檢查中文拼音依賴

    Raises:
        ImportError: pypinyin 未安裝，訊息中附上安裝提示
    """
    _get_pypinyin()
