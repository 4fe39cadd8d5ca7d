"""
讀音查詢來源 (PinyinProvider 實作)

- PypinyinProvider: 基於 pypinyin 的多音字讀音查詢
- DictPinyinProvider: 使用自訂字典（或 JSON 檔）的讀音查詢

安裝中文支援:
    pip install pypinyin
"""

from __future__ import annotations

import importlib
from typing import Any

from t9key.utils.lazy_imports import CHINESE_INSTALL_HINT

INSTALL_HINT = CHINESE_INSTALL_HINT

_LAZY_IMPORTS = {
    "PypinyinProvider": (".pypinyin_provider", "PypinyinProvider"),
    "cached_get_heteronyms": (".pypinyin_provider", "cached_get_heteronyms"),
    "DictPinyinProvider": (".dict_provider", "DictPinyinProvider"),
}

__all__ = [
    "PypinyinProvider",
    "DictPinyinProvider",
    "cached_get_heteronyms",
    "CHINESE_INSTALL_HINT",
    "INSTALL_HINT",
]


def __getattr__(name: str) -> Any:
    if name not in _LAZY_IMPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module_path, attr_name = _LAZY_IMPORTS[name]
    module = importlib.import_module(module_path, __name__)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(set(list(globals().keys()) + list(_LAZY_IMPORTS.keys())))
