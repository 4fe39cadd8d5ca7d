"""
基於 pypinyin 的讀音查詢

多音字會返回所有讀音（去除聲調並去重），例如:
    长 -> ["chang", "zhang"]（順序依 pypinyin 字典）
    了 -> ["le", "liao"]

非中文字元（日文假名、韓文、符號等）返回空列表，由建構器轉為 PLACEHOLDER。

注意：此模組使用延遲導入 (Lazy Import) 機制，
僅在實際查詢時才會載入 pypinyin。
"""

from functools import lru_cache
from typing import List, Tuple

from t9key.utils.lazy_imports import _get_pypinyin
from t9key.utils.logger import get_logger

_logger = get_logger("provider.pypinyin")


# =============================================================================
# 讀音快取 (Performance Critical)
# =============================================================================
# pypinyin 呼叫是效能瓶頸，同一個字在通訊錄中會大量重複出現

@lru_cache(maxsize=50000)
def cached_get_heteronyms(char: str, heteronym: bool = True) -> Tuple[str, ...]:
    """快取版單字讀音查詢（無聲調，依 pypinyin 的常用度排序）"""
    pypinyin = _get_pypinyin()
    result = pypinyin.pinyin(
        char,
        style=pypinyin.NORMAL,
        heteronym=heteronym,
        errors="ignore",
    )
    if not result:
        return ()
    # 去聲調後可能出現重複，例如 "好" 的 hǎo / hào
    return tuple(dict.fromkeys(py for py in result[0] if py))


class PypinyinProvider:
    """
    pypinyin 讀音查詢來源

    Args:
        heteronym: True 時返回多音字的所有讀音；False 時只返回最常用讀音

    範例：
        >>> provider = PypinyinProvider()
        >>> provider.get_pinyin("中")
        ['zhong']
        >>> provider.get_pinyin("あ")
        []
    """

    def __init__(self, heteronym: bool = True):
        self.heteronym = heteronym
        # 提早檢查依賴，避免第一次查詢時才失敗
        _get_pypinyin()

    def get_pinyin(self, char: str) -> List[str]:
        readings = list(cached_get_heteronyms(char, self.heteronym))
        if len(readings) > 1:
            _logger.debug(f"[Heteronym] {char} -> {readings}")
        return readings

    def cache_info(self):
        return cached_get_heteronyms.cache_info()
