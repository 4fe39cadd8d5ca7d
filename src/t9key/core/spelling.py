"""
拼音 -> 子鍵 (SubKey) 編碼

一個拼音（如 "zhang"）轉為：首字母為 INITIAL，其餘為 DIGIT。
只要拼音中含有任何非英文字母（聲調數字、ü、空白等），
整個拼音就退化為單一 PLACEHOLDER，不做部分編碼。
"""

from __future__ import annotations

from typing import List, Optional

from .classifier import digit_for_latin_letter, is_latin_letter, to_initial
from .symbols import PLACEHOLDER, SubKey, Symbol

_PLACEHOLDER_SUB_KEY: SubKey = (PLACEHOLDER,)


class SpellingEncoder:
    """
    拼音編碼器

    範例：
        >>> from t9key.core.symbols import render_key
        >>> render_key(SpellingEncoder.encode("zhang"))
        'Y4264'
        >>> render_key(SpellingEncoder.encode("ma3"))
        ' '
    """

    @staticmethod
    def encode(spelling: Optional[str]) -> SubKey:
        if not spelling:
            return _PLACEHOLDER_SUB_KEY

        symbols: List[Symbol] = []
        for i, c in enumerate(spelling):
            if not is_latin_letter(c):
                return _PLACEHOLDER_SUB_KEY
            symbol = digit_for_latin_letter(c)
            symbols.append(to_initial(symbol) if i == 0 else symbol)
        return tuple(symbols)


def encode_spelling(spelling: Optional[str]) -> SubKey:
    """SpellingEncoder.encode 的函式形式"""
    return SpellingEncoder.encode(spelling)
