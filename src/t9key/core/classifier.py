"""
字元分類與按鍵對應

負責：
- 判斷字元是否為合法的 T9 按鍵字元
- 拉丁字母 -> 按鍵數字（經典電話鍵盤分組）
- 判斷字元落在「基本/擴充拉丁」範圍或需要外部讀音查詢
- 按鍵符號 <-> 字首符號 (Initial) 的固定對應

所有表格皆為不可變常數，可安全地被多執行緒同時讀取。
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Union

from .exceptions import InvalidArgumentError
from .symbols import (
    INITIAL_OFFSET,
    PLACEHOLDER,
    PLACEHOLDER_CHAR,
    T9_KEYS_DIVIDER,
    VALID_T9_KEYS,
    Symbol,
    SymbolKind,
)

__all__ = [
    "CharRange",
    "T9_KEYS_DIVIDER",
    "VALID_T9_KEYS",
    "classify_range",
    "convert_digit_to_initial",
    "convert_index_to_t9_key",
    "convert_t9_char_to_index",
    "digit_for_latin_letter",
    "is_initial",
    "is_latin_letter",
    "is_valid_symbol_char",
    "is_valid_t9_key",
    "to_initial",
]

# =============================================================================
# 常數表
# =============================================================================

# A..Z 依序對應的按鍵
PINYIN_T9_MAP = (
    "222"
    "333"
    "444"
    "555"
    "666"
    "7777"
    "888"
    "9999"
)

_LETTER_TO_DIGIT = MappingProxyType(
    {chr(ord("a") + i): digit for i, digit in enumerate(PINYIN_T9_MAP)}
)
_VALID_SYMBOL_CHARS = frozenset(VALID_T9_KEYS)
_T9_KEY_INDEX = MappingProxyType({c: i for i, c in enumerate(VALID_T9_KEYS)})

# ASCII 與 Latin-1 / Extended-A / Extended-B (U+0000..U+024F)
_EXTENDED_LATIN_END = 0x250
_LATIN_EXTENDED_ADDITIONAL = (0x1E00, 0x1EFF)


class CharRange(Enum):
    """字元範圍分類"""
    BASIC_OR_EXTENDED_LATIN = "latin"
    OTHER = "other"


# =============================================================================
# 分類
# =============================================================================

def is_valid_symbol_char(c: str) -> bool:
    """字元是否為合法的 T9 按鍵: '0'-'9', '+', ',', '*', '#'"""
    return c in _VALID_SYMBOL_CHARS


def is_valid_t9_key(key: str) -> bool:
    """
    檢查輸入字串的每個字元都是合法按鍵

    常用於驗證使用者在撥號鍵盤上輸入的查詢字串。空字串視為合法。
    """
    return all(is_valid_symbol_char(c) for c in key)


def is_latin_letter(c: str) -> bool:
    """僅限 ASCII 的 A-Z / a-z"""
    return len(c) == 1 and ("A" <= c <= "Z" or "a" <= c <= "z")


def classify_range(c: Union[str, int]) -> CharRange:
    """
    判斷字元屬於基本/擴充拉丁範圍，或需要查詢外部讀音

    Args:
        c: 單一字元或 code point

    Returns:
        CharRange: BASIC_OR_EXTENDED_LATIN 或 OTHER（例如漢字）
    """
    codepoint = c if isinstance(c, int) else ord(c)
    if codepoint < _EXTENDED_LATIN_END:
        return CharRange.BASIC_OR_EXTENDED_LATIN
    start, end = _LATIN_EXTENDED_ADDITIONAL
    if start <= codepoint < end:
        return CharRange.BASIC_OR_EXTENDED_LATIN
    return CharRange.OTHER


# =============================================================================
# 按鍵對應
# =============================================================================

def digit_for_latin_letter(c: str) -> Symbol:
    """
    將字元格式化為 T9 符號

    - 英文字母（不分大小寫）-> 對應按鍵的 DIGIT
    - 已是合法按鍵字元 -> 原樣返回 (DIGIT / PUNCT)
    - 其他 -> PLACEHOLDER

    範例：
        >>> digit_for_latin_letter("H").render()
        '4'
        >>> digit_for_latin_letter("#").render()
        '#'
    """
    if is_latin_letter(c):
        return Symbol(SymbolKind.DIGIT, _LETTER_TO_DIGIT[c.lower()])
    if is_valid_symbol_char(c):
        return Symbol.keypad(c)
    return PLACEHOLDER


def to_initial(symbol: Symbol) -> Symbol:
    """按鍵符號 -> 字首符號；PLACEHOLDER 維持不變"""
    if symbol.kind in (SymbolKind.PLACEHOLDER, SymbolKind.INITIAL):
        return symbol
    return Symbol(SymbolKind.INITIAL, symbol.char)


def convert_digit_to_initial(c: str) -> str:
    """
    字元層級的字首轉換: '#' -> 'C', '0' -> 'P', '9' -> 'Y'

    非按鍵字元轉為 PLACEHOLDER 字元 (' ')。
    """
    if not is_valid_symbol_char(c):
        return PLACEHOLDER_CHAR
    return chr(ord(c) + INITIAL_OFFSET)


def is_initial(c: str) -> bool:
    """字元是否為字首標記 ('C'..'Y')"""
    return len(c) == 1 and "C" <= c <= "Y"


# =============================================================================
# 索引 <-> 按鍵
# =============================================================================

def convert_index_to_t9_key(index: int) -> str:
    """
    轉換 T9 索引為對應的按鍵字元

    Args:
        index: 0~9 -> '0'~'9', 10 -> '+', 11 -> ',', 12 -> '*', 13 -> '#'

    Raises:
        InvalidArgumentError: index 不在 0~13
    """
    if not 0 <= index < len(VALID_T9_KEYS):
        raise InvalidArgumentError(f"T9 index out of range: {index}")
    return VALID_T9_KEYS[index]


def convert_t9_char_to_index(c: str) -> int:
    """
    轉換按鍵字元為 T9 索引（convert_index_to_t9_key 的反函數）

    Raises:
        InvalidArgumentError: 非合法按鍵字元
    """
    try:
        return _T9_KEY_INDEX[c]
    except (KeyError, TypeError):
        raise InvalidArgumentError(f"Invalid T9 search character: {c!r}") from None
