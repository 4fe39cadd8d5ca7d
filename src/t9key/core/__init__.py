"""
核心編碼層

不依賴任何第三方套件：符號模型、字元分類、拼音編碼、候選展開、字數計算。
"""

from .classifier import (
    CharRange,
    classify_range,
    convert_digit_to_initial,
    convert_index_to_t9_key,
    convert_t9_char_to_index,
    digit_for_latin_letter,
    is_initial,
    is_latin_letter,
    is_valid_symbol_char,
    is_valid_t9_key,
    to_initial,
)
from .exceptions import CapacityExceededError, InvalidArgumentError, T9KeyError
from .expander import CandidateExpander
from .protocols.provider import PinyinProvider
from .spelling import SpellingEncoder, encode_spelling
from .symbols import (
    PLACEHOLDER,
    T9_KEYS_DIVIDER,
    VALID_T9_KEYS,
    CandidateKey,
    SubKey,
    Symbol,
    SymbolKind,
    render_key,
    split_t9_key,
)
from .words import count_segments

__all__ = [
    # 符號模型
    "Symbol",
    "SymbolKind",
    "SubKey",
    "CandidateKey",
    "PLACEHOLDER",
    "T9_KEYS_DIVIDER",
    "VALID_T9_KEYS",
    "render_key",
    "split_t9_key",
    # 字元分類
    "CharRange",
    "classify_range",
    "digit_for_latin_letter",
    "to_initial",
    "is_initial",
    "is_latin_letter",
    "is_valid_symbol_char",
    "is_valid_t9_key",
    "convert_digit_to_initial",
    "convert_index_to_t9_key",
    "convert_t9_char_to_index",
    # 編碼與展開
    "SpellingEncoder",
    "encode_spelling",
    "CandidateExpander",
    "count_segments",
    # Protocol
    "PinyinProvider",
    # 例外
    "T9KeyError",
    "InvalidArgumentError",
    "CapacityExceededError",
]
