"""
t9key - 撥號鍵盤 (T9) 搜尋鍵產生器

核心概念：
- 把姓名、標籤等文字轉成撥號鍵盤上的按鍵序列 (T9 key)
- 每個字（拉丁字元或漢字拼音的第一個字母）標記為字首 (Initial)，
  讓下游比對器可以只輸入字首數字就命中
- 多音字會展開成多個候選鍵，以 ';' 串接

官方入口（穩定 API）：
- `t9key.build_t9_key`
- `t9key.T9KeyBuilder`
- `t9key.providers.PypinyinProvider`
"""

# =============================================================================
# Builder 層（官方入口）
# =============================================================================
from t9key.builder import T9KeyBuilder, build_t9_key
from t9key.config import DEFAULT_CONFIG, DEFAULT_MAX_CANDIDATES, T9KeyConfig

# =============================================================================
# 核心編碼層（進階用途）
# =============================================================================
from t9key.core import (
    PLACEHOLDER,
    T9_KEYS_DIVIDER,
    VALID_T9_KEYS,
    CandidateExpander,
    CharRange,
    SpellingEncoder,
    Symbol,
    SymbolKind,
    classify_range,
    convert_index_to_t9_key,
    convert_t9_char_to_index,
    count_segments,
    digit_for_latin_letter,
    encode_spelling,
    is_initial,
    is_valid_symbol_char,
    is_valid_t9_key,
    render_key,
    split_t9_key,
    to_initial,
)
from t9key.core.exceptions import CapacityExceededError, InvalidArgumentError, T9KeyError
from t9key.core.protocols.provider import PinyinProvider

# =============================================================================
# 日誌工具
# =============================================================================
from t9key.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

# =============================================================================
# 依賴檢查工具
# =============================================================================
from t9key.utils.lazy_imports import check_chinese_dependencies, is_chinese_available

__all__ = [
    # Builder
    "T9KeyBuilder",
    "build_t9_key",
    "T9KeyConfig",
    "DEFAULT_CONFIG",
    "DEFAULT_MAX_CANDIDATES",
    # Core (advanced)
    "Symbol",
    "SymbolKind",
    "PLACEHOLDER",
    "T9_KEYS_DIVIDER",
    "VALID_T9_KEYS",
    "CharRange",
    "classify_range",
    "digit_for_latin_letter",
    "to_initial",
    "is_initial",
    "is_valid_symbol_char",
    "is_valid_t9_key",
    "convert_index_to_t9_key",
    "convert_t9_char_to_index",
    "SpellingEncoder",
    "encode_spelling",
    "CandidateExpander",
    "render_key",
    "split_t9_key",
    "count_segments",
    # Protocols
    "PinyinProvider",
    # Errors
    "T9KeyError",
    "InvalidArgumentError",
    "CapacityExceededError",
    # Logging
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
    # Dependency checks
    "is_chinese_available",
    "check_chinese_dependencies",
]

__version__ = "0.1.0"
