"""
T9 符號資料模型

一個 T9 key 由 Symbol 序列組成，每個 Symbol 只會是下列四種之一：

- DIGIT:       '0'-'9'，按鍵上的數字
- PUNCT:       '+', ',', '*', '#'
- INITIAL:     與 DIGIT/PUNCT 同一組按鍵，但標記為「字首」（音節或單字的第一個字母）
- PLACEHOLDER: 無法對應到按鍵的字元，不會與任何輸入相符

字串形式（序列化格式，下游比對器依賴此格式，不可變更）：

    DIGIT / PUNCT  -> 原字元
    INITIAL        -> 'C'..'Y'（按鍵字元 + 固定位移 32）
    PLACEHOLDER    -> ' '
    候選分隔符     -> ';'
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple

from .exceptions import InvalidArgumentError

KEYPAD_DIGITS = "0123456789"
KEYPAD_PUNCTUATION = "+,*#"
# 索引順序: 0~9 -> 0~9, '+' -> 10, ',' -> 11, '*' -> 12, '#' -> 13
VALID_T9_KEYS = KEYPAD_DIGITS + KEYPAD_PUNCTUATION

T9_KEYS_DIVIDER = ";"
PLACEHOLDER_CHAR = " "

# '#' -> 'C', '0' -> 'P', '9' -> 'Y'
INITIAL_OFFSET = ord("C") - ord("#")


class SymbolKind(Enum):
    """符號類型"""
    DIGIT = "digit"
    PUNCT = "punct"
    INITIAL = "initial"
    PLACEHOLDER = "placeholder"


@dataclass(frozen=True)
class Symbol:
    """
    單一 T9 符號

    Attributes:
        kind: 符號類型
        char: 對應的按鍵字元（'0'-'9' 或 '+,*#'），PLACEHOLDER 為空字串

    範例：
        >>> Symbol(SymbolKind.DIGIT, "4").render()
        '4'
        >>> Symbol(SymbolKind.INITIAL, "4").render()
        'T'
        >>> PLACEHOLDER.render()
        ' '
    """
    kind: SymbolKind
    char: str = ""

    def __post_init__(self):
        if self.kind is SymbolKind.PLACEHOLDER:
            if self.char:
                raise ValueError(f"Placeholder carries no key, got {self.char!r}")
        elif self.kind is SymbolKind.DIGIT:
            if len(self.char) != 1 or self.char not in KEYPAD_DIGITS:
                raise ValueError(f"Invalid digit key: {self.char!r}")
        elif self.kind is SymbolKind.PUNCT:
            if len(self.char) != 1 or self.char not in KEYPAD_PUNCTUATION:
                raise ValueError(f"Invalid punctuation key: {self.char!r}")
        elif len(self.char) != 1 or self.char not in VALID_T9_KEYS:
            raise ValueError(f"Invalid initial key: {self.char!r}")

    @classmethod
    def keypad(cls, c: str) -> "Symbol":
        """按鍵字元 -> DIGIT 或 PUNCT 符號"""
        if c in KEYPAD_PUNCTUATION:
            return cls(SymbolKind.PUNCT, c)
        return cls(SymbolKind.DIGIT, c)

    @property
    def is_initial(self) -> bool:
        return self.kind is SymbolKind.INITIAL

    @property
    def is_placeholder(self) -> bool:
        return self.kind is SymbolKind.PLACEHOLDER

    def render(self) -> str:
        if self.kind is SymbolKind.PLACEHOLDER:
            return PLACEHOLDER_CHAR
        if self.kind is SymbolKind.INITIAL:
            return chr(ord(self.char) + INITIAL_OFFSET)
        return self.char

    def __str__(self) -> str:
        return self.render()


PLACEHOLDER = Symbol(SymbolKind.PLACEHOLDER)

# 一個來源字元的一種解讀
SubKey = Tuple[Symbol, ...]
# 整段文字的一種解讀
CandidateKey = Tuple[Symbol, ...]


def render_key(key: Iterable[Symbol]) -> str:
    """將 Symbol 序列轉為字串"""
    return "".join(symbol.render() for symbol in key)


def split_t9_key(serialized: str) -> List[str]:
    """
    將序列化的候選集合拆回個別候選鍵

    範例：
        >>> split_t9_key("V2; ")
        ['V2', ' ']
    """
    if serialized is None:
        raise InvalidArgumentError("serialized key must not be None")
    return serialized.split(T9_KEYS_DIVIDER)
