"""
測試字元分類與按鍵對應

驗證：
1. 合法按鍵字元判斷
2. 字母 -> 按鍵分組（不分大小寫）
3. 拉丁範圍判斷
4. 字首 (Initial) 固定對應表
5. 索引 <-> 按鍵轉換
"""

import string

import pytest

from t9key.core.classifier import (
    CharRange,
    classify_range,
    convert_digit_to_initial,
    convert_index_to_t9_key,
    convert_t9_char_to_index,
    digit_for_latin_letter,
    is_initial,
    is_valid_symbol_char,
    is_valid_t9_key,
    to_initial,
)
from t9key.core.exceptions import InvalidArgumentError
from t9key.core.symbols import PLACEHOLDER, VALID_T9_KEYS, Symbol, SymbolKind

EXPECTED_INITIALS = {
    "#": "C", "*": "J", "+": "K", ",": "L",
    "0": "P", "1": "Q", "2": "R", "3": "S", "4": "T",
    "5": "U", "6": "V", "7": "W", "8": "X", "9": "Y",
}


class TestValidSymbols:
    """測試合法按鍵字元"""

    def test_all_keypad_chars_are_valid(self):
        for c in "0123456789+,*#":
            assert is_valid_symbol_char(c)

    def test_other_chars_are_invalid(self):
        for c in ["a", "Z", " ", ";", "-", "(", ".", "", "中"]:
            assert not is_valid_symbol_char(c)

    def test_valid_t9_key_string(self):
        assert is_valid_t9_key("13800138000")
        assert is_valid_t9_key("*#06#")
        assert is_valid_t9_key("")
        assert not is_valid_t9_key("138-0013")
        assert not is_valid_t9_key("abc")


class TestDigitForLatinLetter:
    """測試字母 -> 按鍵"""

    @pytest.mark.parametrize(
        "letters, digit",
        [
            ("abc", "2"), ("def", "3"), ("ghi", "4"), ("jkl", "5"),
            ("mno", "6"), ("pqrs", "7"), ("tuv", "8"), ("wxyz", "9"),
        ],
    )
    def test_keypad_groups(self, letters, digit):
        for c in letters:
            assert digit_for_latin_letter(c) == Symbol(SymbolKind.DIGIT, digit)

    def test_case_insensitive(self):
        for c in string.ascii_lowercase:
            assert digit_for_latin_letter(c.upper()) == digit_for_latin_letter(c)

    def test_keypad_chars_pass_through(self):
        assert digit_for_latin_letter("7") == Symbol(SymbolKind.DIGIT, "7")
        assert digit_for_latin_letter("#") == Symbol(SymbolKind.PUNCT, "#")
        assert digit_for_latin_letter("+") == Symbol(SymbolKind.PUNCT, "+")

    def test_unmapped_chars_become_placeholder(self):
        for c in [" ", "-", ".", "é", "ß", "@"]:
            assert digit_for_latin_letter(c) is PLACEHOLDER


class TestClassifyRange:
    """測試字元範圍分類"""

    def test_ascii_and_extended_latin(self):
        for c in ["A", "z", "0", " ", "~", "é", "Ž", "ɏ"]:
            assert classify_range(c) is CharRange.BASIC_OR_EXTENDED_LATIN

    def test_latin_extended_additional(self):
        assert classify_range("Ḁ") is CharRange.BASIC_OR_EXTENDED_LATIN
        assert classify_range("ỹ") is CharRange.BASIC_OR_EXTENDED_LATIN
        # 上界不包含
        assert classify_range("ỿ") is CharRange.OTHER

    def test_other_scripts(self):
        for c in ["ɐ", "中", "長", "あ", "김", "Ж"]:
            assert classify_range(c) is CharRange.OTHER

    def test_accepts_codepoints(self):
        assert classify_range(0x24F) is CharRange.BASIC_OR_EXTENDED_LATIN
        assert classify_range(0x250) is CharRange.OTHER
        assert classify_range(0x4E2D) is CharRange.OTHER


class TestInitials:
    """測試字首對應表"""

    def test_exact_initial_table(self):
        for key, letter in EXPECTED_INITIALS.items():
            assert to_initial(Symbol.keypad(key)).render() == letter
            assert convert_digit_to_initial(key) == letter

    def test_to_initial_is_injective(self):
        images = {to_initial(Symbol.keypad(c)).render() for c in VALID_T9_KEYS}
        assert len(images) == len(VALID_T9_KEYS)

    def test_is_initial_over_key_alphabet(self):
        """在序列化字母表中，只有 14 個字首字母會被判定為 Initial"""
        images = set(EXPECTED_INITIALS.values())
        alphabet = set(VALID_T9_KEYS) | images | {" ", ";"}
        for c in alphabet:
            assert is_initial(c) == (c in images)

    def test_is_initial_range(self):
        assert is_initial("C")
        assert is_initial("Y")
        assert not is_initial("B")
        assert not is_initial("Z")
        assert not is_initial("c")

    def test_placeholder_stays_placeholder(self):
        assert to_initial(PLACEHOLDER) is PLACEHOLDER
        assert convert_digit_to_initial("?") == " "

    def test_to_initial_is_idempotent(self):
        initial = to_initial(Symbol.keypad("5"))
        assert to_initial(initial) == initial


class TestIndexConversion:
    """測試索引 <-> 按鍵"""

    def test_index_table(self):
        assert convert_index_to_t9_key(0) == "0"
        assert convert_index_to_t9_key(9) == "9"
        assert convert_index_to_t9_key(10) == "+"
        assert convert_index_to_t9_key(11) == ","
        assert convert_index_to_t9_key(12) == "*"
        assert convert_index_to_t9_key(13) == "#"

    def test_round_trip(self):
        for i in range(14):
            assert convert_t9_char_to_index(convert_index_to_t9_key(i)) == i

    def test_invalid_index(self):
        with pytest.raises(InvalidArgumentError, match="out of range"):
            convert_index_to_t9_key(14)
        with pytest.raises(InvalidArgumentError):
            convert_index_to_t9_key(-1)

    def test_invalid_char(self):
        with pytest.raises(InvalidArgumentError, match="Invalid T9 search character"):
            convert_t9_char_to_index("a")
        # 同時是 ValueError，方便一般呼叫端捕捉
        with pytest.raises(ValueError):
            convert_t9_char_to_index(";")
