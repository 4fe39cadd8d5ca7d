"""
測試 Symbol 資料模型與序列化工具
"""

import pytest

from t9key.core.exceptions import InvalidArgumentError
from t9key.core.symbols import (
    PLACEHOLDER,
    Symbol,
    SymbolKind,
    render_key,
    split_t9_key,
)


class TestSymbol:
    """測試 Symbol 建立與渲染"""

    def test_render(self):
        assert Symbol(SymbolKind.DIGIT, "4").render() == "4"
        assert Symbol(SymbolKind.PUNCT, "*").render() == "*"
        assert Symbol(SymbolKind.INITIAL, "4").render() == "T"
        assert Symbol(SymbolKind.INITIAL, "#").render() == "C"
        assert PLACEHOLDER.render() == " "
        assert str(Symbol(SymbolKind.INITIAL, "9")) == "Y"

    def test_keypad_factory(self):
        assert Symbol.keypad("3").kind is SymbolKind.DIGIT
        assert Symbol.keypad(",").kind is SymbolKind.PUNCT

    def test_flags(self):
        assert Symbol(SymbolKind.INITIAL, "2").is_initial
        assert not Symbol(SymbolKind.DIGIT, "2").is_initial
        assert PLACEHOLDER.is_placeholder

    def test_validation(self):
        with pytest.raises(ValueError, match="Invalid digit key"):
            Symbol(SymbolKind.DIGIT, "#")
        with pytest.raises(ValueError, match="Invalid punctuation key"):
            Symbol(SymbolKind.PUNCT, "1")
        with pytest.raises(ValueError, match="Invalid initial key"):
            Symbol(SymbolKind.INITIAL, "a")
        with pytest.raises(ValueError, match="Placeholder carries no key"):
            Symbol(SymbolKind.PLACEHOLDER, "1")

    def test_symbols_are_hashable(self):
        assert len({Symbol(SymbolKind.DIGIT, "1"), Symbol(SymbolKind.DIGIT, "1")}) == 1


class TestSerialization:
    """測試序列化工具"""

    def test_render_key(self):
        key = (Symbol(SymbolKind.INITIAL, "6"), Symbol(SymbolKind.DIGIT, "2"), PLACEHOLDER)
        assert render_key(key) == "V2 "

    def test_split(self):
        assert split_t9_key("V2; ") == ["V2", " "]
        assert split_t9_key("TT") == ["TT"]
        assert split_t9_key("") == [""]

    def test_split_none(self):
        with pytest.raises(InvalidArgumentError):
            split_t9_key(None)
