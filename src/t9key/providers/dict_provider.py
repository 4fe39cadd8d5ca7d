"""
字典讀音查詢來源

適用於自訂讀音（如姓氏讀音 "单" -> "shan"）或測試。
"""

import json
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence, Union

from t9key.core.exceptions import InvalidArgumentError


class DictPinyinProvider:
    """
    以字典提供讀音

    Args:
        mapping: 字元 -> 讀音列表；讀音順序即候選順序

    範例：
        >>> provider = DictPinyinProvider({"单": ["shan", "dan"]})
        >>> provider.get_pinyin("单")
        ['shan', 'dan']
        >>> provider.get_pinyin("王")
        []
    """

    def __init__(self, mapping: Mapping[str, Union[str, Sequence[str]]]):
        if mapping is None:
            raise InvalidArgumentError("mapping must not be None")

        normalized: Dict[str, tuple] = {}
        for char, readings in mapping.items():
            if isinstance(readings, str):
                readings = [readings]
            normalized[char] = tuple(readings)
        self._mapping = MappingProxyType(normalized)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "DictPinyinProvider":
        """
        從 UTF-8 JSON 檔載入，格式為 {"字": ["du", "dou"], ...}

        Raises:
            InvalidArgumentError: 檔案內容不是 JSON object
        """
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise InvalidArgumentError(
                f"Pinyin dictionary must be a JSON object, got {type(data).__name__}"
            )
        return cls(data)

    def __len__(self) -> int:
        return len(self._mapping)

    def __contains__(self, char: str) -> bool:
        return char in self._mapping

    def get_pinyin(self, char: str) -> List[str]:
        return list(self._mapping.get(char, ()))
