"""
Pinyin Provider Protocol

定義讀音查詢的最小介面（單一字元 -> 讀音列表）。
"""

from typing import Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class PinyinProvider(Protocol):
    def get_pinyin(self, char: str) -> Optional[Sequence[str]]:
        """返回字元的所有讀音（無聲調、僅英文字母），查無讀音時返回空序列或 None"""
        ...
