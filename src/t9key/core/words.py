"""
計算候選鍵中某段範圍內的「字」數

下游比對器用來評分：字首 (Initial)、PLACEHOLDER 以及範圍起點各算一個字。
"""

from __future__ import annotations

from .classifier import is_initial
from .symbols import PLACEHOLDER_CHAR


def count_segments(key: str, start: int, end: int) -> int:
    """
    計算 key[start:end] 範圍內的字數

    注意：end >= len(key) 時會被截到 len(key) - 1，而不是 len(key)，
    因此最後一個字元不會被掃描到。既有呼叫端依賴這個行為，修改前需先確認。

    範例：
        >>> count_segments("V2Y4264", 0, 7)
        2
        >>> count_segments("V2Y4264", 0, 100)
        2
    """
    length = len(key)
    if end >= length:
        end = length - 1

    count = 0
    for i in range(start, end):
        c = key[i]
        if i == start or c == PLACEHOLDER_CHAR or is_initial(c):
            count += 1
    return count
