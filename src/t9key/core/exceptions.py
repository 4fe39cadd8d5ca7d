"""
例外定義

所有例外都繼承 T9KeyError，方便呼叫端一次捕捉。
"""

from __future__ import annotations


class T9KeyError(Exception):
    """t9key 例外基類"""


class InvalidArgumentError(T9KeyError, ValueError):
    """輸入缺失或型別錯誤（如 text 或 provider 為 None）"""


class CapacityExceededError(T9KeyError):
    """
    候選鍵數量超過設定上限

    Attributes:
        limit: 設定的上限 (max_candidates)
        requested: 本次展開後將會產生的候選數
    """

    def __init__(self, limit: int, requested: int):
        self.limit = limit
        self.requested = requested
        super().__init__(
            f"Candidate set would grow to {requested} keys, exceeding the limit of {limit}"
        )
