"""
候選鍵展開器 (CandidateExpander)

維護一組「候選鍵」，每個候選代表整段文字的一種解讀。
逐字元呼叫 extend()：

- 只有一種子鍵：附加到每個既有候選後面，候選數不變
- k 種子鍵（多音字）：候選數 n 變成 n * k，
  外層迴圈為既有候選、內層迴圈為子鍵，順序屬於輸出契約的一部分

    既有: [A, B]     子鍵: [x, y, z]
    結果: [Ax, Ay, Az, Bx, By, Bz]

候選數是各字元讀音數的乘積，可透過 max_candidates 設定上限。
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from .exceptions import CapacityExceededError, InvalidArgumentError
from .symbols import T9_KEYS_DIVIDER, CandidateKey, SubKey, render_key


class CandidateExpander:
    """
    以 Cartesian product 逐步展開候選鍵集合

    Args:
        max_candidates: 候選數上限，None 表示不限制

    範例：
        >>> from t9key.core.spelling import encode_spelling
        >>> expander = CandidateExpander()
        >>> expander.extend([encode_spelling("zhang")])
        >>> expander.extend([encode_spelling("chang"), encode_spelling("zhang")])
        >>> expander.render()
        ['Y4264R4264', 'Y4264Y4264']
    """

    def __init__(self, max_candidates: Optional[int] = None):
        if max_candidates is not None and max_candidates < 1:
            raise ValueError(f"max_candidates must be >= 1, got {max_candidates}")
        self.max_candidates = max_candidates
        self._candidates: List[CandidateKey] = [()]

    @property
    def candidates(self) -> List[CandidateKey]:
        return list(self._candidates)

    def __len__(self) -> int:
        return len(self._candidates)

    def extend(self, sub_keys: Sequence[SubKey]) -> None:
        """
        以一個字元的所有子鍵展開候選集合

        Raises:
            InvalidArgumentError: sub_keys 為空
            CapacityExceededError: 展開後超過 max_candidates（集合維持不變）
        """
        if not sub_keys:
            raise InvalidArgumentError("extend() requires at least one sub-key")

        if len(sub_keys) == 1:
            sub_key = tuple(sub_keys[0])
            self._candidates = [key + sub_key for key in self._candidates]
            return

        requested = len(self._candidates) * len(sub_keys)
        if self.max_candidates is not None and requested > self.max_candidates:
            raise CapacityExceededError(self.max_candidates, requested)

        subs = [tuple(sub_key) for sub_key in sub_keys]
        self._candidates = [key + sub for key in self._candidates for sub in subs]

    def render(self) -> List[str]:
        return [render_key(key) for key in self._candidates]

    def serialize(self) -> str:
        """候選鍵以 ';' 串接"""
        return T9_KEYS_DIVIDER.join(self.render())
