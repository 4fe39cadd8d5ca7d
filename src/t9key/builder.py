"""
T9 Key 建構器 (T9KeyBuilder)

逐字元處理輸入文字：

1. 基本/擴充拉丁字元：轉為按鍵後一律標記為字首 (Initial)，每個字元自成一個字
2. 其他字元（漢字等）：向 PinyinProvider 查詢讀音
   - 無讀音 -> PLACEHOLDER
   - 一個讀音 -> 編碼後附加到所有候選
   - 多個讀音 -> 候選數乘以讀音數
3. 候選鍵以 ';' 串接後返回

範例：
    >>> from t9key.providers import DictPinyinProvider
    >>> provider = DictPinyinProvider({"长": ["chang", "zhang"]})
    >>> build_t9_key("A长", provider)
    'RR4264;RY4264'
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from .config import DEFAULT_CONFIG, T9KeyConfig, configure_logging
from .core.classifier import CharRange, classify_range, digit_for_latin_letter, to_initial
from .core.exceptions import CapacityExceededError, InvalidArgumentError
from .core.expander import CandidateExpander
from .core.protocols.provider import PinyinProvider
from .core.spelling import SpellingEncoder
from .core.symbols import PLACEHOLDER, SubKey
from .utils.logger import TimingContext, get_logger

_UNSET = object()


class T9KeyBuilder:
    """
    T9 Key 建構器

    職責:
    - 持有 PinyinProvider 與配置
    - 將文字轉為序列化的候選鍵集合

    生命週期:
    - 建構器本身無可變狀態，可在多執行緒間共用
      （前提是 provider 支援並行讀取）

    Args:
        provider: 讀音查詢來源，需實作 get_pinyin(char)
        config: 配置，預設為 DEFAULT_CONFIG
        max_candidates: 覆蓋 config.max_candidates（None 表示不限制）
        verbose: 覆蓋 config.verbose
        on_timing: 覆蓋 config.on_timing
    """

    def __init__(
        self,
        provider: PinyinProvider,
        config: Optional[T9KeyConfig] = None,
        *,
        max_candidates=_UNSET,
        verbose: Optional[bool] = None,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ):
        if provider is None:
            raise InvalidArgumentError("provider must not be None")
        if not isinstance(provider, PinyinProvider) or not callable(provider.get_pinyin):
            raise InvalidArgumentError(
                f"provider must implement get_pinyin(char), got {type(provider).__name__}"
            )

        base = config or DEFAULT_CONFIG
        self._provider = provider
        self._max_candidates = base.max_candidates if max_candidates is _UNSET else max_candidates
        if self._max_candidates is not None and self._max_candidates < 1:
            raise ValueError(f"max_candidates must be >= 1, got {self._max_candidates}")
        self._timing_callback = on_timing or base.on_timing

        configure_logging(base.verbose if verbose is None else verbose)
        self._logger = get_logger("builder")

    @property
    def provider(self) -> PinyinProvider:
        return self._provider

    @property
    def max_candidates(self) -> Optional[int]:
        return self._max_candidates

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(
            operation=operation,
            logger=self._logger,
            level=logging.DEBUG,
            callback=self._timing_callback,
        )

    def build(self, text: str) -> str:
        """
        建構 T9 key

        Args:
            text: 輸入文字（如聯絡人姓名）

        Returns:
            str: 以 ';' 串接的候選鍵，至少包含一個候選

        Raises:
            InvalidArgumentError: text 為 None 或非字串
            CapacityExceededError: 候選數超過 max_candidates
        """
        if text is None:
            raise InvalidArgumentError("text must not be None")
        if not isinstance(text, str):
            raise InvalidArgumentError(f"text must be str, got {type(text).__name__}")

        with self._log_timing("T9KeyBuilder.build"):
            self._logger.debug(f"build: text={text!r}, len={len(text)}")
            expander = CandidateExpander(self._max_candidates)
            for c in text:
                try:
                    expander.extend(self._sub_keys_for(c))
                except CapacityExceededError as exc:
                    self._logger.warning(
                        f"Candidate limit reached at {c!r} in {text!r}: {exc}"
                    )
                    raise

            t9_key = expander.serialize()
            self._logger.debug(f"build: {len(expander)} candidate(s) -> {t9_key!r}")
            return t9_key

    def _sub_keys_for(self, c: str) -> List[SubKey]:
        if classify_range(c) is CharRange.BASIC_OR_EXTENDED_LATIN:
            return [(to_initial(digit_for_latin_letter(c)),)]

        readings = self._provider.get_pinyin(c)
        self._logger.debug(f"  [Pinyin] {c} -> {readings}")
        if not readings:
            return [(PLACEHOLDER,)]
        if isinstance(readings, str):
            readings = [readings]

        sub_keys = []
        for spelling in readings:
            sub_key = SpellingEncoder.encode(spelling)
            if sub_key == (PLACEHOLDER,):
                self._logger.debug(f"  [Pinyin] rejected spelling {spelling!r} for {c}")
            sub_keys.append(sub_key)
        return sub_keys


def build_t9_key(text: str, provider: PinyinProvider, *, max_candidates=_UNSET) -> str:
    """
    建構 T9 key 的函式入口

    Args:
        text: 輸入文字
        provider: 讀音查詢來源
        max_candidates: 候選數上限，未指定時使用 DEFAULT_CONFIG

    Raises:
        InvalidArgumentError: text 或 provider 為 None
    """
    return T9KeyBuilder(provider, max_candidates=max_candidates).build(text)
