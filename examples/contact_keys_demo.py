"""
通訊錄 T9 key 範例

展示如何為聯絡人姓名建立 T9 key，
以及多音字展開、自訂讀音與候選數上限的用法。
"""

from t9key import (
    CapacityExceededError,
    T9KeyBuilder,
    count_segments,
    split_t9_key,
)
from t9key.providers import DictPinyinProvider, PypinyinProvider


def demo_contacts():
    """使用 pypinyin 為通訊錄姓名建立 T9 key"""
    print("=" * 60)
    print("範例 1: 通訊錄姓名")
    print("=" * 60)

    builder = T9KeyBuilder(PypinyinProvider())
    contacts = ["张三", "李长江", "Tom Hanks", "曾小贤", "王 Lily"]

    for name in contacts:
        t9_key = builder.build(name)
        candidates = split_t9_key(t9_key)
        print(f"{name}: {len(candidates)} 個候選")
        for candidate in candidates:
            words = count_segments(candidate, 0, len(candidate))
            print(f"    {candidate!r} (words={words})")
    print()


def demo_custom_readings():
    """使用自訂讀音（姓氏讀音）"""
    print("=" * 60)
    print("範例 2: 自訂姓氏讀音")
    print("=" * 60)

    provider = DictPinyinProvider({"单": ["shan"], "田": ["tian"], "芳": ["fang"]})
    builder = T9KeyBuilder(provider)
    print(f"单田芳 -> {builder.build('单田芳')!r}")
    print()


def demo_candidate_limit():
    """多音字過多時觸發上限"""
    print("=" * 60)
    print("範例 3: 候選數上限")
    print("=" * 60)

    builder = T9KeyBuilder(PypinyinProvider(), max_candidates=16, verbose=True)
    try:
        builder.build("长长长长长长")
    except CapacityExceededError as exc:
        print(f"已截斷: {exc}")
    print()


if __name__ == "__main__":
    demo_contacts()
    demo_custom_readings()
    demo_candidate_limit()
