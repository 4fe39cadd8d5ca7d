"""
測試字數計算 (count_segments)
"""

from t9key.core.words import count_segments


class TestCountSegments:
    """測試字首/空白/起點計數"""

    def test_counts_initials(self):
        # V2 S3 | T (index 4 在範圍外)
        assert count_segments("V2S3T", 0, 4) == 2

    def test_start_always_counts(self):
        assert count_segments("V2S3T", 1, 4) == 2

    def test_placeholder_counts(self):
        assert count_segments("V2 S3", 0, 4) == 3

    def test_plain_digits(self):
        assert count_segments("23456", 0, 4) == 1

    def test_out_of_range_end_is_clamped_to_length_minus_one(self):
        """end 超出長度時截到 len - 1，最後一個字元不會被掃描"""
        key = "V2S3T"
        assert count_segments(key, 0, 10) == count_segments(key, 0, 4)
        assert count_segments(key, 0, 5) == 2
        # 若沒有截斷，index 4 的 'T' 會讓結果變成 3
        assert count_segments(key, 0, 10) != 3

    def test_empty_range(self):
        assert count_segments("V2S3T", 3, 3) == 0
        assert count_segments("", 0, 0) == 0
        assert count_segments("T", 0, 1) == 0
