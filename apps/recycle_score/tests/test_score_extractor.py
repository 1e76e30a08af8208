"""Score Extractor 테스트."""

import pytest

from recycle_score.domain.services import extract_score, is_qualifying_detection


class TestExtractScore:
    """extract_score() 테스트."""

    def test_single_plastic_above_threshold(self, plastic_result):
        """plastic 0.9 → 1점."""
        assert extract_score(plastic_result) == 1

    def test_counts_across_results(self, mixed_result):
        """glass 0.75, plastic 0.51, metal 0.8만 포함 (metal 0.5, paper 제외)."""
        assert extract_score(mixed_result) == 3

    @pytest.mark.parametrize("results", [None, [], [None], [{}], [{"payload": []}]])
    def test_empty_or_absent_input_is_zero(self, results):
        """None/빈 입력은 0점."""
        assert extract_score(results) == 0

    def test_below_threshold_is_zero(self):
        """임계값 미만은 제외."""
        results = [{"payload": [{"displayName": "plastic", "imageObjectDetection": {"score": 0.3}}]}]
        assert extract_score(results) == 0

    def test_flat_score_without_detection_is_zero(self):
        """imageObjectDetection 없는 항목은 제외."""
        results = [{"payload": [{"displayName": "plastic", "score": 0.3}]}]
        assert extract_score(results) == 0

    def test_label_match_is_case_sensitive(self):
        """라벨은 정확히 일치해야 함."""
        results = [{"payload": [{"displayName": "Plastic", "imageObjectDetection": {"score": 0.9}}]}]
        assert extract_score(results) == 0

    def test_is_pure(self, mixed_result):
        """동일 입력 → 동일 출력, 입력 변경 없음."""
        snapshot = repr(mixed_result)
        assert extract_score(mixed_result) == extract_score(mixed_result)
        assert repr(mixed_result) == snapshot


class TestIsQualifyingDetection:
    """is_qualifying_detection() 테스트."""

    @pytest.mark.parametrize(
        ("label", "score", "expected"),
        [
            ("glass", 0.51, True),
            ("metal", 1.0, True),
            ("plastic", 0.5, False),
            ("paper", 0.9, False),
        ],
    )
    def test_threshold_and_allow_list(self, label, score, expected):
        item = {"displayName": label, "imageObjectDetection": {"score": score}}
        assert is_qualifying_detection(item) is expected
