"""Tests for word splitting and distance helpers."""

import pytest

from listing_matcher.text import (
    distance_score,
    is_model_like,
    model_fragments,
    multi_word_distance,
    split_to_words,
    word_count,
    word_distance,
)


class TestSplitToWords:
    def test_spaces(self):
        assert split_to_words("canon powershot a85") == ["canon", "powershot", "a85"]

    def test_tabs_and_commas(self):
        assert split_to_words("canon\tpowershot,a85") == ["canon", "powershot", "a85"]

    def test_adjacent_separators_give_no_empty_words(self):
        assert split_to_words("canon,  powershot , a85") == ["canon", "powershot", "a85"]

    def test_keeps_case(self):
        assert split_to_words("Canon PowerShot") == ["Canon", "PowerShot"]

    def test_hyphen_is_not_a_separator(self):
        assert split_to_words("dsc-w310") == ["dsc-w310"]

    def test_empty(self):
        assert split_to_words("") == []
        assert split_to_words(" ,\t") == []

    def test_word_count(self):
        assert word_count("pdr m60") == 2
        assert word_count("") == 0


class TestIsModelLike:
    @pytest.mark.parametrize("word", ["a85", "dsc-w310", "s2500hd", "1000", "d-3000", "tz5"])
    def test_model_like(self, word):
        assert is_model_like(word)

    @pytest.mark.parametrize("word", ["powershot", "12", "85a", "pdr", "-"])
    def test_not_model_like(self, word):
        assert not is_model_like(word)

    def test_model_fragments(self):
        assert model_fragments("pdr m60") == ["m60"]
        assert model_fragments("ex-z1080 kit 500") == ["ex-z1080", "500"]
        assert model_fragments("mju tough") == []


class TestWordDistance:
    DESC = ["canon", "powershot", "a85", "digital", "camera"]

    def test_at_expected_position(self):
        assert word_distance("a85", 2, self.DESC) == 0

    def test_offset(self):
        assert word_distance("camera", 2, self.DESC) == 2
        assert word_distance("canon", 2, self.DESC) == 2

    def test_missing(self):
        assert word_distance("nikon", 0, self.DESC) is None

    def test_multi_word_key_must_be_contiguous(self):
        assert word_distance("powershot a85", 2, self.DESC) == 1
        assert word_distance("canon a85", 2, self.DESC) is None

    def test_closest_occurrence_wins(self):
        assert word_distance("x", 2, ["x", "y", "z", "w", "x"]) == 2
        assert word_distance("x", 4, ["x", "y", "z", "w", "x"]) == 0

    def test_empty_key(self):
        assert word_distance("", 0, self.DESC) is None


class TestMultiWordDistance:
    def test_each_word_searched(self):
        assert multi_word_distance("digital ixus", 1, ["canon", "ixus", "100"]) == 0

    def test_closest_word_wins(self):
        desc = ["eastman", "kodak", "easyshare", "c142"]
        assert multi_word_distance("eastman kodak", 0, desc) == 0

    def test_none_found(self):
        assert multi_word_distance("cyber-shot", 1, ["canon", "a85"]) is None

    def test_empty_keys(self):
        assert multi_word_distance("", 1, ["canon"]) is None


class TestDistanceScore:
    def test_zero_distance(self):
        assert distance_score(0, 5) == 1.0
        assert distance_score(0, 20) == 1.0

    def test_short_titles_padded(self):
        # 3-word title is scored as if it had 7 words
        assert distance_score(1, 3) == pytest.approx(6 / 7)

    def test_long_titles(self):
        assert distance_score(3, 10) == pytest.approx(0.7)

    def test_clipped_at_zero(self):
        assert distance_score(7, 5) == 0.0
        assert distance_score(12, 5) == 0.0

    def test_monotonic(self):
        scores = [distance_score(d, 12) for d in range(15)]
        assert scores == sorted(scores, reverse=True)
        assert all(0.0 <= s <= 1.0 for s in scores)
