"""Tests for the scoring engine."""

import pytest

from typetrainer.app.errors import InvalidArgument
from typetrainer.services.scoring import ScoringEngine, TypingStats, count_words, score


class TestScore:
    def test_partial_mismatch(self):
        """'cat dog' vs 'cat dig' in 6 s: one miss at index 5, 14 WPM."""
        stats = score("cat dog", "cat dig", 6.0)
        assert stats.reference_length == 7
        assert stats.typed_length == 7
        assert stats.correct_count == 6
        assert stats.incorrect_count == 1
        assert stats.word_count == 2
        assert stats.accuracy_percent == pytest.approx(85.714, abs=0.01)
        assert stats.words_per_minute == pytest.approx(14.0)

    def test_typed_too_much(self):
        """Extra characters are errors but do not lower accuracy."""
        stats = score("hello", "hello world", 10.0)
        assert stats.correct_count == 5
        assert stats.incorrect_count == 6
        assert stats.accuracy_percent == pytest.approx(100.0)
        assert stats.words_per_minute == pytest.approx(13.2)

    def test_typed_too_little(self):
        stats = score("hello world", "hello", 10.0)
        assert stats.correct_count == 5
        assert stats.incorrect_count == 6
        assert stats.accuracy_percent == pytest.approx(5 / 11 * 100)

    def test_identical_text(self):
        stats = score("the quick brown fox", "the quick brown fox", 3.5)
        assert stats.accuracy_percent == 100.0
        assert stats.incorrect_count == 0

    def test_empty_typed(self):
        stats = score("practice", "", 2.0)
        assert stats.correct_count == 0
        assert stats.incorrect_count == 8
        assert stats.accuracy_percent == 0.0
        assert stats.words_per_minute == 0.0

    def test_empty_reference(self):
        stats = score("", "abc", 1.0)
        assert stats.reference_length == 0
        assert stats.accuracy_percent == 0.0
        assert stats.incorrect_count == 3
        assert stats.word_count == 0

    def test_both_empty(self):
        assert score("", "", 0.0) == TypingStats()

    @pytest.mark.parametrize("elapsed", [0, 0.0])
    def test_zero_elapsed_gives_zero_wpm(self, elapsed):
        stats = score("typing", "typing speed", elapsed)
        assert stats.words_per_minute == 0.0
        assert stats.elapsed_seconds == 0.0

    def test_accuracy_stays_in_range(self):
        pairs = [("abc", "xyz"), ("abc", "abcabcabc"), ("a b c", "a"), ("dog", "dgo")]
        for ref, typed in pairs:
            acc = score(ref, typed, 1.0).accuracy_percent
            assert 0.0 <= acc <= 100.0

    def test_correct_never_exceeds_overlap(self):
        stats = score("lazy dog", "lazy", 1.0)
        assert stats.correct_count <= min(stats.reference_length, stats.typed_length)
        assert stats.correct_count + stats.incorrect_count == max(
            stats.reference_length, stats.typed_length
        )

    def test_compares_code_points(self):
        stats = score("café", "cafe", 1.0)
        assert stats.reference_length == 4
        assert stats.correct_count == 3
        assert stats.incorrect_count == 1

    def test_stats_are_immutable(self):
        stats = score("a", "a", 1.0)
        with pytest.raises(AttributeError):
            stats.correct_count = 5

    def test_int_elapsed_accepted(self):
        assert score("abcde", "abcde", 60).words_per_minute == pytest.approx(1.0)

    @pytest.mark.parametrize("elapsed", [-0.5, float("nan"), "3", None, True])
    def test_bad_elapsed_rejected(self, elapsed):
        with pytest.raises(InvalidArgument):
            score("abc", "abc", elapsed)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            score("abc", "abc", -1)


class TestCountWords:
    def test_simple_sentence(self):
        assert count_words("the quick brown fox") == 4

    def test_empty_is_zero(self):
        assert count_words("") == 0

    def test_only_spaces_is_zero(self):
        assert count_words("  ") == 0

    def test_irregular_spacing(self):
        assert count_words("  the  quick   fox ") == 3


class TestScoringEngine:
    def test_delegates_to_score(self):
        engine = ScoringEngine()
        assert engine.score("cat dog", "cat dig", 6.0) == score("cat dog", "cat dig", 6.0)
