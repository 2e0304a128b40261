"""Tests for hint scoring, eliminations and encouragement messages."""

import pytest

from daily_quiz.core.hint_evaluator import encouragement_for, evaluate, select_eliminations
from daily_quiz.core.models import HintModality, HintOutcome, HintTier

from conftest import make_question


class TestCountTiers:
    """Shake and swipe use count thresholds."""

    @pytest.mark.parametrize(
        "count, tier, eliminated",
        [(0, HintTier.FAIL, 0), (4, HintTier.FAIL, 0), (5, HintTier.WEAK, 1), (10, HintTier.WEAK, 1), (11, HintTier.STRONG, 2)],
    )
    def test_shake_thresholds(self, count, tier, eliminated):
        outcome = evaluate(HintModality.SHAKE, count)
        assert outcome == HintOutcome(tier=tier, eliminate_count=eliminated)

    @pytest.mark.parametrize(
        "count, tier",
        [(9, HintTier.FAIL), (10, HintTier.WEAK), (19, HintTier.WEAK), (20, HintTier.STRONG)],
    )
    def test_swipe_thresholds(self, count, tier):
        assert evaluate(HintModality.SWIPE, count).tier is tier


class TestShoutTiers:
    """Shout uses loud seconds plus the final volume."""

    def test_short_shout_fails(self):
        assert evaluate(HintModality.SHOUT, 4.9, final_volume=150).tier is HintTier.FAIL

    def test_six_seconds_with_quiet_finish_is_weak(self):
        outcome = evaluate(HintModality.SHOUT, 6.0, final_volume=90)
        assert outcome.tier is HintTier.WEAK
        assert outcome.eliminate_count == 1

    def test_long_shout_needs_loud_finish_for_strong(self):
        assert evaluate(HintModality.SHOUT, 10.0, final_volume=119.9).tier is HintTier.WEAK
        assert evaluate(HintModality.SHOUT, 10.0, final_volume=120).tier is HintTier.STRONG


class TestEliminations:
    def test_fail_removes_nothing(self):
        question = make_question()
        assert select_eliminations(question, HintOutcome(HintTier.FAIL, 0)) == []

    def test_strong_removes_first_two_incorrect_in_display_order(self):
        question = make_question(correct="B")
        removed = select_eliminations(question, HintOutcome(HintTier.STRONG, 2))
        assert removed == ["A", "C"]
        assert question.correct_answer not in removed


class TestEncouragement:
    def test_shake_messages(self):
        assert encouragement_for(HintModality.SHAKE, 2) == "💪 Faster!"
        assert encouragement_for(HintModality.SHAKE, 7) == "👍 Good!"
        assert encouragement_for(HintModality.SHAKE, 11) == "🔥 Amazing!"

    def test_shout_messages(self):
        assert encouragement_for(HintModality.SHOUT, 1.0) == "📢 Keep shouting!"
        assert encouragement_for(HintModality.SHOUT, 7.5) == "👍 Good! Keep going!"
        assert encouragement_for(HintModality.SHOUT, 10.0) == "🔥 Amazing!"
