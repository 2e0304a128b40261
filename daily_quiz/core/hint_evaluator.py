"""Scoring rules that turn a finished hint challenge into an outcome."""

from __future__ import annotations

from daily_quiz.constants.hint_constants import (
    LOUD_VOLUME_THRESHOLD,
    SHAKE_STRONG_MIN,
    SHAKE_WEAK_MIN,
    SHOUT_STRONG_MIN_SECONDS,
    SHOUT_WEAK_MIN_SECONDS,
    SWIPE_STRONG_MIN,
    SWIPE_WEAK_MIN,
)
from daily_quiz.core.models import HintModality, HintOutcome, HintTier, Question

_ELIMINATE_COUNTS = {
    HintTier.FAIL: 0,
    HintTier.WEAK: 1,
    HintTier.STRONG: 2,
}

_ENCOURAGEMENT = {
    HintModality.SHAKE: ((SHAKE_WEAK_MIN, "💪 Faster!"), (SHAKE_STRONG_MIN, "👍 Good!")),
    HintModality.SWIPE: ((SWIPE_WEAK_MIN, "💪 Faster!"), (SWIPE_STRONG_MIN, "👍 Good!")),
    HintModality.SHOUT: (
        (SHOUT_WEAK_MIN_SECONDS, "📢 Keep shouting!"),
        (SHOUT_STRONG_MIN_SECONDS, "👍 Good! Keep going!"),
    ),
}


def evaluate(modality: HintModality, accumulator: float, final_volume: float = 0.0) -> HintOutcome:
    """Compute the tier for a completed challenge.

    ``accumulator`` is the shake or swipe count, or the loud duration in
    seconds for a shout. ``final_volume`` only matters for shouts: a full
    loud window still scores Weak unless the last sample was loud too.
    """
    tier = _tier_for(modality, accumulator, final_volume)
    return HintOutcome(tier=tier, eliminate_count=_ELIMINATE_COUNTS[tier])


def _tier_for(modality: HintModality, accumulator: float, final_volume: float) -> HintTier:
    if modality is HintModality.SHAKE:
        return _count_tier(accumulator, SHAKE_WEAK_MIN, SHAKE_STRONG_MIN)
    if modality is HintModality.SWIPE:
        return _count_tier(accumulator, SWIPE_WEAK_MIN, SWIPE_STRONG_MIN)
    if accumulator < SHOUT_WEAK_MIN_SECONDS:
        return HintTier.FAIL
    if accumulator >= SHOUT_STRONG_MIN_SECONDS and final_volume >= LOUD_VOLUME_THRESHOLD:
        return HintTier.STRONG
    return HintTier.WEAK


def _count_tier(count: float, weak_min: int, strong_min: int) -> HintTier:
    if count < weak_min:
        return HintTier.FAIL
    if count < strong_min:
        return HintTier.WEAK
    return HintTier.STRONG


def select_eliminations(question: Question, outcome: HintOutcome) -> list[str]:
    """Pick the incorrect answers to disable, in display order."""
    if outcome.eliminate_count <= 0:
        return []
    return question.incorrect_answers[: outcome.eliminate_count]


def encouragement_for(modality: HintModality, accumulator: float) -> str:
    """Progress message shown while a challenge is running."""
    for limit, message in _ENCOURAGEMENT[modality]:
        if accumulator < limit:
            return message
    return "🔥 Amazing!"
