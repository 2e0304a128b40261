"""Business logic tying questions, hints and history together for the UI."""

from __future__ import annotations

from datetime import datetime, timezone
import logging
import time
from typing import Callable

from daily_quiz.constants.quiz_constants import DEFAULT_QUESTION_COUNT
from daily_quiz.core.feedback import FeedbackEvent, FeedbackHub
from daily_quiz.core.hint_challenge import ActiveChallenge, ChallengeState, HintChallenge
from daily_quiz.core.hint_evaluator import evaluate
from daily_quiz.core.models import Category, HintModality, HintOutcome, HintTier, Question, QuizResult
from daily_quiz.core.sensor_sampler import SensorCapabilities
from daily_quiz.core.services.history_store import HistoryStore
from daily_quiz.core.services.question_source import OpenTriviaQuestionSource, QuestionSourceError
from daily_quiz.core.services.quiz_round import QuizRound

logger = logging.getLogger(__name__)

_TIER_FEEDBACK = {
    HintTier.FAIL: FeedbackEvent.HINT_FAILED,
    HintTier.WEAK: FeedbackEvent.HINT_WEAK,
    HintTier.STRONG: FeedbackEvent.HINT_STRONG,
}


class QuizManager:
    """Facade for the quiz screen: QuestionSource, QuizRound, HintChallenge and HistoryStore."""

    def __init__(
        self,
        question_source: OpenTriviaQuestionSource,
        history_store: HistoryStore,
        capabilities: SensorCapabilities,
        feedback: FeedbackHub | None = None,
        clock: Callable[[], float] = time.monotonic,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self._source = question_source
        self._history = history_store
        self._feedback = feedback or FeedbackHub()
        self._now = now or (lambda: datetime.now(timezone.utc))
        self._challenge = HintChallenge(capabilities, clock=clock, on_sample=self._handle_sample)
        self._sample_listener: Callable[[ActiveChallenge], None] | None = None

        self._round: QuizRound | None = None
        self._category: Category | None = None
        self._difficulty: str | None = None
        self._question_count: int = DEFAULT_QUESTION_COUNT
        self._last_result: QuizResult | None = None

    @property
    def feedback(self) -> FeedbackHub:
        return self._feedback

    @property
    def history_store(self) -> HistoryStore:
        return self._history

    # --- Round lifecycle ---

    def fetch_questions(self, category: Category, difficulty: str | None, count: int = DEFAULT_QUESTION_COUNT) -> list[Question]:
        """Fetch questions, retrying once without a difficulty.

        Touches no round state, so the UI may call it from a loader thread and
        hand the result to ``begin_round`` on the GUI thread.
        """
        try:
            return self._source.fetch(category.id, difficulty, count)
        except QuestionSourceError as exc:
            if difficulty is None:
                raise
            logger.warning("Fetch for %s/%s failed (%s); retrying without difficulty", category.name, difficulty, exc)
            return self._source.fetch(category.id, None, count)

    def begin_round(
        self,
        category: Category,
        difficulty: str | None,
        count: int,
        questions: list[Question],
    ) -> QuizRound:
        """Replace the current round with ``questions``, dropping any running hint."""
        self._challenge.abandon()
        self._round = QuizRound(questions)
        self._category = category
        self._difficulty = difficulty
        self._question_count = count
        self._last_result = None
        logger.info("Loaded %d questions for %s (%s)", len(questions), category.name, difficulty or "any")
        return self._round

    def load_round(self, category: Category, difficulty: str | None, count: int = DEFAULT_QUESTION_COUNT) -> QuizRound:
        return self.begin_round(category, difficulty, count, self.fetch_questions(category, difficulty, count))

    def retry_round(self) -> QuizRound:
        if self._category is None:
            raise RuntimeError("No round has been loaded yet.")
        return self.load_round(self._category, self._difficulty, self._question_count)

    def get_round(self) -> QuizRound | None:
        return self._round

    def get_category(self) -> Category | None:
        return self._category

    def get_difficulty(self) -> str | None:
        return self._difficulty

    def get_question_count(self) -> int:
        return self._question_count

    def get_last_result(self) -> QuizResult | None:
        return self._last_result

    def leave_screen(self) -> None:
        """Release any device and reset an unfinished round."""
        self._challenge.abandon()
        if self._round is not None and not self._round.is_finished():
            self._round.reset_progress()

    # --- Answers ---

    def select_answer(self, answer: str) -> bool | None:
        if self._round is None or self._challenge.is_active():
            return None
        is_correct = self._round.select_answer(answer)
        if is_correct is not None:
            self._feedback.emit(FeedbackEvent.ANSWER_CORRECT if is_correct else FeedbackEvent.ANSWER_INCORRECT)
        return is_correct

    def advance_question(self) -> QuizResult | None:
        """Move past the answered question; returns the saved result when the round ends.

        Raises ``HistoryStoreError`` if the result could not be written; the
        result stays available through ``get_last_result``.
        """
        if self._round is None or self._round.selected_answer is None:
            return None
        if self._round.advance():
            return None
        if not self._round.is_finished() or self._last_result is not None:
            return None
        return self._finish_round()

    def _finish_round(self) -> QuizResult:
        if self._round is None or self._category is None:
            raise RuntimeError("No round has been loaded yet.")
        moment = self._now()
        timestamp = int(moment.timestamp() * 1000)
        result = QuizResult(
            id=str(timestamp),
            category=self._category.name,
            category_id=self._category.id,
            difficulty=self._difficulty or "",
            score=self._round.score,
            total=self._round.total,
            percentage=self._round.percentage,
            date=moment.astimezone(timezone.utc).isoformat().replace("+00:00", "Z"),
            timestamp=timestamp,
        )
        self._last_result = result
        self._feedback.emit(FeedbackEvent.ROUND_COMPLETE)
        self._history.append(result)
        return result

    # --- Hints ---

    def can_start_hint(self) -> bool:
        return self._round is not None and self._round.can_start_hint() and not self._challenge.is_active()

    def start_hint(self, modality: HintModality) -> bool:
        """Begin a hint challenge; returns ``False`` when the hint is not available.

        ``MicrophoneUnavailableError`` propagates for a shout that cannot
        record; no hint is consumed in that case.
        """
        if not self.can_start_hint():
            logger.debug("Ignoring %s hint request: hint not available", modality.value)
            return False
        self._challenge.start(modality)
        self._feedback.emit(FeedbackEvent.HINT_STARTED)
        return True

    def tick_hint(self) -> HintOutcome | None:
        """Advance the running challenge by one second and score it on expiry."""
        completed = self._challenge.tick()
        if completed is None or self._round is None:
            return None
        outcome = evaluate(completed.modality, completed.accumulator, completed.final_volume)
        removed = self._round.apply_hint_outcome(outcome)
        logger.info(
            "Hint %s scored %s; removed %s; %d hint(s) left",
            completed.modality.value,
            outcome.tier.name,
            removed,
            self._round.hint_budget,
        )
        self._feedback.emit(_TIER_FEEDBACK[outcome.tier])
        return outcome

    def get_hint_state(self) -> ChallengeState:
        return self._challenge.state

    def is_hint_active(self) -> bool:
        return self._challenge.is_active()

    def set_sample_listener(self, listener: Callable[[ActiveChallenge], None] | None) -> None:
        self._sample_listener = listener

    def _handle_sample(self, state: ActiveChallenge, registered: bool) -> None:
        if registered:
            self._feedback.emit(FeedbackEvent.HINT_PULSE)
        if self._sample_listener is not None:
            self._sample_listener(state)
