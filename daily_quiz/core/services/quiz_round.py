"""Service holding the state of the round being played."""

from __future__ import annotations

import math

from daily_quiz.constants.hint_constants import HINT_BUDGET_PER_ROUND
from daily_quiz.core.hint_evaluator import select_eliminations
from daily_quiz.core.models import HintOutcome, Question


def percentage_of(correct: int, total: int) -> int:
    """Whole percentage with halves rounded up."""
    if total <= 0:
        return 0
    return int(math.floor(correct * 100 / total + 0.5))


class QuizRound:
    """Questions, score, selection and hint budget for one round."""

    def __init__(self, questions: list[Question], hint_budget: int = HINT_BUDGET_PER_ROUND) -> None:
        if not questions:
            raise ValueError("A round must contain at least one question.")
        self._questions: list[Question] = list(questions)
        self._initial_hint_budget = hint_budget
        self._current_index: int = 0
        self._score: int = 0
        self._selected_answer: str | None = None
        self._eliminated_answers: list[str] = []
        self._hint_budget: int = hint_budget
        self._finished: bool = False

    @property
    def questions(self) -> list[Question]:
        return list(self._questions)

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def current_question(self) -> Question:
        return self._questions[self._current_index]

    @property
    def total(self) -> int:
        return len(self._questions)

    @property
    def score(self) -> int:
        return self._score

    @property
    def selected_answer(self) -> str | None:
        return self._selected_answer

    @property
    def eliminated_answers(self) -> list[str]:
        return list(self._eliminated_answers)

    @property
    def hint_budget(self) -> int:
        return self._hint_budget

    @property
    def percentage(self) -> int:
        return percentage_of(self._score, len(self._questions))

    def is_finished(self) -> bool:
        return self._finished

    def is_last_question(self) -> bool:
        return self._current_index >= len(self._questions) - 1

    def can_start_hint(self) -> bool:
        return (
            not self._finished
            and self._hint_budget > 0
            and self._selected_answer is None
            and not self._eliminated_answers
        )

    def is_answer_enabled(self, answer: str) -> bool:
        if self._finished or self._selected_answer is not None:
            return False
        return answer not in self._eliminated_answers

    def select_answer(self, answer: str) -> bool | None:
        """Record the first pick for the current question.

        Returns whether the pick was correct, or ``None`` when the answer is
        locked (already picked, eliminated or not an option).
        """
        question = self.current_question
        if answer not in question.answers or not self.is_answer_enabled(answer):
            return None
        self._selected_answer = answer
        is_correct = answer == question.correct_answer
        if is_correct:
            self._score += 1
        return is_correct

    def apply_hint_outcome(self, outcome: HintOutcome) -> list[str]:
        """Consume one hint and disable incorrect answers for the outcome."""
        self._hint_budget = max(0, self._hint_budget - 1)
        removed = select_eliminations(self.current_question, outcome)
        if removed:
            self._eliminated_answers = removed
        return list(removed)

    def advance(self) -> bool:
        """Move to the next question; returns ``False`` once the round is over."""
        if self._finished:
            return False
        if self.is_last_question():
            self._finished = True
            return False
        self._current_index += 1
        self._reset_question_state()
        return True

    def reset_progress(self) -> None:
        """Start the round over with the same questions."""
        self._current_index = 0
        self._score = 0
        self._hint_budget = self._initial_hint_budget
        self._finished = False
        self._reset_question_state()

    def _reset_question_state(self) -> None:
        self._selected_answer = None
        self._eliminated_answers = []
