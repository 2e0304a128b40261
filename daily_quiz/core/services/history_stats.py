"""Service for summarizing quiz history into statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from daily_quiz.constants.quiz_constants import HISTORY_RECENT_TREND_SIZE, RESULT_MESSAGES
from daily_quiz.core.models import QuizResult
from daily_quiz.core.services.quiz_round import percentage_of


@dataclass(slots=True)
class CategoryEntry:
    """Mutable per-category tally used internally."""

    category: str
    correct_answers: int = 0
    total_answers: int = 0
    quiz_count: int = 0


@dataclass(slots=True)
class CategoryRow:
    """Immutable snapshot returned to consumers."""

    category: str
    percentage: int
    count: int


@dataclass(slots=True)
class HistorySummary:
    total_quizzes: int = 0
    total_questions: int = 0
    total_correct: int = 0
    average_score: int = 0
    recent_percentages: list[int] = field(default_factory=list)
    categories: list[CategoryRow] = field(default_factory=list)


def summarize_history(history: list[QuizResult]) -> HistorySummary:
    """Aggregate a newest-first history list."""
    if not history:
        return HistorySummary()

    total_questions = sum(entry.total for entry in history)
    total_correct = sum(entry.score for entry in history)

    tallies: dict[str, CategoryEntry] = {}
    for entry in history:
        tally = tallies.get(entry.category)
        if tally is None:
            tally = CategoryEntry(category=entry.category)
            tallies[entry.category] = tally
        tally.total_answers += entry.total
        tally.correct_answers += entry.score
        tally.quiz_count += 1

    return HistorySummary(
        total_quizzes=len(history),
        total_questions=total_questions,
        total_correct=total_correct,
        average_score=percentage_of(total_correct, total_questions),
        # Oldest first so the trend reads left to right.
        recent_percentages=[entry.percentage for entry in reversed(history[:HISTORY_RECENT_TREND_SIZE])],
        categories=[
            CategoryRow(
                category=tally.category,
                percentage=percentage_of(tally.correct_answers, tally.total_answers),
                count=tally.quiz_count,
            )
            for tally in tallies.values()
        ],
    )


def result_message(percentage: int) -> str:
    for minimum, message in RESULT_MESSAGES:
        if percentage >= minimum:
            return message
    return RESULT_MESSAGES[-1][1]


def format_relative_date(iso_string: str, now: datetime | None = None) -> str:
    """Render an ISO timestamp as "5 mins ago", "3 hours ago" and so on."""
    moment = datetime.fromisoformat(iso_string.replace("Z", "+00:00"))
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    elapsed = (now - moment).total_seconds()
    minutes = int(elapsed // 60)
    hours = int(elapsed // 3600)
    days = int(elapsed // 86400)

    if minutes < 60:
        return f"{minutes} min{'' if minutes == 1 else 's'} ago"
    if hours < 24:
        return f"{hours} hour{'' if hours == 1 else 's'} ago"
    if days < 7:
        return f"{days} day{'' if days == 1 else 's'} ago"
    return moment.astimezone().strftime("%Y-%m-%d")
