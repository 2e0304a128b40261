"""User preferences edited from the settings dialog."""

from __future__ import annotations

from dataclasses import dataclass

from daily_quiz.constants.quiz_constants import (
    DEFAULT_DIFFICULTY,
    DEFAULT_QUESTION_COUNT,
    DIFFICULTIES,
    QUESTION_COUNT_CHOICES,
)


@dataclass(slots=True)
class AppSettings:
    """Runtime preferences; kept in memory for the lifetime of the app."""

    default_difficulty: str = DEFAULT_DIFFICULTY
    questions_per_quiz: int = DEFAULT_QUESTION_COUNT
    sound_enabled: bool = True
    text_size: int = 18

    def __post_init__(self) -> None:
        if self.default_difficulty not in DIFFICULTIES:
            raise ValueError(f"Unknown difficulty: {self.default_difficulty}")
        if self.questions_per_quiz not in QUESTION_COUNT_CHOICES:
            raise ValueError("Questions per quiz must be one of 5, 10 or 15.")
        if not 10 <= self.text_size <= 32:
            raise ValueError("Text size must be between 10 and 32.")
