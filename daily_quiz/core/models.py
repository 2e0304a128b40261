"""Domain models for the quiz application."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum, auto


class HintModality(Enum):
    """Physical interaction channel used to earn a hint."""

    SHAKE = "shake"
    SWIPE = "swipe"
    SHOUT = "shout"


class HintTier(Enum):
    """Outcome bucket of a completed hint challenge."""

    FAIL = auto()
    WEAK = auto()
    STRONG = auto()


@dataclass(frozen=True, slots=True)
class Category:
    """Open Trivia DB category offered on the home screen."""

    id: int
    name: str
    icon: str
    color: str


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question with four answers in display order."""

    text: str
    correct_answer: str
    answers: tuple[str, ...]
    difficulty_label: str

    @property
    def incorrect_answers(self) -> list[str]:
        return [answer for answer in self.answers if answer != self.correct_answer]


@dataclass(frozen=True, slots=True)
class HintOutcome:
    """Tier and elimination count computed when a challenge times out."""

    tier: HintTier
    eliminate_count: int


@dataclass(slots=True)
class QuizResult:
    """Summary of a finished round as stored in the history."""

    id: str
    category: str
    category_id: int
    difficulty: str
    score: int
    total: int
    percentage: int
    date: str  # ISO-8601, UTC
    timestamp: int  # milliseconds since the epoch

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: dict) -> "QuizResult":
        return cls(
            id=str(payload["id"]),
            category=str(payload["category"]),
            category_id=int(payload.get("category_id", 0)),
            difficulty=str(payload.get("difficulty") or ""),
            score=int(payload["score"]),
            total=int(payload["total"]),
            percentage=int(payload["percentage"]),
            date=str(payload["date"]),
            timestamp=int(payload.get("timestamp", 0)),
        )
