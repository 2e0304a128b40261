"""Quiz-related constants shared across UI and core layers."""

from daily_quiz.core.models import Category

DEFAULT_QUESTION_COUNT: int = 10
QUESTION_COUNT_CHOICES: tuple[int, ...] = (5, 10, 15)
DEFAULT_DIFFICULTY: str = "medium"
DIFFICULTIES: tuple[str, ...] = ("easy", "medium", "hard")
DIFFICULTY_EMOJI: dict[str, str] = {"easy": "😊", "medium": "🤔", "hard": "🔥"}
ANSWER_REVEAL_DELAY_MS: int = 1000

HISTORY_MAX_ENTRIES: int = 50
HISTORY_RECENT_TREND_SIZE: int = 10

CATEGORIES: tuple[Category, ...] = (
    Category(id=9, name="General Knowledge", icon="🎯", color="#FF6B6B"),
    Category(id=17, name="Science & Nature", icon="🔬", color="#4ECDC4"),
    Category(id=23, name="History", icon="📚", color="#45B7D1"),
    Category(id=21, name="Sports", icon="⚽", color="#FFA07A"),
    Category(id=11, name="Film", icon="🎬", color="#98D8C8"),
    Category(id=22, name="Geography", icon="🌍", color="#6C5CE7"),
)

# Minimum percentage for each result message, highest first.
RESULT_MESSAGES: tuple[tuple[int, str], ...] = (
    (80, "Excellent!"),
    (60, "Great Job!"),
    (40, "Good Effort!"),
    (0, "Keep Learning!"),
)

SOUND_FILES: dict[str, str] = {
    "correct": "correct.wav",
    "incorrect": "incorrect.wav",
    "tap": "tap.wav",
    "complete": "complete.wav",
    "hint_1": "hint_1.wav",
    "hint_2": "hint_2.wav",
}
