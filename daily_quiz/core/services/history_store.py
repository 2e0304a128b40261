"""JSON-file persistence for finished round results."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from daily_quiz.constants.quiz_constants import HISTORY_MAX_ENTRIES
from daily_quiz.core.models import QuizResult

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_PATH = Path.home() / ".daily_quiz" / "history.json"


class HistoryStoreError(Exception):
    """Raised when the history file cannot be written."""


class HistoryStore:
    """Keeps the most recent results, newest first."""

    def __init__(self, file_path: Path | None = None, max_entries: int = HISTORY_MAX_ENTRIES) -> None:
        self._file_path = (file_path or DEFAULT_HISTORY_PATH).resolve()
        self._max_entries = max_entries

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load(self) -> list[QuizResult]:
        if not self._file_path.exists():
            return []
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            return [QuizResult.from_dict(entry) for entry in raw]
        except (OSError, ValueError, KeyError, TypeError) as exc:
            logger.warning("Ignoring unreadable history file %s: %s", self._file_path, exc)
            return []

    def append(self, result: QuizResult) -> list[QuizResult]:
        """Insert ``result`` as the newest entry, evicting the oldest beyond the cap."""
        history = self.load()
        history.insert(0, result)
        del history[self._max_entries:]
        self._write(history)
        logger.info("Saved result %s/%s for %s", result.score, result.total, result.category)
        return history

    def clear(self) -> None:
        try:
            self._file_path.unlink(missing_ok=True)
        except OSError as exc:
            raise HistoryStoreError(f"Could not clear history: {exc}") from exc

    def _write(self, history: list[QuizResult]) -> None:
        document = json.dumps([entry.to_dict() for entry in history], indent=2)
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(document, encoding="utf-8")
        except OSError as exc:
            raise HistoryStoreError(f"Could not save history: {exc}") from exc
