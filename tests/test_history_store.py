"""Tests for the JSON history store."""

import json

import pytest

from daily_quiz.core.models import QuizResult
from daily_quiz.core.services.history_store import HistoryStore, HistoryStoreError


def _result(index, score=5, total=10, category="History"):
    return QuizResult(
        id=str(1_700_000_000_000 + index),
        category=category,
        category_id=23,
        difficulty="medium",
        score=score,
        total=total,
        percentage=score * 100 // total,
        date="2026-01-01T00:00:00Z",
        timestamp=1_700_000_000_000 + index,
    )


class TestHistoryStore:
    def test_missing_file_loads_empty(self, tmp_path):
        assert HistoryStore(tmp_path / "history.json").load() == []

    def test_append_puts_newest_first_and_persists(self, tmp_path):
        path = tmp_path / "nested" / "history.json"
        store = HistoryStore(path)
        store.append(_result(1))
        store.append(_result(2))

        reloaded = HistoryStore(path).load()
        assert [entry.id for entry in reloaded] == [_result(2).id, _result(1).id]
        assert json.loads(path.read_text(encoding="utf-8"))[0]["category_id"] == 23

    def test_fifty_first_entry_evicts_oldest(self, tmp_path):
        store = HistoryStore(tmp_path / "history.json")
        for index in range(51):
            history = store.append(_result(index))
        assert len(history) == 50
        assert history[0].id == _result(50).id
        assert _result(0).id not in {entry.id for entry in store.load()}

    def test_corrupt_file_is_treated_as_empty(self, tmp_path):
        path = tmp_path / "history.json"
        path.write_text("{not json", encoding="utf-8")
        store = HistoryStore(path)
        assert store.load() == []
        assert len(store.append(_result(1))) == 1

    def test_clear_removes_everything(self, tmp_path):
        store = HistoryStore(tmp_path / "history.json")
        store.append(_result(1))
        store.clear()
        assert store.load() == []
        store.clear()

    def test_unwritable_location_raises(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = HistoryStore(blocker / "history.json")
        with pytest.raises(HistoryStoreError):
            store.append(_result(1))

    def test_entries_without_optional_fields_load(self, tmp_path):
        path = tmp_path / "history.json"
        path.write_text(
            json.dumps([{"id": 1, "category": "Film", "score": 3, "total": 5, "percentage": 60, "date": "2026-01-01T00:00:00Z"}]),
            encoding="utf-8",
        )
        entry = HistoryStore(path).load()[0]
        assert entry.id == "1"
        assert entry.difficulty == ""
        assert entry.timestamp == 0
