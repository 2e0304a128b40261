"""Tests for user settings validation and the feedback hub."""

import logging

import pytest

from daily_quiz.core.feedback import FeedbackEvent, FeedbackHub
from daily_quiz.core.settings import AppSettings


class TestAppSettings:
    def test_defaults(self):
        settings = AppSettings()
        assert settings.default_difficulty == "medium"
        assert settings.questions_per_quiz == 10
        assert settings.sound_enabled is True

    @pytest.mark.parametrize(
        "overrides",
        [{"default_difficulty": "extreme"}, {"questions_per_quiz": 7}, {"text_size": 40}],
    )
    def test_invalid_values_are_rejected(self, overrides):
        with pytest.raises(ValueError):
            AppSettings(**overrides)


class TestFeedbackHub:
    def test_listeners_receive_events_in_order(self):
        hub = FeedbackHub()
        received = []
        hub.subscribe(received.append)
        hub.emit(FeedbackEvent.HINT_STARTED)
        hub.emit(FeedbackEvent.ANSWER_CORRECT)
        assert received == [FeedbackEvent.HINT_STARTED, FeedbackEvent.ANSWER_CORRECT]

    def test_failing_listener_does_not_block_others(self, caplog):
        hub = FeedbackHub()
        received = []

        def broken(event):
            raise RuntimeError("speaker missing")

        hub.subscribe(broken)
        hub.subscribe(received.append)
        with caplog.at_level(logging.ERROR):
            hub.emit(FeedbackEvent.ROUND_COMPLETE)
        assert received == [FeedbackEvent.ROUND_COMPLETE]
        assert "Feedback listener failed" in caplog.text

    def test_unsubscribe(self):
        hub = FeedbackHub()
        received = []
        hub.subscribe(received.append)
        hub.unsubscribe(received.append)
        hub.emit(FeedbackEvent.HINT_PULSE)
        assert received == []
