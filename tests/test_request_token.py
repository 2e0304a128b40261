"""Tests for the tokens that let loader slots discard superseded results."""

from daily_quiz.core.request_token import RequestSequence


class TestRequestSequence:
    def test_only_latest_token_is_current(self):
        requests = RequestSequence()
        first = requests.next()
        second = requests.next()
        assert not requests.is_current(first)
        assert requests.is_current(second)

    def test_invalidate_makes_outstanding_token_stale(self):
        requests = RequestSequence()
        token = requests.next()
        requests.invalidate()
        assert not requests.is_current(token)

    def test_late_result_of_abandoned_load_is_dropped(self):
        """A slow first load finishing after a second request must not be applied."""
        requests = RequestSequence()
        applied = []

        def deliver(token, payload):
            if requests.is_current(token):
                applied.append(payload)

        slow = requests.next()
        fast = requests.next()
        deliver(fast, "second")
        deliver(slow, "first")
        assert applied == ["second"]
