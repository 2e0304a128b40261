"""Question source backed by the Open Trivia Database HTTP API."""

from __future__ import annotations

import html
import logging
import random
from threading import Lock
import time
from typing import Callable

from pydantic import BaseModel, ValidationError
import requests

from daily_quiz.constants.network_constants import (
    FETCH_MIN_INTERVAL_SECONDS,
    OPEN_TRIVIA_API_URL,
    QUESTION_TYPE,
    REQUEST_TIMEOUT_SECONDS,
)
from daily_quiz.core.models import Question

logger = logging.getLogger(__name__)

# Open Trivia DB response codes.
_RESPONSE_SUCCESS = 0
_RESPONSE_NO_RESULTS = 1


class QuestionSourceError(Exception):
    """Raised when questions cannot be supplied for a round."""


class NetworkError(QuestionSourceError):
    """Transport failure, HTTP error or unusable payload."""


class EmptyResultError(QuestionSourceError):
    """The API returned no questions for the requested filters."""


class OpenTriviaItem(BaseModel):
    category: str = ""
    type: str = QUESTION_TYPE
    difficulty: str = ""
    question: str
    correct_answer: str
    incorrect_answers: list[str]


class OpenTriviaResponse(BaseModel):
    response_code: int
    results: list[OpenTriviaItem] = []


class RateLimiter:
    """Enforces a minimum interval between consecutive acquisitions.

    Safe to share between loader threads: callers queue on a lock, so each one
    waits out the interval measured from when the previous caller went through.
    """

    def __init__(
        self,
        min_interval_seconds: float = FETCH_MIN_INTERVAL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._min_interval = min_interval_seconds
        self._clock = clock
        self._sleep = sleep
        self._last_acquired: float | None = None
        self._lock = Lock()

    def acquire(self) -> float:
        """Wait out the remaining interval, if any, and return the time waited."""
        with self._lock:
            waited = 0.0
            if self._last_acquired is not None:
                remaining = self._min_interval - (self._clock() - self._last_acquired)
                if remaining > 0:
                    logger.debug("Waiting %.0f ms to avoid the API rate limit", remaining * 1000)
                    self._sleep(remaining)
                    waited = remaining
            self._last_acquired = self._clock()
            return waited


class OpenTriviaQuestionSource:
    """Fetches and prepares multiple-choice questions for a round."""

    def __init__(
        self,
        session: requests.Session | None = None,
        rate_limiter: RateLimiter | None = None,
        rng: random.Random | None = None,
        base_url: str = OPEN_TRIVIA_API_URL,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ) -> None:
        self._session = session or requests.Session()
        self._rate_limiter = rate_limiter or RateLimiter()
        self._rng = rng or random.Random()
        self._base_url = base_url
        self._timeout = timeout

    def fetch(self, category_id: int, difficulty: str | None, count: int) -> list[Question]:
        """Return ``count`` shuffled questions; ``difficulty=None`` means any."""
        params: dict[str, str | int] = {
            "amount": count,
            "category": category_id,
            "type": QUESTION_TYPE,
        }
        if difficulty:
            params["difficulty"] = difficulty

        self._rate_limiter.acquire()
        logger.info("Fetching %s questions for category %s", difficulty or "any", category_id)
        try:
            response = self._session.get(self._base_url, params=params, timeout=self._timeout)
            response.raise_for_status()
            payload = OpenTriviaResponse.model_validate(response.json())
        except requests.RequestException as exc:
            raise NetworkError(f"Could not reach the question server: {exc}") from exc
        except (ValueError, ValidationError) as exc:
            raise NetworkError("The question server sent an unexpected response.") from exc

        if payload.response_code == _RESPONSE_NO_RESULTS:
            raise EmptyResultError("No questions available for this selection.")
        if payload.response_code != _RESPONSE_SUCCESS:
            raise NetworkError(f"The question server refused the request (code {payload.response_code}).")

        questions = [q for q in (self._to_question(item) for item in payload.results) if q is not None]
        if not questions:
            raise EmptyResultError("No questions available for this selection.")
        return questions

    def _to_question(self, item: OpenTriviaItem) -> Question | None:
        correct = decode_html(item.correct_answer)
        answers = [decode_html(answer) for answer in item.incorrect_answers] + [correct]
        if len(answers) != 4 or len(set(answers)) != 4:
            logger.warning("Skipping malformed question: %r", item.question)
            return None
        self._rng.shuffle(answers)
        return Question(
            text=decode_html(item.question),
            correct_answer=correct,
            answers=tuple(answers),
            difficulty_label=item.difficulty,
        )


def decode_html(text: str) -> str:
    """Decode HTML entities; non-breaking spaces become plain spaces."""
    return html.unescape(text).replace("\xa0", " ")
