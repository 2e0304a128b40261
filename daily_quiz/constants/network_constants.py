"""Network configuration constants for the quiz application."""

OPEN_TRIVIA_API_URL: str = "https://opentdb.com/api.php"
QUESTION_TYPE: str = "multiple"
REQUEST_TIMEOUT_SECONDS: float = 10.0
FETCH_MIN_INTERVAL_SECONDS: float = 7.0
