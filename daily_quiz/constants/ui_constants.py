"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Daily Quiz"
HOME_HEADER: str = "Daily Quiz"
HISTORY_HEADER: str = "Quiz History"
READER_HEADER: str = "Reader"

TAB_HOME: str = "Home"
TAB_HISTORY: str = "History"
TAB_READER: str = "Reader"

DIFFICULTY_LABEL: str = "Difficulty"
CATEGORY_LABEL: str = "Choose a category"
LOADING_TEMPLATE: str = "Loading {difficulty} questions..."
QUESTION_HEADER_TEMPLATE: str = "Question {number} of {total} • {difficulty} • Score: {score}"
HINTS_REMAINING_TEMPLATE: str = "💡 Hints remaining: {count}"

HINT_BUTTON_SHAKE: str = "📱 Shake"
HINT_BUTTON_SWIPE: str = "👆 Swipe"
HINT_BUTTON_SHOUT: str = "🎤 Shout"
HINT_PROMPT_SHAKE: str = "Shake the device!"
HINT_PROMPT_SWIPE: str = "Swipe back and forth!"
HINT_PROMPT_SHOUT: str = "Shout into the microphone!"
HINT_COUNT_TEMPLATE: str = "{count} times"
HINT_LOUD_TEMPLATE: str = "Loud for {seconds:.1f}s (volume {volume:.0f})"
HINT_SECONDS_TEMPLATE: str = "{seconds} seconds left"
HINT_RESULT_FAIL: str = "Not enough! No options removed."
HINT_RESULT_WEAK: str = "Nice! One wrong answer removed."
HINT_RESULT_STRONG: str = "Amazing! Two wrong answers removed."
SWIPE_PAD_PROMPT: str = "Swipe here"

RESULT_HEADER: str = "Quiz Complete!"
RESULT_SCORE_TEMPLATE: str = "{score} / {total}  ({percentage}%)"
RESULT_RETRY_BUTTON: str = "Try Again"
RESULT_BACK_BUTTON: str = "Back to Categories"

HISTORY_EMPTY_MESSAGE: str = "No quiz history yet"
HISTORY_CLEAR_BUTTON: str = "Clear All History"
HISTORY_STATS_TEMPLATE: str = (
    "Quizzes: {total_quizzes}   Questions: {total_questions}   "
    "Correct: {total_correct}   Average: {average_score}%"
)

READER_URL_PLACEHOLDER: str = "https://example.com/article"
READER_LOAD_BUTTON: str = "Read"

LOAD_FAILED_MESSAGE: str = "Failed to load quiz. Please check your connection and try again."
MICROPHONE_REQUIRED_TITLE: str = "Microphone permission required"

OFFLINE_BANNER: str = "📡 You're offline. Quizzes cannot be started."
OFFLINE_TITLE: str = "Offline"
OFFLINE_MESSAGE: str = "Please connect to the internet to start a quiz."
