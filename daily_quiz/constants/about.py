"""Static metadata describing Daily Quiz."""

APP_NAME = "Daily Quiz"
APP_VERSION = "1.0.0"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Daily Quiz is a trivia reader and quiz game built with Qt. "
    "Questions come from the Open Trivia Database. Stuck on a question? "
    "Shake, swipe or shout your way to a hint."
)

HELP_TEXT = (
    "Pick a difficulty and a category on the Home tab to start a round.\n\n"
    "Each round gives you 3 hints. A hint is a short challenge:\n"
    "  Shake: shake the device as often as you can for 3 seconds.\n"
    "  Swipe: swipe back and forth across the pad for 3 seconds.\n"
    "  Shout: keep the microphone loud for 10 seconds.\n\n"
    "A good effort removes one wrong answer, a great one removes two. "
    "You can use one hint per question, before answering."
)
