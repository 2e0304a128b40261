"""Thresholds and windows for the shake, swipe and shout hint challenges."""

HINT_BUDGET_PER_ROUND: int = 3
HINT_TICK_INTERVAL_MS: int = 1000

SHAKE_WINDOW_SECONDS: int = 3
SWIPE_WINDOW_SECONDS: int = 3
SHOUT_WINDOW_SECONDS: int = 10

SHAKE_SAMPLE_INTERVAL_MS: int = 100
SHAKE_MAGNITUDE_THRESHOLD: float = 2.5
SHAKE_DEBOUNCE_MS: int = 100

SWIPE_DISTANCE_THRESHOLD: float = 130.0

SHOUT_METERING_INTERVAL_MS: int = 100
METERING_FLOOR_DB: float = 160.0
LOUD_VOLUME_THRESHOLD: float = 120.0

SHAKE_WEAK_MIN: int = 5
SHAKE_STRONG_MIN: int = 11
SWIPE_WEAK_MIN: int = 10
SWIPE_STRONG_MIN: int = 20
SHOUT_WEAK_MIN_SECONDS: float = 5.0
SHOUT_STRONG_MIN_SECONDS: float = 10.0
