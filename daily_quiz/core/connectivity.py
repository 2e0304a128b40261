"""Maps the platform's reachability report to the online/offline state the home screen uses."""

from __future__ import annotations

OFFLINE_REACHABILITY = "Disconnected"


def is_online(reachability: str | None) -> bool:
    """Return ``False`` only when the platform positively reports no connection.

    ``None`` (no reachability backend) and ``"Unknown"`` count as online so a
    missing backend never locks the user out of starting a quiz.
    """
    return reachability != OFFLINE_REACHABILITY
