"""Numbered request tokens for discarding results of superseded background loads."""

from __future__ import annotations


class RequestSequence:
    """Hands out increasing tokens; only the most recent one is current.

    Used on the GUI thread only: a loader thread carries its token and the
    slot receiving the result checks ``is_current`` before applying it.
    """

    def __init__(self) -> None:
        self._latest = 0

    def next(self) -> int:
        self._latest += 1
        return self._latest

    def invalidate(self) -> None:
        """Make every outstanding token stale."""
        self._latest += 1

    def is_current(self, token: int) -> bool:
        return token == self._latest
