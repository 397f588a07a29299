"""Ballot: raw vote counts plus the subscribers told about each vote.

Counts are keyed by candidate name. Each candidate has its own lock, so
votes for different candidates never wait on each other, and subscribers
are notified after that lock is released.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, List

from .models import Candidate

logger = logging.getLogger(__name__)

Observer = Callable[[str], None]


def log_observer(message: str) -> None:
    """Stock subscriber: write each ballot update to the log."""
    logger.info(f"Ballot Update: {message}")


class Ballot:
    def __init__(self):
        self._votes: Dict[str, int] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()
        self._observers: List[Observer] = []

    def subscribe(self, observer: Observer) -> None:
        """Register a callback taking one string message."""
        self._observers.append(observer)

    def _lock_for(self, name: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(name)
            if lock is None:
                lock = self._locks[name] = threading.Lock()
            return lock

    def add_vote(self, candidate: Candidate) -> int:
        """Count one vote for `candidate`, then notify subscribers in order.

        Returns the new count. A subscriber that raises propagates to the
        caller; the vote stays counted.
        """
        with self._lock_for(candidate.name):
            count = self._votes.get(candidate.name, 0) + 1
            self._votes[candidate.name] = count
        logger.info(f"Recorded vote for {candidate.name!r}")
        self._notify(f"Vote added for candidate: {candidate.name}")
        return count

    def _notify(self, message: str) -> None:
        for observer in list(self._observers):
            try:
                observer(message)
            except Exception:
                logger.exception(f"Ballot subscriber {observer!r} failed")
                raise

    def get_votes(self, candidate: Candidate) -> int:
        return self._votes.get(candidate.name, 0)
