"""Voter and candidate registries.

Both registries are keyed by name and keep insertion order, so listing is
deterministic and the candidate order drives the results report. A second
registration under an existing name raises DuplicateRegistrationError.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional

from .errors import DuplicateRegistrationError
from .models import Candidate, Voter

logger = logging.getLogger(__name__)


def _require_name(name: str) -> None:
    if not isinstance(name, str) or not name.strip():
        raise ValueError("name must be a non-empty string")


class VoterRegistry:
    def __init__(self):
        self._voters: Dict[str, Voter] = {}
        self._lock = threading.Lock()

    def register(self, name: str, credential: str) -> Voter:
        """Create a voter with has_voted=False and store it under `name`."""
        _require_name(name)
        if not isinstance(credential, str):
            raise TypeError("credential must be a string")
        with self._lock:
            if name in self._voters:
                logger.warning(f"Voter {name!r} already registered")
                raise DuplicateRegistrationError("voter", name)
            voter = Voter(name, credential)
            self._voters[name] = voter
        logger.info(f"Registered voter {name!r}")
        return voter

    def lookup(self, name: str) -> Optional[Voter]:
        return self._voters.get(name)

    def list(self) -> List[Voter]:
        return list(self._voters.values())

    def __contains__(self, name) -> bool:
        return name in self._voters

    def __len__(self) -> int:
        return len(self._voters)


class CandidateRegistry:
    def __init__(self):
        self._candidates: Dict[str, Candidate] = {}
        self._lock = threading.Lock()

    def add(self, name: str, affiliation: str) -> Candidate:
        """Append a candidate; its obfuscated tally stays unset until a report."""
        _require_name(name)
        if not isinstance(affiliation, str):
            raise TypeError("affiliation must be a string")
        with self._lock:
            if name in self._candidates:
                logger.warning(f"Candidate {name!r} already registered")
                raise DuplicateRegistrationError("candidate", name)
            candidate = Candidate(name, affiliation)
            self._candidates[name] = candidate
        logger.info(f"Added candidate {name!r} ({affiliation})")
        return candidate

    def lookup(self, name: str) -> Optional[Candidate]:
        return self._candidates.get(name)

    def list(self) -> List[Candidate]:
        """Candidates in insertion order."""
        return list(self._candidates.values())

    def __contains__(self, name) -> bool:
        return name in self._candidates

    def __len__(self) -> int:
        return len(self._candidates)
