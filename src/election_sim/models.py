"""Entities held by the registries and rows produced by a results report."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional


class Voter:
    """A registered (or claimed) voter

    Attributes
    - name: unique key within a VoterRegistry, compared case-sensitively
    - credential: opaque secret, compared by exact match
    - has_voted: starts False and only ever flips to True, via check_and_mark

    All three are read-only.
    """

    def __init__(self, name: str, credential: str):
        self._name = name
        self._credential = credential
        self._has_voted = False
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def credential(self) -> str:
        return self._credential

    @property
    def has_voted(self) -> bool:
        return self._has_voted

    def check_and_mark(self, credential: str, matches) -> bool:
        """Atomically verify `credential` with `matches` and mark the voter.

        `matches(stored, presented)` decides whether the credential is
        acceptable. Nothing is mutated unless it returns True and the voter
        has not voted yet.
        """
        with self._lock:
            if self._has_voted or not matches(self._credential, credential):
                return False
            self._has_voted = True
            return True

    def __repr__(self) -> str:
        return f"Voter(name={self._name!r}, has_voted={self._has_voted})"


class Candidate:
    """A candidate standing in the election

    Attributes
    - name: unique key within a CandidateRegistry (read-only)
    - affiliation: party or group label (read-only)
    - obfuscated_tally: last value computed by a results report, None before
    """

    def __init__(self, name: str, affiliation: str):
        self._name = name
        self._affiliation = affiliation
        self.obfuscated_tally: Optional[str] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def affiliation(self) -> str:
        return self._affiliation

    def __repr__(self) -> str:
        return (
            f"Candidate(name={self._name!r}, affiliation={self._affiliation!r}, "
            f"obfuscated_tally={self.obfuscated_tally!r})"
        )


@dataclass(frozen=True)
class ResultRow:
    """One line of a results report."""

    candidate_name: str
    affiliation: str
    obfuscated_tally: str

    def to_dict(self):
        return {
            "candidate": self.candidate_name,
            "affiliation": self.affiliation,
            "tally": self.obfuscated_tally,
        }
