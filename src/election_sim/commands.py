"""Commands executed by the election service."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from .auth import AuthenticationGate
from .ballot import Ballot
from .models import Candidate, Voter
from .registry import VoterRegistry

logger = logging.getLogger(__name__)


class Command(Protocol):
    def execute(self) -> bool:
        ...


@dataclass(frozen=True)
class CastVoteCommand:
    """Cast one vote: authenticate the voter, then record it on the ballot.

    Failures are logged and reported as False, never raised, and leave the
    voter registry and the ballot untouched. A command runs at most once.
    """

    voter: Optional[Voter]
    candidate: Optional[Candidate]
    ballot: Ballot
    authenticator: AuthenticationGate
    registry: VoterRegistry

    def __post_init__(self):
        # frozen dataclass, so bypass __setattr__ for the run marker
        object.__setattr__(self, "_executed", False)

    def execute(self) -> bool:
        if self._executed:
            raise RuntimeError("CastVoteCommand already executed")
        object.__setattr__(self, "_executed", True)

        if self.voter is None or self.candidate is None:
            logger.warning("Invalid voter or candidate.")
            return False
        if not self.authenticator.authenticate(self.voter, self.registry):
            logger.warning(
                f"Authentication failed or voter has already voted. (voter={self.voter.name!r})"
            )
            return False
        self.ballot.add_vote(self.candidate)
        return True
