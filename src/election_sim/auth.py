"""Authentication strategies guarding the one-vote-per-voter rule."""

from __future__ import annotations

import hmac
import logging
from typing import Protocol

from .models import Voter
from .registry import VoterRegistry

logger = logging.getLogger(__name__)


class AuthenticationGate(Protocol):
    def authenticate(self, voter: Voter, registry: VoterRegistry) -> bool:
        """Return True and mark the stored voter as voted, or False and change nothing."""
        ...


def _same_credential(stored: str, presented: str) -> bool:
    if not isinstance(presented, str):
        return False
    return hmac.compare_digest(stored.encode("utf-8"), presented.encode("utf-8"))


class PasswordAuthenticationGate:
    """Check the claimed voter's credential against the registry

    Succeeds only if the name is registered, the credential matches exactly
    and the stored voter has not voted yet. The check and the has_voted flip
    run under the stored voter's lock.
    """

    def authenticate(self, voter: Voter, registry: VoterRegistry) -> bool:
        stored = registry.lookup(voter.name)
        if stored is None:
            logger.debug(f"Unknown voter {voter.name!r}")
            return False
        return stored.check_and_mark(voter.credential, _same_credential)
