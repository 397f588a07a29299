"""ElectionService: the facade front ends talk to.

It owns the registries and the ballot, and takes the authentication and
obfuscation strategies at construction so either can be swapped without
touching the cast/report logic.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .auth import AuthenticationGate, PasswordAuthenticationGate
from .ballot import Ballot, Observer
from .commands import CastVoteCommand
from .models import Candidate, ResultRow, Voter
from .obfuscation import LabelObfuscator, TallyObfuscator
from .registry import CandidateRegistry, VoterRegistry

logger = logging.getLogger(__name__)


class ElectionService:
    def __init__(
        self,
        authenticator: Optional[AuthenticationGate] = None,
        obfuscator: Optional[TallyObfuscator] = None,
        observers: Iterable[Observer] = (),
    ):
        self.voters = VoterRegistry()
        self.candidates = CandidateRegistry()
        self.ballot = Ballot()
        self.authenticator = authenticator or PasswordAuthenticationGate()
        self.obfuscator = obfuscator or LabelObfuscator()
        for observer in observers:
            self.ballot.subscribe(observer)

    def register_voter(self, name: str, credential: str) -> None:
        self.voters.register(name, credential)

    def add_candidate(self, name: str, affiliation: str) -> None:
        self.candidates.add(name, affiliation)

    def get_voter(self, name: str) -> Optional[Voter]:
        return self.voters.lookup(name)

    def get_candidate(self, name: str) -> Optional[Candidate]:
        return self.candidates.lookup(name)

    def cast_vote(self, voter: Optional[Voter], candidate: Optional[Candidate]) -> bool:
        """Authenticate `voter` and count one vote for `candidate`.

        `voter` is the claimed identity (name + credential); it does not have
        to be the stored record. Returns False, without raising, when the
        cast is rejected; the reason is logged.
        """
        if candidate is not None and candidate.name not in self.candidates:
            logger.warning("Invalid voter or candidate.")
            return False
        command = CastVoteCommand(
            voter, candidate, self.ballot, self.authenticator, self.voters
        )
        return command.execute()

    def get_results(self) -> List[ResultRow]:
        """Obfuscated tallies in candidate registration order.

        Each candidate's obfuscated_tally is overwritten with the freshly
        computed value.
        """
        rows = []
        for candidate in self.candidates.list():
            tally = self.obfuscator.obfuscate(self.ballot.get_votes(candidate))
            candidate.obfuscated_tally = tally
            rows.append(ResultRow(candidate.name, candidate.affiliation, tally))
        logger.info(f"Computed results for {len(rows)} candidates")
        return rows
