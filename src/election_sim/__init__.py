"""election_sim package - a small in-memory election simulator

Voters register, candidates are added, each voter casts at most one vote
after authentication, and tallies are reported through an obfuscation
strategy. `ElectionService` is the entry point front ends use.
"""

from .errors import DuplicateRegistrationError, ElectionError
from .models import Candidate, ResultRow, Voter
from .service import ElectionService

__all__ = [
    "Candidate",
    "DuplicateRegistrationError",
    "ElectionError",
    "ElectionService",
    "ResultRow",
    "Voter",
]
