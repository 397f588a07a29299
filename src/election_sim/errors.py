"""Exceptions raised by the election core.

Lookup misses and rejected casts are not exceptions: they come back as
None / False and are logged by the component that saw them.
"""


class ElectionError(Exception):
    """Base class for election errors."""


class DuplicateRegistrationError(ElectionError, KeyError):
    """A voter or candidate name is already registered."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"{kind} already registered: {name!r}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]
