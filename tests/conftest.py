import os
import sys

import pytest


# Ensure repository src directory is on sys.path for tests
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)


@pytest.fixture
def service():
    from election_sim import ElectionService

    return ElectionService()


@pytest.fixture
def populated(service):
    """Two voters and two candidates, nobody has voted yet."""
    service.register_voter("Alice", "pw1")
    service.register_voter("Bob", "pw2")
    service.add_candidate("John Doe", "Party A")
    service.add_candidate("Jane Smith", "Party B")
    return service
