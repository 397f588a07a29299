import pytest

from election_sim.errors import DuplicateRegistrationError
from election_sim.registry import CandidateRegistry, VoterRegistry


def test_register_voter_starts_not_voted():
    reg = VoterRegistry()
    reg.register("Alice", "pw1")
    voter = reg.lookup("Alice")
    assert voter is not None
    assert voter.has_voted is False
    assert voter.credential == "pw1"


def test_voter_lookup_is_case_sensitive_and_misses_return_none():
    reg = VoterRegistry()
    reg.register("Alice", "pw1")
    assert reg.lookup("alice") is None
    assert reg.lookup("Mallory") is None


def test_duplicate_voter_rejected_and_first_entry_kept():
    reg = VoterRegistry()
    reg.register("Alice", "pw1")
    with pytest.raises(DuplicateRegistrationError):
        reg.register("Alice", "other")
    # duplicates are also KeyErrors
    with pytest.raises(KeyError):
        reg.register("Alice", "other")
    assert reg.lookup("Alice").credential == "pw1"
    assert len(reg) == 1


def test_voter_listing_is_in_registration_order():
    reg = VoterRegistry()
    for name in ("Carol", "Alice", "Bob"):
        reg.register(name, "x")
    assert [v.name for v in reg.list()] == ["Carol", "Alice", "Bob"]
    assert "Alice" in reg


def test_blank_name_rejected():
    with pytest.raises(ValueError):
        VoterRegistry().register("  ", "pw")
    with pytest.raises(ValueError):
        CandidateRegistry().add("", "Party A")


def test_candidates_keep_insertion_order_and_unset_tally():
    reg = CandidateRegistry()
    reg.add("John Doe", "Party A")
    reg.add("Jane Smith", "Party B")
    names = [c.name for c in reg.list()]
    assert names == ["John Doe", "Jane Smith"]
    assert reg.lookup("Jane Smith").affiliation == "Party B"
    assert reg.lookup("John Doe").obfuscated_tally is None
    assert reg.lookup("Nobody") is None


def test_duplicate_candidate_rejected():
    reg = CandidateRegistry()
    reg.add("John Doe", "Party A")
    with pytest.raises(DuplicateRegistrationError) as exc:
        reg.add("John Doe", "Party C")
    assert "John Doe" in str(exc.value)
    assert reg.lookup("John Doe").affiliation == "Party A"
    assert len(reg) == 1


def test_non_string_credential_or_affiliation_rejected():
    with pytest.raises(TypeError):
        VoterRegistry().register("Alice", None)
    reg = CandidateRegistry()
    with pytest.raises(TypeError):
        reg.add("John Doe", None)
    assert reg.lookup("John Doe") is None
