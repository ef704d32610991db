"""Unit tests for PasswordHashingService."""

import pytest

from stockroom_auth.services import PasswordHashingService


@pytest.fixture
def hasher() -> PasswordHashingService:
    return PasswordHashingService(rounds=4)


def _cost(hash_value: str) -> str:
    # $2b$<cost>$<salt+digest>
    return hash_value.split("$")[2]


def test_hash_is_bcrypt(hasher):
    stored = hasher.hash("pw123")

    assert stored.startswith("$2b$")
    assert len(stored) == 60


def test_configured_cost_is_embedded(hasher):
    assert _cost(hasher.hash("pw123")) == "04"


def test_default_cost_is_twelve():
    assert PasswordHashingService().rounds == 12
    assert _cost(PasswordHashingService().hash("pw123")) == "12"


def test_round_trip(hasher):
    assert hasher.verify("pw123", hasher.hash("pw123")) is True


def test_wrong_secret(hasher):
    assert hasher.verify("pw124", hasher.hash("pw123")) is False


def test_salt_differs_per_hash(hasher):
    first, second = hasher.hash("pw123"), hasher.hash("pw123")

    assert first != second
    assert hasher.verify("pw123", first)
    assert hasher.verify("pw123", second)


def test_hash_from_other_cost_still_verifies(hasher):
    stored = PasswordHashingService(rounds=5).hash("pw123")

    assert hasher.verify("pw123", stored) is True


@pytest.mark.parametrize("stored", ["", "not_a_valid_hash", "$2b$04$short"])
def test_malformed_stored_hash_never_matches(hasher, stored):
    assert hasher.verify("pw123", stored) is False


def test_plaintext_is_not_in_hash(hasher):
    assert "pw123" not in hasher.hash("pw123")
