import pytest

from backend.jobboard.utils.security import hash_password, verify_password


def test_hash_and_verify():
    hashed = hash_password("secret123", rounds=4)
    assert hashed.startswith("$2b$04$")
    assert verify_password("secret123", hashed)
    assert not verify_password("secret124", hashed)


def test_hashes_are_salted():
    assert hash_password("secret123", rounds=4) != hash_password("secret123", rounds=4)


def test_empty_password_cannot_be_hashed():
    with pytest.raises(ValueError):
        hash_password("", rounds=4)


def test_verify_rejects_empty_input():
    hashed = hash_password("secret123", rounds=4)
    assert not verify_password("", hashed)
    assert not verify_password("secret123", "")


def test_only_first_72_bytes_count():
    base = "a" * 72
    hashed = hash_password(base + "tail-one", rounds=4)
    assert verify_password(base + "tail-two", hashed)
    assert verify_password(base, hashed)


def test_malformed_hash_raises():
    with pytest.raises(ValueError):
        verify_password("secret123", "not-a-bcrypt-hash")


def test_lone_surrogate_hashes_and_verifies():
    hashed = hash_password("\ud800abc", rounds=4)
    assert verify_password("\ud800abc", hashed)
    assert not verify_password("\udc00abc", hashed)
