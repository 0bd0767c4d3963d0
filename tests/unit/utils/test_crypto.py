"""
Unit tests for password hashing.
"""

from commerce_service.utils.crypto import hash_password, verify_password


def test_hash_is_not_plain_text():
    hashed = hash_password("s3cret-pass")

    assert hashed != "s3cret-pass"
    assert hashed.startswith("$pbkdf2-sha256$")


def test_verify_password():
    hashed = hash_password("s3cret-pass")

    assert verify_password("s3cret-pass", hashed)
    assert not verify_password("wrong-pass", hashed)


def test_same_password_hashes_differ():
    assert hash_password("s3cret-pass") != hash_password("s3cret-pass")
