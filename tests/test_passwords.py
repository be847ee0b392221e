from __future__ import annotations

from jobs_api.security.passwords import BCRYPT_ROUNDS, hash_password, verify_password


def test_hash_is_not_the_plaintext_and_verifies():
    hashed = hash_password("secret1")
    assert hashed != "secret1"
    assert hashed.startswith("$2")
    assert verify_password("secret1", hashed)
    assert not verify_password("secret2", hashed)


def test_hashes_are_salted():
    assert hash_password("secret1") != hash_password("secret1")


def test_hash_uses_cost_factor_ten():
    assert BCRYPT_ROUNDS == 10
    assert hash_password("secret1").split("$")[2] == "10"


def test_verify_against_garbage_hash_is_false():
    assert verify_password("secret1", "not-a-bcrypt-hash") is False
