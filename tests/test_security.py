from artfolio_api.app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


class TestPasswords:
    def test_hash_round_trip(self):
        stored = hash_password("correct horse")
        assert verify_password("correct horse", stored)
        assert not verify_password("wrong", stored)

    def test_hash_is_salted(self):
        assert hash_password("same") != hash_password("same")

    def test_stored_format(self):
        salt, digest = hash_password("pw").split("$")
        assert len(salt) == 32
        assert len(digest) == 64

    def test_malformed_hash_never_matches(self):
        assert not verify_password("pw", "no-dollar-sign")
        assert not verify_password("pw", "zz$zz")


class TestTokens:
    def test_round_trip(self):
        token = create_access_token({"sub": "7"})
        payload = decode_access_token(token)
        assert payload["sub"] == "7"
        assert "exp" in payload

    def test_tampered_signature(self):
        token = create_access_token({"sub": "7"})
        header, payload, signature = token.split(".")
        forged = create_access_token({"sub": "8"}).split(".")[1]
        assert decode_access_token(f"{header}.{forged}.{signature}") is None

    def test_expired(self):
        token = create_access_token({"sub": "7"}, expires_delta=-10)
        assert decode_access_token(token) is None

    def test_garbage(self):
        assert decode_access_token("garbage") is None
        assert decode_access_token("a.b.c") is None
