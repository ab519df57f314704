import unittest

import jwt

from tasktracker.errors import InvalidPassword, InvalidToken
from tasktracker.security import PasswordHasher, TokenIssuer


class PasswordHasherTests(unittest.TestCase):
    def setUp(self):
        self.hasher = PasswordHasher(rounds=4)

    def test_hash_is_not_plaintext_and_verifies(self):
        hashed = self.hasher.hash("pw")
        self.assertNotEqual(hashed, "pw")
        self.assertTrue(self.hasher.verify("pw", hashed))
        self.assertFalse(self.hasher.verify("wrong", hashed))

    def test_nul_in_password_is_rejected(self):
        with self.assertRaises(InvalidPassword):
            self.hasher.hash("a\x00b")

    def test_unrecognized_hash_does_not_verify(self):
        self.assertFalse(self.hasher.verify("pw", "pw"))


class TokenIssuerTests(unittest.TestCase):
    def setUp(self):
        self.issuer = TokenIssuer(secret="test-secret", expires_in=60)

    def test_issue_and_verify(self):
        token = self.issuer.issue("u1@x.com")
        claims = self.issuer.verify(token)
        self.assertEqual(claims.sub, "u1@x.com")
        self.assertEqual(claims.exp - claims.iat, 60)

    def test_rejects_token_signed_with_other_secret(self):
        token = TokenIssuer(secret="other-secret").issue("u1@x.com")
        with self.assertRaises(InvalidToken):
            self.issuer.verify(token)

    def test_rejects_expired_token(self):
        token = jwt.encode(
            {"sub": "u1@x.com", "iat": 1, "exp": 2}, "test-secret", algorithm="HS256"
        )
        with self.assertRaises(InvalidToken) as ctx:
            self.issuer.verify(token)
        self.assertEqual(ctx.exception.message, "Token has expired")

    def test_rejects_garbage(self):
        with self.assertRaises(InvalidToken):
            self.issuer.verify("not-a-token")

    def test_requires_secret(self):
        with self.assertRaises(ValueError):
            TokenIssuer(secret="")


if __name__ == "__main__":
    unittest.main()
