"""Password hashing with bcrypt."""

import bcrypt

from bloglist.config import get_settings

# bcrypt only looks at the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


class BcryptHasher:
    """Salted, cost-parameterized one-way hashing of plaintext passwords.

    Usage::

        hasher = BcryptHasher(rounds=10)
        stored = hasher.hash("sekret")
        hasher.verify("sekret", stored)  # True
    """

    def __init__(self, rounds: int = 10) -> None:
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(plaintext.encode("utf-8"), salt).decode("utf-8")

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Return True if *plaintext* matches *hashed*; False for malformed hashes."""
        try:
            return bcrypt.checkpw(plaintext.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            return False


def get_password_hasher() -> BcryptHasher:
    """Return a hasher using the configured cost."""
    return BcryptHasher(rounds=get_settings().bcrypt_rounds)
