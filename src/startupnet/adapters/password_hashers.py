"""bcrypt-backed PasswordHasher."""

from __future__ import annotations

import bcrypt

from startupnet.config import DEFAULT_BCRYPT_ROUNDS
from startupnet.interfaces.password_hasher import PasswordHasher

# bcrypt only looks at the first 72 bytes; newer releases refuse longer input
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class BcryptPasswordHasher(PasswordHasher):
    """Hash passwords with bcrypt and a fresh salt per hash.

    Args:
        rounds: bcrypt work factor (log2 of the iteration count). Tests use
            the minimum (4) to stay fast.
    """

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))
        except ValueError:
            # not a bcrypt hash (e.g. a row written with validation skipped)
            return False
