"""Interface for password hashers."""

import abc


class PasswordHasher(abc.ABC):
    """Contract for one-way password hashing."""

    @abc.abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted hash of ``password`` suitable for storage."""

    @abc.abstractmethod
    def verify(self, password: str, hashed: str) -> bool:
        """Return True if ``password`` matches the stored ``hashed`` value."""
