"""Errors raised by storage ports.

These signal storage-level constraint violations. The service layer turns
them into field errors; they are not meant to reach callers.
"""


class StorageError(Exception):
    """Base class for storage port errors."""


class DuplicateEmailError(StorageError):
    """The email is already bound to another user (unique index violation).

    Attributes:
        email (str): The normalized email that collided.
    """

    def __init__(self, email: str) -> None:
        super().__init__(f"Email '{email}' is already registered.")
        self.email = email


class InvestorProfileExistsError(StorageError):
    """The user already has an investor profile.

    Attributes:
        user_id (int): The user that already has a profile.
    """

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User {user_id} already has an investor profile.")
        self.user_id = user_id
