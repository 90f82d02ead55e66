"""Errors raised by the service layer.

Only unexpected conditions are raised. Validation failures and other
expected outcomes travel back inside result objects.
"""


class ServiceError(Exception):
    """Base class for service layer errors."""


class UserNotFoundError(ServiceError, LookupError):
    """The acting user of a command does not exist.

    Attributes:
        user_id (int): The id that was looked up.
    """

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User {user_id} does not exist.")
        self.user_id = user_id
