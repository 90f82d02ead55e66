"""Lookups shared by the command handlers."""

from startupnet.domain.users import User
from startupnet.domain.value_objects import FieldError, FollowableKind, TargetRef
from startupnet.interfaces.unit_of_work import AbstractUnitOfWork
from startupnet.service_layer.errors import UserNotFoundError

DOES_NOT_EXIST = "does not exist"


def require_user(uow: AbstractUnitOfWork, user_id: int) -> User:
    """Load the acting user of a command.

    Raises:
        UserNotFoundError: If no such user exists.
    """
    user = uow.users.get(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user


def target_exists(uow: AbstractUnitOfWork, target: TargetRef) -> bool:
    """True if the user or startup ``target`` points at is stored."""
    if target.kind is FollowableKind.USER:
        return uow.users.get(target.id) is not None
    return uow.startups.get(target.id) is not None


def missing(field: str) -> FieldError:
    return FieldError(field, DOES_NOT_EXIST)
