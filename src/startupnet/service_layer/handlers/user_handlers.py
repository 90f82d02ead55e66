"""Handlers for registering and editing users."""

import logging
from collections.abc import Callable

from startupnet.domain import validation
from startupnet.domain.users import User
from startupnet.domain.value_objects import FieldError, ValidationReport
from startupnet.interfaces.clock import Clock
from startupnet.interfaces.errors import DuplicateEmailError
from startupnet.interfaces.password_hasher import PasswordHasher
from startupnet.interfaces.unit_of_work import AbstractUnitOfWork
from startupnet.service_layer import commands
from startupnet.service_layer.results import UserResult
from startupnet.service_layer.unsettable import is_set, resolve

from ._common import require_user

logger = logging.getLogger(__name__)

EMAIL_TAKEN = ValidationReport.of([FieldError("email", validation.TAKEN)])


def _user_report(
    uow: AbstractUnitOfWork,
    name: str | None,
    email: str | None,
    password: str | None,
    password_confirmation: str | None,
    *,
    exclude_id: int | None = None,
    require_password: bool = True,
) -> ValidationReport:
    """Run the field rules plus the email uniqueness check, in field order."""
    errors = validation.validate_name(name)

    email_errors = validation.validate_email(email)
    if not email_errors and uow.users.email_taken(email, exclude_id=exclude_id):  # type: ignore[arg-type]
        email_errors.append(FieldError("email", validation.TAKEN))
    errors += email_errors

    if password is not None or require_password:
        errors += validation.validate_password(password, password_confirmation)
    return ValidationReport.of(errors)


def register_user(
    cmd: commands.RegisterUser,
    uow: AbstractUnitOfWork,
    password_hasher: PasswordHasher,
    clock: Clock,
) -> UserResult:
    """Validate and store a new user."""

    user = User(name=cmd.name, email=cmd.email, is_admin=cmd.is_admin)

    with uow:
        if not cmd.skip_validation:
            report = _user_report(
                uow, cmd.name, cmd.email, cmd.password, cmd.password_confirmation
            )
            if not report.ok:
                logger.debug("RegisterUser rejected: %s", report.as_dict())
                return UserResult(user, report=report)

        if cmd.password:
            user.password_hash = password_hasher.hash(cmd.password)
        user.created_at = clock.now()

        try:
            uow.users.add(user)
        except DuplicateEmailError:
            # lost a race against a concurrent registration
            logger.info("RegisterUser: email collided at write time")
            return UserResult(user, report=EMAIL_TAKEN)
        uow.commit()

    logger.info("Registered user %s", user.id)
    return UserResult(user)


def update_user(
    cmd: commands.UpdateUser,
    uow: AbstractUnitOfWork,
    password_hasher: PasswordHasher,
) -> UserResult:
    """Apply a partial update to a user, re-validating what changes."""

    with uow:
        user = require_user(uow, cmd.user_id)
        user.name = resolve(cmd.name, user.name)  # type: ignore[assignment]
        user.email = resolve(cmd.email, user.email)  # type: ignore[assignment]
        password = cmd.password if is_set(cmd.password) else None

        report = _user_report(
            uow,
            user.name,
            user.email,
            password,  # type: ignore[arg-type]
            cmd.password_confirmation,
            exclude_id=user.id,
            require_password=is_set(cmd.password),
        )
        if not report.ok:
            logger.debug("UpdateUser %s rejected: %s", user.id, report.as_dict())
            return UserResult(user, report=report)

        if password:
            user.password_hash = password_hasher.hash(password)  # type: ignore[arg-type]

        try:
            uow.users.update(user)
        except DuplicateEmailError:
            logger.info("UpdateUser %s: email collided at write time", user.id)
            return UserResult(user, report=EMAIL_TAKEN)
        uow.commit()

    logger.info("Updated user %s", user.id)
    return UserResult(user)


def set_admin(cmd: commands.SetAdmin, uow: AbstractUnitOfWork) -> UserResult:
    """Grant or revoke the admin flag."""

    with uow:
        user = require_user(uow, cmd.user_id)
        if user.is_admin == cmd.is_admin:
            logger.debug("SetAdmin %s: already %s; noop", user.id, cmd.is_admin)
            return UserResult(user)
        user.is_admin = cmd.is_admin
        uow.users.update(user)
        uow.commit()

    logger.info("User %s admin flag set to %s", user.id, user.is_admin)
    return UserResult(user)


COMMAND_HANDLERS: dict[type, Callable[..., UserResult]] = {
    commands.RegisterUser: register_user,
    commands.UpdateUser: update_user,
    commands.SetAdmin: set_admin,
}
