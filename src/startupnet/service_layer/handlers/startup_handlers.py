"""Handlers for the associations user roles derive from."""

import logging
from collections.abc import Callable

from startupnet.domain import validation
from startupnet.domain.startups import Investor, Startup
from startupnet.domain.value_objects import FieldError, ValidationReport
from startupnet.interfaces.clock import Clock
from startupnet.interfaces.errors import InvestorProfileExistsError
from startupnet.interfaces.unit_of_work import AbstractUnitOfWork
from startupnet.service_layer import commands
from startupnet.service_layer.results import StartupResult, UserResult

from ._common import missing, require_user

logger = logging.getLogger(__name__)

INVESTOR_TAKEN = ValidationReport.of([FieldError("investor", validation.TAKEN)])


def register_startup(
    cmd: commands.RegisterStartup, uow: AbstractUnitOfWork, clock: Clock
) -> StartupResult:
    """Create a startup with ``founder_id`` as its first entrepreneur."""

    report = validation.validate_startup_name(cmd.name)
    if not report.ok:
        return StartupResult(None, report=report)

    with uow:
        require_user(uow, cmd.founder_id)
        startup = uow.startups.add(
            Startup(name=cmd.name, created_at=clock.now()), founder_id=cmd.founder_id
        )
        uow.commit()

    logger.info("User %s founded startup %s", cmd.founder_id, startup.id)
    return StartupResult(startup, changed=True)


def join_startup(cmd: commands.JoinStartup, uow: AbstractUnitOfWork) -> StartupResult:
    """Add a co-founder to a startup (idempotent)."""

    with uow:
        require_user(uow, cmd.user_id)
        startup = uow.startups.get(cmd.startup_id)
        if startup is None:
            report = ValidationReport.of([missing("startup_id")])
            return StartupResult(None, report=report)

        changed = uow.startups.add_founder(cmd.startup_id, cmd.user_id)
        if not changed:
            logger.debug(
                "JoinStartup %s -> %s: already a founder; noop",
                cmd.user_id,
                cmd.startup_id,
            )
            return StartupResult(startup)
        uow.commit()

    logger.info("User %s joined startup %s", cmd.user_id, cmd.startup_id)
    return StartupResult(startup, changed=True)


def register_investor(
    cmd: commands.RegisterInvestor, uow: AbstractUnitOfWork, clock: Clock
) -> UserResult:
    """Create the investor profile of a user (at most one per user)."""

    with uow:
        user = require_user(uow, cmd.user_id)
        if user.investor is not None:
            return UserResult(user, report=INVESTOR_TAKEN)

        try:
            user.investor = uow.investors.add(
                Investor(name=cmd.name, user_id=user.id, created_at=clock.now())
            )
        except InvestorProfileExistsError:
            logger.info("RegisterInvestor %s: profile created concurrently", user.id)
            return UserResult(user, report=INVESTOR_TAKEN)
        uow.commit()

    logger.info("User %s registered as investor", user.id)
    return UserResult(user)


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.RegisterStartup: register_startup,
    commands.JoinStartup: join_startup,
    commands.RegisterInvestor: register_investor,
}
