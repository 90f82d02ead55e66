"""Bootstrap the message bus with handlers, unit of work and services."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from startupnet import config
from startupnet.adapters.clocks import SystemClock
from startupnet.adapters.db.engine import make_engine
from startupnet.adapters.password_hashers import BcryptPasswordHasher
from startupnet.adapters.unit_of_work import SqlAlchemyUnitOfWork
from startupnet.service_layer.handlers import COMMAND_HANDLERS
from startupnet.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from startupnet.interfaces.clock import Clock
    from startupnet.interfaces.password_hasher import PasswordHasher
    from startupnet.interfaces.unit_of_work import AbstractUnitOfWork
    from startupnet.service_layer.commands import Command


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants.

    ``uow`` and ``password_hasher`` are exposed for the read-side views
    (`startupnet.service_layer.views`), which take them as arguments.
    """

    message_bus: MessageBus
    uow: AbstractUnitOfWork
    password_hasher: PasswordHasher


def build_uow(url: str) -> AbstractUnitOfWork:
    """Build a new unit of work over the database at ``url``."""
    engine = make_engine(url)
    return SqlAlchemyUnitOfWork(engine)


def build_message_bus(
    uow: AbstractUnitOfWork,
    command_handlers: dict[type[Command], Callable[..., Any]],
    *,
    password_hasher: PasswordHasher,
    clock: Clock,
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {"uow": uow, "password_hasher": password_hasher, "clock": clock}
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }

    return MessageBus(
        uow,
        command_handlers=injected_command_handlers,
    )


def bootstrap(
    url: str | None = None,
    *,
    password_hasher: PasswordHasher | None = None,
    clock: Clock | None = None,
) -> AppContainer:
    """Bootstrap the message bus with handlers and unit of work.

    Args:
        url: Database URL; defaults to ``STARTUPNET_DB_URL``.
        password_hasher: Defaults to bcrypt with ``STARTUPNET_BCRYPT_ROUNDS``.
        clock: Defaults to the system clock.

    Raises:
        DatabaseUrlNotSetError: If no url is given and the env var is unset.
    """
    uow = build_uow(url if url is not None else config.get_db_url())
    hasher = password_hasher or BcryptPasswordHasher(rounds=config.get_bcrypt_rounds())
    message_bus = build_message_bus(
        uow,
        COMMAND_HANDLERS,
        password_hasher=hasher,
        clock=clock or SystemClock(),
    )

    return AppContainer(
        message_bus=message_bus,
        uow=uow,
        password_hasher=hasher,
    )


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return functools.partial(handler, **deps)
