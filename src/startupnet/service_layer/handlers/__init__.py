"""Service layer handlers."""

from collections.abc import Callable

from .social_handlers import COMMAND_HANDLERS as SOCIAL_COMMAND_HANDLERS
from .startup_handlers import COMMAND_HANDLERS as STARTUP_COMMAND_HANDLERS
from .user_handlers import COMMAND_HANDLERS as USER_COMMAND_HANDLERS

__all__ = ["COMMAND_HANDLERS"]

COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    **USER_COMMAND_HANDLERS,
    **SOCIAL_COMMAND_HANDLERS,
    **STARTUP_COMMAND_HANDLERS,
}
