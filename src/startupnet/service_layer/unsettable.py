"""Tri-state handling for partial-update fields.

This module defines the ``UNSET`` sentinel, the `Unsettable` type alias,
and the `resolve` helper for applying partial updates to a user.

A field of type ``Unsettable[T]`` can take three states:

* ``UNSET``: the field is left unchanged by the update.
* ``None``: the field is explicitly emptied; validation then decides
  whether that is acceptable (for a name or email it never is).
* concrete ``T``: the field is updated to a new value.
"""

from dataclasses import dataclass
from typing import TypeVar


def _get_unset() -> "_UnsetType":
    # Factory used by pickle to retrieve the one true instance.
    return UNSET


@dataclass(frozen=True)
class _UnsetType:
    """Sentinel to mark fields intentionally left out of an update.

    This is distinct from `None`, which asks for the value to be emptied.
    """

    def __bool__(self) -> bool:  # falsy to simplify conditionals
        return False

    def __repr__(self) -> str:
        return "UNSET"

    def __reduce__(self):  # keep singleton on pickle
        return (_get_unset, ())


# Singleton instance
UNSET = _UnsetType()

T = TypeVar("T")
type Unsettable[T] = T | _UnsetType | None


def is_set(value: object) -> bool:
    """True unless ``value`` is the ``UNSET`` sentinel."""
    return not isinstance(value, _UnsetType)


def resolve(value: "T | None | _UnsetType", current: T) -> "T | None":
    """Resolve a tri-state value against the current value.

    Args:
        value: The value from the update (UNSET, None, or a concrete value).
        current: The value currently stored.

    Returns:
        ``current`` if ``value`` is UNSET, otherwise ``value`` (which may be None).
    """
    if isinstance(value, _UnsetType):
        return current
    return value
