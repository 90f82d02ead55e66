"""Capability interfaces shared by several entity types.

An entity is *followable* or *commentable* when it can name itself as a
`TargetRef`. These are structural protocols: entities opt in by providing the
method, not by inheriting from a common base.
"""

from typing import Protocol, runtime_checkable

from .value_objects import TargetRef

# pylint: disable=too-few-public-methods


@runtime_checkable
class Followable(Protocol):
    """Something a user can follow (a User or a Startup)."""

    def follow_target(self) -> TargetRef:
        """Return the reference stored on follow edges pointing at this entity."""
        ...  # pylint: disable=unnecessary-ellipsis


@runtime_checkable
class Commentable(Protocol):
    """Something users can leave comments on (a User or a Startup)."""

    def comment_target(self) -> TargetRef:
        """Return the reference stored on comments attached to this entity."""
        ...  # pylint: disable=unnecessary-ellipsis
