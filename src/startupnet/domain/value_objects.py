"""Module including value objects used across the domain layer."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from .errors import UnknownFollowableKindError


class FollowableKind(str, Enum):
    """Discriminant for polymorphic follow and comment targets.

    The value is what gets stored in the ``followed_type`` /
    ``commentable_type`` columns.
    """

    USER = "User"
    STARTUP = "Startup"

    @classmethod
    def from_string(cls, kind: str) -> FollowableKind:
        """Normalize an arbitrary kind string ('user', 'Startup', ...) to a member.

        Raises:
            UnknownFollowableKindError: if the string names no followable kind.
        """
        raw = (kind or "").strip().lower()
        for member in cls:
            if member.value.lower() == raw:
                return member
        raise UnknownFollowableKindError(kind)


@dataclass(frozen=True, slots=True)
class TargetRef:
    """Tagged reference to a followable or commentable entity."""

    kind: FollowableKind
    id: int

    def __str__(self) -> str:
        return f"{self.kind.value}#{self.id}"


@dataclass(frozen=True, slots=True)
class FieldError:
    """A single validation failure: which field, and why."""

    field: str
    reason: str

    def __str__(self) -> str:
        return f"{self.field} {self.reason}"


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Ordered collection of field errors produced by a validation pass.

    An empty report means the input is valid.
    """

    errors: tuple[FieldError, ...] = ()

    @classmethod
    def of(cls, errors: Iterable[FieldError]) -> ValidationReport:
        """Build a report from any iterable of field errors."""
        return cls(tuple(errors))

    @property
    def ok(self) -> bool:
        """True when no field errors were recorded."""
        return not self.errors

    def __iter__(self) -> Iterator[FieldError]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def merge(self, *others: ValidationReport) -> ValidationReport:
        """Return a new report with the errors of ``others`` appended."""
        errors = list(self.errors)
        for other in others:
            errors.extend(other.errors)
        return ValidationReport(tuple(errors))

    def for_field(self, field: str) -> list[str]:
        """Return the reasons recorded against ``field``, in order."""
        return [err.reason for err in self.errors if err.field == field]

    def as_dict(self) -> dict[str, list[str]]:
        """Group reasons by field name (field order follows first occurrence)."""
        grouped: dict[str, list[str]] = {}
        for err in self.errors:
            grouped.setdefault(err.field, []).append(err.reason)
        return grouped
