"""Results returned by command handlers.

Each result pairs the outcome with a `ValidationReport`. An empty report means
the command took effect; a non-empty one means nothing was written.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from startupnet.domain.social import Comment, MicroPost
from startupnet.domain.startups import Startup
from startupnet.domain.users import User
from startupnet.domain.value_objects import ValidationReport


@dataclass(frozen=True)
class Result:
    """Base class for command results."""

    report: ValidationReport = field(default_factory=ValidationReport, kw_only=True)

    @property
    def ok(self) -> bool:
        """True when the command passed validation."""
        return self.report.ok

    @property
    def errors(self) -> dict[str, list[str]]:
        """Validation reasons grouped by field."""
        return self.report.as_dict()


@dataclass(frozen=True)
class UserResult(Result):
    """Outcome of a user-changing command.

    ``user`` carries the attempted values even when validation failed.
    """

    user: User


@dataclass(frozen=True)
class FollowResult(Result):
    """Outcome of Follow/Unfollow; ``changed`` is False for no-ops."""

    changed: bool


@dataclass(frozen=True)
class PostResult(Result):
    """Outcome of PostMicroPost; ``post`` is None when validation failed."""

    post: MicroPost | None


@dataclass(frozen=True)
class StartupResult(Result):
    """Outcome of RegisterStartup/JoinStartup."""

    startup: Startup | None
    changed: bool = False


@dataclass(frozen=True)
class CommentResult(Result):
    """Outcome of AddComment; ``comment`` is None when validation failed."""

    comment: Comment | None
