"""Domain-layer error definitions."""


class DomainError(Exception):
    """Base class for domain-layer errors."""


class UnknownFollowableKindError(DomainError, ValueError):
    """Raised when a string does not name a followable/commentable entity type."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"Unknown followable kind {kind!r}.")
        self.kind = kind


class UnsavedEntityError(DomainError):
    """Raised when an entity without an id is used where a stored one is required."""

    def __init__(self, entity: str) -> None:
        super().__init__(f"{entity} has not been saved yet (no id assigned).")
        self.entity = entity
