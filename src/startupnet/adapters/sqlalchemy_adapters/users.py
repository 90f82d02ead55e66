"""SQLAlchemy-backed UserRepository.

Emails are normalized here, on every write, so the invariant "stored email is
lowercase" holds for writes that skipped validation too. Inserts and updates
run inside a SAVEPOINT: a unique violation on ``users.email`` is translated to
`DuplicateEmailError` and leaves the surrounding transaction usable (needed on
PostgreSQL, where a failed statement otherwise aborts the transaction).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, NoReturn

from sqlalchemy import exists, insert, select, update
from sqlalchemy.exc import IntegrityError

from startupnet.adapters.db.schema import users
from startupnet.domain.errors import UnsavedEntityError
from startupnet.domain.users import User
from startupnet.domain.validation import normalize_email
from startupnet.interfaces.errors import DuplicateEmailError
from startupnet.interfaces.users import UserRepository

from .startups import load_founded_startups, load_investor_profiles

if TYPE_CHECKING:
    from sqlalchemy import RowMapping
    from sqlalchemy.engine import Connection

# any one of these in the driver message identifies the email unique index
EMAIL_CONSTRAINT_MARKERS = ("uq_users_email", "users.email")  # pragma: no mutate


def _row_to_user(row: RowMapping) -> User:
    return User(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        password_hash=row["password_hash"],
        is_admin=bool(row["is_admin"]),
        created_at=row["created_at"],
    )


class SqlAlchemyUserRepository(UserRepository):
    """UserRepository over the ``users`` table (plus role associations on load)."""

    def __init__(self, connection: Connection):
        self.connection = connection

    # --- writes ---

    def add(self, user: User) -> User:
        email = normalize_email(user.email)
        values = {
            "name": user.name,
            "email": email,
            "password_hash": user.password_hash,
            "is_admin": user.is_admin,
        }
        if user.created_at is not None:
            values["created_at"] = user.created_at

        stmt = insert(users).values(**values).returning(users.c.id, users.c.created_at)
        try:
            with self.connection.begin_nested():
                row = self.connection.execute(stmt).one()
        except IntegrityError as e:
            self._raise_from_integrity_error(e, email)

        user.id = row.id
        user.created_at = row.created_at
        user.email = email
        return user

    def update(self, user: User) -> User:
        if user.id is None:
            raise UnsavedEntityError("User")
        email = normalize_email(user.email)
        stmt = (
            update(users)
            .where(users.c.id == user.id)
            .values(
                name=user.name,
                email=email,
                password_hash=user.password_hash,
                is_admin=user.is_admin,
            )
        )
        try:
            with self.connection.begin_nested():
                self.connection.execute(stmt)
        except IntegrityError as e:
            self._raise_from_integrity_error(e, email)

        user.email = email
        return user

    # --- reads ---

    def get(self, user_id: int) -> User | None:
        row = (
            self.connection.execute(select(users).where(users.c.id == user_id))
            .mappings()
            .one_or_none()
        )
        if row is None:
            return None
        return self._with_roles([_row_to_user(row)])[0]

    def get_by_email(self, email: str) -> User | None:
        user_id = self.connection.execute(
            select(users.c.id).where(users.c.email == normalize_email(email))
        ).scalar_one_or_none()
        return None if user_id is None else self.get(user_id)

    def get_many(self, user_ids: Sequence[int]) -> list[User]:
        if not user_ids:
            return []
        rows = (
            self.connection.execute(select(users).where(users.c.id.in_(user_ids)))
            .mappings()
            .all()
        )
        by_id = {row["id"]: _row_to_user(row) for row in rows}
        return self._with_roles([by_id[uid] for uid in user_ids if uid in by_id])

    def email_taken(self, email: str, exclude_id: int | None = None) -> bool:
        condition = users.c.email == normalize_email(email)
        if exclude_id is not None:
            condition = condition & (users.c.id != exclude_id)
        return bool(self.connection.execute(select(exists().where(condition))).scalar())

    # --- internals ---

    def _with_roles(self, loaded: list[User]) -> list[User]:
        """Attach founded startups and investor profiles, two queries per batch."""
        ids = [user.id for user in loaded if user.id is not None]
        founded = load_founded_startups(self.connection, ids)
        profiles = load_investor_profiles(self.connection, ids)
        for user in loaded:
            user.startups = founded.get(user.id, [])  # type: ignore[arg-type]
            user.investor = profiles.get(user.id)  # type: ignore[arg-type]
        return loaded

    @staticmethod
    def _raise_from_integrity_error(error: IntegrityError, email: str) -> NoReturn:
        """Translate an email unique violation; re-raise anything else unchanged."""
        msg = str(error.orig) if error.orig is not None else str(error)
        if any(marker in msg for marker in EMAIL_CONSTRAINT_MARKERS):
            raise DuplicateEmailError(email) from error
        raise error
