"""Shared SQLAlchemy `MetaData` object with a naming convention.

Every STARTUPNET table attaches to this metadata so that constraints and
indexes receive deterministic names. Alembic autogenerate depends on that:
otherwise it emits spurious drop/add pairs for randomly named constraints.
The follow graph relies on one of these names directly
(``uq_follows_follower_id_followed_type_followed_id``).

Naming convention:
    - Indexes:       ix_<table>_<col...>
    - Unique:        uq_<table>_<col...>
    - Check:         ck_<table>_<constraint_name>
    - Foreign keys:  fk_<table>_<col...>_<reftable>
    - Primary key:   pk_<table>
"""

from sqlalchemy import MetaData

metadata = MetaData(
    naming_convention={
        "ix": "ix_%(table_name)s_%(column_0_N_label)s",
        "uq": "uq_%(table_name)s_%(column_0_N_name)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_N_name)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)
