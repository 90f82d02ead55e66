"""Adapters: concrete implementations of the ports in `startupnet.interfaces`.

- `db`: engine factory, shared metadata, column types, table schema and
  Alembic migrations.
- `sqlalchemy_adapters`: SQLAlchemy Core implementations of every port.
- `memory`: in-memory implementations sharing one `InMemoryData` store.
- `password_hashers`, `clocks`: bcrypt hashing and time sources.
"""
