"""Packaged Alembic migration environment for STARTUPNET."""
