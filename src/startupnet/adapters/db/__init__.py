"""Database plumbing shared by the SQLAlchemy adapters and migrations."""
