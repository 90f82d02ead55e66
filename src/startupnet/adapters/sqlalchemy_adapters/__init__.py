"""SQLAlchemy Core implementations of the storage ports."""

from .micro_posts import SqlAlchemyCommentStore, SqlAlchemyMicroPostStore
from .social_graph import SqlAlchemySocialGraph
from .startups import SqlAlchemyInvestorRepository, SqlAlchemyStartupRepository
from .users import SqlAlchemyUserRepository

__all__ = [
    "SqlAlchemyUserRepository",
    "SqlAlchemyStartupRepository",
    "SqlAlchemyInvestorRepository",
    "SqlAlchemySocialGraph",
    "SqlAlchemyMicroPostStore",
    "SqlAlchemyCommentStore",
]
