"""In-memory implementations of the storage ports (tests and demos)."""

from .micro_posts import InMemoryCommentStore, InMemoryMicroPostStore
from .social_graph import InMemorySocialGraph
from .startups import InMemoryInvestorRepository, InMemoryStartupRepository
from .store import InMemoryData
from .unit_of_work import InMemoryUnitOfWork
from .users import InMemoryUserRepository

__all__ = [
    "InMemoryData",
    "InMemoryUnitOfWork",
    "InMemoryUserRepository",
    "InMemoryStartupRepository",
    "InMemoryInvestorRepository",
    "InMemorySocialGraph",
    "InMemoryMicroPostStore",
    "InMemoryCommentStore",
]
