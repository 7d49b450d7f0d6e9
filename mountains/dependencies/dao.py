"""
FastAPI dependency for MountainRepository injection.

Routes declare `repo: MountainRepository = Depends(get_mountain_repository)`
and receive the process-wide in-memory store at runtime.

Swapping the store (e.g. a fresh one per test) only requires overriding this
one dependency:

    app.dependency_overrides[get_mountain_repository] = lambda: InMemoryMountainRepository()
"""

from mountains.dao.base import MountainRepository
from mountains.dao.memory import InMemoryMountainRepository

# One store per process; it guards itself with its own reader/writer lock.
_repository = InMemoryMountainRepository()


def get_mountain_repository() -> MountainRepository:
    """Return the active MountainRepository implementation."""
    return _repository
