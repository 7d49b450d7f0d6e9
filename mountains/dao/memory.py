"""
In-memory implementation of MountainRepository.

Records live in a plain list, in insertion order, for the lifetime of the
process.  Every operation is a linear scan under a reader/writer lock:
queries take the lock shared, mutations take it exclusively.  The lock is held
only while the list is traversed, never across request or response I/O.

Records are copied on the way in and on the way out, so nothing outside the
store ever holds a reference to a stored object.
"""

import logging
from typing import Callable

from mountains.dao.base import MountainRepository
from mountains.dao.rwlock import ReadWriteLock
from mountains.schemas.mountain import Mountain

logger = logging.getLogger(__name__)


class InMemoryMountainRepository(MountainRepository):
    """MountainRepository backed by a lock-guarded Python list."""

    def __init__(self) -> None:
        self._records: list[Mountain] = []
        self._lock = ReadWriteLock()

    # ── Internal helpers ──────────────────────────────────────────────────────

    def _select(self, predicate: Callable[[Mountain], bool]) -> list[Mountain]:
        """Return copies of every record satisfying *predicate*."""
        with self._lock.read_locked():
            return [m.model_copy() for m in self._records if predicate(m)]

    def _index_of(self, mountain_id: int) -> int:
        """Position of the first record with *mountain_id*, or -1.  Caller holds the lock."""
        for i, existing in enumerate(self._records):
            if existing.id == mountain_id:
                return i
        return -1

    # ── Mutations ─────────────────────────────────────────────────────────────

    def add_all(self, records: list[Mountain]) -> bool:
        incoming = [r.model_copy() for r in records]
        with self._lock.write_locked():
            seen: list[Mountain] = []
            for record in incoming:
                if record in self._records or record in seen:
                    logger.warning(
                        "Rejected batch of %d: duplicate of mountain id=%d.",
                        len(incoming),
                        record.id,
                    )
                    return False
                seen.append(record)
            self._records.extend(incoming)
        logger.info("Added %d mountain(s).", len(incoming))
        return True

    def update(self, mountain_id: int, record: Mountain) -> bool:
        replacement = record.model_copy()
        with self._lock.write_locked():
            index = self._index_of(mountain_id)
            if index < 0:
                logger.warning("Update called for non-existent mountain id=%d.", mountain_id)
                return False
            self._records[index] = replacement
        logger.info("Updated mountain id=%d.", mountain_id)
        return True

    def delete(self, mountain_id: int) -> bool:
        with self._lock.write_locked():
            index = self._index_of(mountain_id)
            if index < 0:
                logger.warning("Delete called for non-existent mountain id=%d.", mountain_id)
                return False
            del self._records[index]
        logger.info("Deleted mountain id=%d.", mountain_id)
        return True

    def clear(self) -> None:
        with self._lock.write_locked():
            self._records.clear()

    # ── Queries ───────────────────────────────────────────────────────────────

    def list_all(self) -> list[Mountain]:
        return self._select(lambda m: True)

    def find_by_country(self, country: str) -> list[Mountain]:
        return self._select(lambda m: m.country == country)

    def find_by_country_and_range(self, country: str, range_: str) -> list[Mountain]:
        return self._select(lambda m: m.country == country and m.range == range_)

    def find_by_hemisphere(self, is_northern: bool) -> list[Mountain]:
        return self._select(lambda m: m.is_northern == is_northern)

    def find_by_country_altitude(self, country: str, min_altitude: int) -> list[Mountain]:
        return self._select(lambda m: m.country == country and m.altitude >= min_altitude)

    def find_by_name(self, country: str, range_: str, name: str) -> list[Mountain]:
        return self._select(
            lambda m: m.country == country and m.range == range_ and m.name == name
        )

    def find_by_id(self, mountain_id: int) -> list[Mountain]:
        with self._lock.read_locked():
            index = self._index_of(mountain_id)
            if index < 0:
                return []
            return [self._records[index].model_copy()]
