"""
Abstract DAO (Data Access Object) for mountain records.

`MountainRepository` defines the storage contract that the service layer
depends on.  Concrete implementations must fulfil this interface without the
service or router knowing which backend is in use.

Every read returns an independent list of copies; callers may mutate what they
get back without affecting the store.
"""

from abc import ABC, abstractmethod

from mountains.schemas.mountain import Mountain


class MountainRepository(ABC):
    """Storage interface for mountain records."""

    # ── Mutations ─────────────────────────────────────────────────────────────

    @abstractmethod
    def add_all(self, records: list[Mountain]) -> bool:
        """
        Insert every record in *records*, or none of them.

        Returns ``False`` (and leaves the store unchanged) when any record is
        structurally equal to one already stored or to another record in the
        same batch.
        """

    @abstractmethod
    def update(self, mountain_id: int, record: Mountain) -> bool:
        """
        Replace the first record whose id is *mountain_id* with *record*,
        keeping its position.

        Returns ``False`` if no record has that id.
        """

    @abstractmethod
    def delete(self, mountain_id: int) -> bool:
        """
        Remove the first record whose id is *mountain_id*.

        Returns ``True`` if a record was removed, ``False`` otherwise.
        """

    @abstractmethod
    def clear(self) -> None:
        """Remove every record."""

    # ── Queries ───────────────────────────────────────────────────────────────

    @abstractmethod
    def list_all(self) -> list[Mountain]:
        """Return every stored record in insertion order."""

    @abstractmethod
    def find_by_country(self, country: str) -> list[Mountain]:
        """Records whose country equals *country*."""

    @abstractmethod
    def find_by_country_and_range(self, country: str, range_: str) -> list[Mountain]:
        """Records matching both *country* and *range_*."""

    @abstractmethod
    def find_by_hemisphere(self, is_northern: bool) -> list[Mountain]:
        """Records in the requested hemisphere."""

    @abstractmethod
    def find_by_country_altitude(self, country: str, min_altitude: int) -> list[Mountain]:
        """Records in *country* whose altitude is at least *min_altitude*."""

    @abstractmethod
    def find_by_name(self, country: str, range_: str, name: str) -> list[Mountain]:
        """Records matching *country*, *range_* and *name*."""

    @abstractmethod
    def find_by_id(self, mountain_id: int) -> list[Mountain]:
        """
        Return a list holding the first record whose id is *mountain_id*.

        The list is empty when no record matches.
        """
