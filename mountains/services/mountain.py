"""
Mountain service layer: batch insert, update, delete, and query dispatch.

Each function receives a `MountainRepository` instance (injected by the router
via FastAPI's dependency system).

Query dispatch
──────────────
`dispatch_query` maps the flat query-string parameters of ``GET /mountains``
onto exactly one repository read.  Rules are tried in this order and the first
match wins:

  1. no parameters               → list_all
  2. id                          → find_by_id
  3. country + range + name      → find_by_name
  4. country + alt               → find_by_country_altitude
  5. country + range             → find_by_country_and_range
  6. north                       → find_by_hemisphere
  7. country                     → find_by_country
  8. anything else               → []

So ``country&range&alt`` (no name) resolves to rule 4, not rule 5.
"""

import logging
import re
from typing import Mapping

from mountains.dao.base import MountainRepository
from mountains.schemas.mountain import Mountain

logger = logging.getLogger(__name__)


_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


def parse_bool(value: str) -> bool:
    """``"true"`` in any case is True; every other string is False."""
    return value.lower() == "true"


def parse_int(value: str) -> int:
    """
    Parse a signed 32-bit decimal integer.

    Only an optional sign followed by ASCII digits is accepted; whitespace,
    underscores and out-of-range values raise ``ValueError``.
    """
    if not _INTEGER.fullmatch(value):
        raise ValueError(f"invalid integer: {value!r}")
    number = int(value)
    if not _INT_MIN <= number <= _INT_MAX:
        raise ValueError(f"integer out of range: {value!r}")
    return number


def dispatch_query(params: Mapping[str, str], repo: MountainRepository) -> list[Mountain]:
    """
    Select and run the repository query implied by *params*.

    Raises
    ------
    ValueError
        If ``id`` or ``alt`` is selected by the rule chain but is not an
        integer.
    """
    if not params:
        return repo.list_all()

    if "id" in params:
        return repo.find_by_id(parse_int(params["id"]))

    if "country" in params and "range" in params and "name" in params:
        return repo.find_by_name(params["country"], params["range"], params["name"])

    if "country" in params and "alt" in params:
        return repo.find_by_country_altitude(params["country"], parse_int(params["alt"]))

    if "country" in params and "range" in params:
        return repo.find_by_country_and_range(params["country"], params["range"])

    if "north" in params:
        return repo.find_by_hemisphere(parse_bool(params["north"]))

    if "country" in params:
        return repo.find_by_country(params["country"])

    logger.info("No query rule matched parameters %s.", sorted(params))
    return []


def add_mountains(records: list[Mountain], repo: MountainRepository) -> bool:
    """
    Insert a batch of records, all or nothing.

    Returns ``False`` when the batch was rejected as containing a duplicate.
    """
    logger.info("Adding batch of %d mountain(s).", len(records))
    return repo.add_all(records)


def update_mountain(mountain_id: int, record: Mountain, repo: MountainRepository) -> bool:
    """Replace the first record with *mountain_id*.  Returns ``False`` if absent."""
    return repo.update(mountain_id, record)


def remove_mountain(mountain_id: int, repo: MountainRepository) -> bool:
    """Delete the first record with *mountain_id*.  Returns ``False`` if absent."""
    return repo.delete(mountain_id)
