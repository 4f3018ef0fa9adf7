"""Sort orders accepted by the link listings.

Kept in the domain layer so both the CLI and the resource accessors share
a single source of truth. Values are sent verbatim; the accessors do not
reject strings outside these enums.
"""

from __future__ import annotations

from enum import Enum


class PromotedSort(str, Enum):
    """Ordering for `links/promoted` (main page)."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"

    def __str__(self) -> str:
        return self.value


class UpcomingSort(str, Enum):
    """Ordering for `links/upcoming`."""

    DATE = "date"  # najnowsze
    VOTES = "votes"  # wykopywane
    COMMENTS = "comments"  # komentowane

    def __str__(self) -> str:
        return self.value
