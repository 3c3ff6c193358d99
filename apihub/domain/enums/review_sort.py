"""Sort modes for review listings."""

from enum import Enum


class ReviewSort(str, Enum):
    """Ordering applied when listing reviews of an API.

    RECENT orders by creation time, HIGHEST/LOWEST by rating. Ties are
    always broken by creation time then id, newest first.
    """

    RECENT = "recent"
    HIGHEST = "highest"
    LOWEST = "lowest"
