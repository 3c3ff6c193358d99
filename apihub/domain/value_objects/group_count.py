"""Name/count pair produced by group-by listings."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GroupCount:
    """A group name and how many rows fall into it.

    Used for catalog categories and API key services.
    """

    name: str
    count: int
