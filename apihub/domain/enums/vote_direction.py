"""Helpfulness vote direction."""

from enum import Enum


class VoteDirection(str, Enum):
    """Direction of a helpfulness vote on a review."""

    UP = "up"
    DOWN = "down"

    @property
    def delta(self) -> int:
        """Change applied to a review's helpful_count."""
        return 1 if self is VoteDirection.UP else -1
