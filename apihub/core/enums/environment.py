"""Deployment environment."""

from enum import Enum


class Environment(str, Enum):
    """Where the service runs.

    Only DEVELOPMENT gets coloured console logs and the /config endpoint;
    every other environment logs JSON lines.
    """

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"

    @property
    def json_logs(self) -> bool:
        return self is not Environment.DEVELOPMENT
