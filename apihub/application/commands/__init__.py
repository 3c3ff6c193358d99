"""Commands (CQRS write operations).

Commands are immutable dataclasses with imperative names. Handlers in
``apihub.application.commands.handlers`` execute them.
"""

from apihub.application.commands.api_key_commands import (
    CreateApiKey,
    DeleteApiKey,
    RevealApiKey,
    UpdateApiKey,
)
from apihub.application.commands.history_commands import SaveHistoryEntry
from apihub.application.commands.review_commands import CreateReview, VoteReview
from apihub.application.commands.test_request_commands import SendTestRequest

__all__ = [
    "CreateApiKey",
    "CreateReview",
    "DeleteApiKey",
    "RevealApiKey",
    "SaveHistoryEntry",
    "SendTestRequest",
    "UpdateApiKey",
    "VoteReview",
]
