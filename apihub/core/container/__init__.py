"""Container module - Centralized dependency injection.

Re-exports every factory so callers can write:

    from apihub.core.container import get_logger, get_list_apis_handler

Organized by concern:
- infrastructure: database, sessions, logging, encryption, HTTP executor
- catalog_handlers: API listing, detail, featured, categories, comparison
- review_handlers: review listing, creation and votes
- history_handlers: request history
- test_request_handlers: test request pipeline
- api_key_handlers: API key vault
"""

# Infrastructure services
from apihub.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_encryption_service,
    get_http_executor,
    get_logger,
)

# Catalog handlers
from apihub.core.container.catalog_handlers import (
    get_compare_apis_handler,
    get_get_api_handler,
    get_list_apis_handler,
    get_list_categories_handler,
    get_list_featured_apis_handler,
)

# Review handlers
from apihub.core.container.review_handlers import (
    get_create_review_handler,
    get_list_reviews_handler,
    get_vote_review_handler,
)

# History handlers
from apihub.core.container.history_handlers import (
    get_get_history_entry_handler,
    get_list_history_handler,
    get_save_history_entry_handler,
)

# Test request handler
from apihub.core.container.test_request_handlers import (
    get_send_test_request_handler,
)

# API key vault handlers
from apihub.core.container.api_key_handlers import (
    get_create_api_key_handler,
    get_delete_api_key_handler,
    get_get_api_key_handler,
    get_list_api_key_services_handler,
    get_list_api_keys_handler,
    get_reveal_api_key_handler,
    get_update_api_key_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_encryption_service",
    "get_http_executor",
    "get_logger",
    # Catalog
    "get_compare_apis_handler",
    "get_get_api_handler",
    "get_list_apis_handler",
    "get_list_categories_handler",
    "get_list_featured_apis_handler",
    # Reviews
    "get_create_review_handler",
    "get_list_reviews_handler",
    "get_vote_review_handler",
    # History
    "get_get_history_entry_handler",
    "get_list_history_handler",
    "get_save_history_entry_handler",
    # Test requests
    "get_send_test_request_handler",
    # API keys
    "get_create_api_key_handler",
    "get_delete_api_key_handler",
    "get_get_api_key_handler",
    "get_list_api_key_services_handler",
    "get_list_api_keys_handler",
    "get_reveal_api_key_handler",
    "get_update_api_key_handler",
]
