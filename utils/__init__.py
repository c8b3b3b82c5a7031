"""
Utils Package - Contact pipeline building blocks
"""

from .errors import ContactServiceError, StorageError, NotFoundError
from .validation import ContactDraft, FieldViolation, ValidationResult, validate_contact
from .store import (
    ContactRecord,
    ContactStore,
    MemoryContactStore,
    DatabaseContactStore,
    build_store
)
from .notifications import (
    send_telegram_notification,
    format_contact_notification,
    notify_new_contact
)
from .security import get_client_ip, RateLimiter, check_rate_limit

__all__ = [
    # Errors
    'ContactServiceError',
    'StorageError',
    'NotFoundError',

    # Validation
    'ContactDraft',
    'FieldViolation',
    'ValidationResult',
    'validate_contact',

    # Store
    'ContactRecord',
    'ContactStore',
    'MemoryContactStore',
    'DatabaseContactStore',
    'build_store',

    # Notifications
    'send_telegram_notification',
    'format_contact_notification',
    'notify_new_contact',

    # Security
    'get_client_ip',
    'RateLimiter',
    'check_rate_limit'
]
