"""
Service Constants for the newsletter subscription service.

This module defines constants and enumerations used across the service layer.
Centralizing these values ensures consistency throughout the application and
keeps HTTP vocabulary out of the services: the API layer maps ``Outcome``
values to status codes.
"""

from enum import Enum, auto

from config.config_constants import TOKEN_MAX_LENGTH, NAME_MAX_LENGTH

# ============================================================================
# Service Outcomes
# ============================================================================

class Outcome(Enum):
    """Logical result of a subscription workflow."""
    OK = auto()
    BAD_REQUEST = auto()
    UNAUTHORIZED = auto()
    CONFLICT = auto()
    INTERNAL_ERROR = auto()


# ============================================================================
# Store Operation Names
# ============================================================================

# Attached to StoreError and to the log entry of every store failure
OP_GET_SUBSCRIBER_ID_FROM_TOKEN = 'get_subscriber_id_from_token'
OP_GET_SUBSCRIBER_STATUS = 'get_subscriber_status'
OP_CONFIRM_SUBSCRIBER = 'confirm_subscriber'
OP_GET_SUBSCRIBER_ID_BY_EMAIL = 'get_subscriber_id_by_email'
OP_CREATE_PENDING_SUBSCRIBER = 'create_pending_subscriber'

# ============================================================================
# Token Settings
# ============================================================================

SUBSCRIPTION_TOKEN_LENGTH = TOKEN_MAX_LENGTH

__all__ = [
    'Outcome',
    'TOKEN_MAX_LENGTH',
    'NAME_MAX_LENGTH',
    'SUBSCRIPTION_TOKEN_LENGTH',
    'OP_GET_SUBSCRIBER_ID_FROM_TOKEN',
    'OP_GET_SUBSCRIBER_STATUS',
    'OP_CONFIRM_SUBSCRIBER',
    'OP_GET_SUBSCRIBER_ID_BY_EMAIL',
    'OP_CREATE_PENDING_SUBSCRIBER'
]
