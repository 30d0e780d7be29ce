"""
Data models package for the newsletter subscription service.

This package defines the application's data model layer using SQLAlchemy ORM
through the Flask-SQLAlchemy extension. Models are imported here so that
``db.create_all()`` and Alembic autogeneration see every table.
"""

import logging

# Set up package logger
logger = logging.getLogger(__name__)

# Import base classes first to avoid circular imports
from .base import BaseModel

from .subscriber import (
    Subscription,
    SubscriptionToken,
    STATUS_PENDING_CONFIRMATION,
    STATUS_CONFIRMED
)

__all__ = [
    'BaseModel',
    'Subscription',
    'SubscriptionToken',
    'STATUS_PENDING_CONFIRMATION',
    'STATUS_CONFIRMED'
]
