"""
Services Package for the newsletter subscription service.

This package provides service-layer functionality that encapsulates business logic
independently from presentation concerns. Services are designed to be reusable
across different presentation layers (API, CLI).
"""

from .service_constants import Outcome
from .subscription_store import SubscriptionStore, StoreError
from .newsletter_service import NewsletterService, generate_subscription_token

__all__ = [
    'Outcome',
    'SubscriptionStore',
    'StoreError',
    'NewsletterService',
    'generate_subscription_token'
]
