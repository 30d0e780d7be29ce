"""
Subscription models for the newsletter subscription service.

This module defines the two tables the subscription workflow works against:

- ``subscriptions``: one row per subscriber, carrying the confirmation status
- ``subscription_tokens``: confirmation tokens, each pointing at one subscriber

A subscriber is created in ``pending_confirmation`` and moves to ``confirmed``
exactly once. Tokens are never deleted or invalidated after use.
"""

from datetime import datetime, timezone
import uuid

from sqlalchemy import Column, DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import relationship

from models.base import BaseModel

# Subscription status values
STATUS_PENDING_CONFIRMATION = 'pending_confirmation'
STATUS_CONFIRMED = 'confirmed'


class Subscription(BaseModel):
    """
    Subscriber entity.

    Attributes:
        id (uuid.UUID): Primary key, unique identifier for the subscriber
        email (str): Email address of the subscriber (required, unique)
        name (str): Name of the subscriber
        subscribed_at (datetime): When the subscription was requested
        status (str): ``pending_confirmation`` or ``confirmed``
        tokens (list): Confirmation tokens issued for this subscriber
    """
    __tablename__ = 'subscriptions'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(String(255), nullable=False, unique=True, index=True)
    name = Column(String(1024), nullable=False)
    subscribed_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)
    status = Column(String(32), nullable=False, default=STATUS_PENDING_CONFIRMATION)

    tokens = relationship('SubscriptionToken', back_populates='subscriber', lazy='select')

    @property
    def is_confirmed(self) -> bool:
        return self.status == STATUS_CONFIRMED

    def __repr__(self) -> str:
        return f"<Subscription(id={self.id}, email='{self.email}', status='{self.status}')>"


class SubscriptionToken(BaseModel):
    """
    Confirmation token issued to a subscriber.

    Attributes:
        subscription_token (str): The opaque token, primary key
        subscriber_id (uuid.UUID): Subscriber the token confirms
    """
    __tablename__ = 'subscription_tokens'

    subscription_token = Column(String(64), primary_key=True)
    subscriber_id = Column(Uuid, ForeignKey('subscriptions.id'), nullable=False, index=True)

    subscriber = relationship('Subscription', back_populates='tokens')

    def __repr__(self) -> str:
        return f"<SubscriptionToken(subscriber_id={self.subscriber_id})>"
