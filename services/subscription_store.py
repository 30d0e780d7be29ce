"""
Relational store access for the subscription workflows.

``SubscriptionStore`` wraps a SQLAlchemy session and exposes exactly the
queries the subscription and confirmation workflows need. The workflows
receive a store instance as an argument rather than reaching for the global
session, so tests can substitute an in-memory implementation.

Every database failure is rolled back and re-raised as ``StoreError`` naming
the operation that failed, with the original exception chained as
``__cause__``. Logging is left to the caller, which knows which workflow step
was running.
"""

import uuid
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.subscriber import (
    Subscription,
    SubscriptionToken,
    STATUS_CONFIRMED,
    STATUS_PENDING_CONFIRMATION
)
from services.service_constants import (
    OP_GET_SUBSCRIBER_ID_FROM_TOKEN,
    OP_GET_SUBSCRIBER_STATUS,
    OP_CONFIRM_SUBSCRIBER,
    OP_GET_SUBSCRIBER_ID_BY_EMAIL,
    OP_CREATE_PENDING_SUBSCRIBER
)


class StoreError(Exception):
    """
    A query against the subscription store failed.

    Attributes:
        operation: Name of the store operation that failed
    """

    def __init__(self, operation: str, message: Optional[str] = None) -> None:
        self.operation = operation
        super().__init__(message or f"Store operation '{operation}' failed")


class SubscriptionStore:
    """
    Subscription queries over a SQLAlchemy session.

    Args:
        session: Session to run queries on, usually ``db.session``
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    @contextmanager
    def _operation(self, name: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreError(name, f"Store operation '{name}' failed: {e.__class__.__name__}") from e

    def get_subscriber_id_from_token(self, token: str) -> Optional[uuid.UUID]:
        """
        Look up the subscriber a confirmation token belongs to.

        Returns:
            The subscriber id, or None if the token was never issued
        """
        with self._operation(OP_GET_SUBSCRIBER_ID_FROM_TOKEN):
            return self.session.execute(
                select(SubscriptionToken.subscriber_id)
                .where(SubscriptionToken.subscription_token == token)
            ).scalar_one_or_none()

    def get_subscriber_status(self, subscriber_id: uuid.UUID) -> str:
        """
        Read the status of a subscriber.

        Exactly one row must match; zero or several rows raise ``StoreError``.
        """
        with self._operation(OP_GET_SUBSCRIBER_STATUS):
            return self.session.execute(
                select(Subscription.status).where(Subscription.id == subscriber_id)
            ).scalar_one()

    def confirm_subscriber(self, subscriber_id: uuid.UUID) -> bool:
        """
        Move a subscriber to ``confirmed``.

        The update only matches rows that are not confirmed yet, so of two
        concurrent confirmations exactly one changes the row.

        Returns:
            True if this call confirmed the subscriber, False if it already was
        """
        with self._operation(OP_CONFIRM_SUBSCRIBER):
            result = self.session.execute(
                update(Subscription)
                .where(Subscription.id == subscriber_id, Subscription.status != STATUS_CONFIRMED)
                .values(status=STATUS_CONFIRMED)
                .execution_options(synchronize_session=False)
            )
            self.session.commit()
            return result.rowcount > 0

    def get_subscriber_id_by_email(self, email: str) -> Optional[uuid.UUID]:
        """Return the id of the subscriber registered with ``email``, if any."""
        with self._operation(OP_GET_SUBSCRIBER_ID_BY_EMAIL):
            return self.session.execute(
                select(Subscription.id).where(Subscription.email == email)
            ).scalar_one_or_none()

    def create_pending_subscriber(self, email: str, name: str, token: str) -> uuid.UUID:
        """
        Insert a subscriber in ``pending_confirmation`` together with its token.

        Both rows are committed in one transaction.

        Returns:
            The new subscriber id
        """
        with self._operation(OP_CREATE_PENDING_SUBSCRIBER):
            subscriber_id = uuid.uuid4()
            subscriber = Subscription(
                id=subscriber_id,
                email=email,
                name=name,
                status=STATUS_PENDING_CONFIRMATION
            )
            self.session.add(subscriber)
            self.session.add(SubscriptionToken(subscription_token=token, subscriber=subscriber))
            self.session.commit()
            return subscriber_id
