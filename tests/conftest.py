"""
Test fixtures for the newsletter subscription service.

This module provides the pytest fixtures used across the test suite: an
application configured for testing, a database seeded with subscribers, and
an in-memory stand-in for the subscription store.
"""

import uuid
from typing import Any, Dict, Optional, Set

import pytest
from flask import Flask
from flask.testing import FlaskClient

from app import create_app
from extensions import db
from models.subscriber import (
    Subscription,
    SubscriptionToken,
    STATUS_PENDING_CONFIRMATION,
    STATUS_CONFIRMED
)
from services.service_constants import (
    OP_GET_SUBSCRIBER_ID_FROM_TOKEN,
    OP_GET_SUBSCRIBER_STATUS,
    OP_CONFIRM_SUBSCRIBER,
    OP_GET_SUBSCRIBER_ID_BY_EMAIL,
    OP_CREATE_PENDING_SUBSCRIBER
)
from services.subscription_store import StoreError, SubscriptionStore

PENDING_TOKEN = 'tok_valid_unused'
CONFIRMED_TOKEN = 'tok_confirmed_already'


class InMemoryStore:
    """
    Dictionary-backed subscription store.

    Mirrors the contract of ``SubscriptionStore``. Operation names listed in
    ``fail_on`` raise ``StoreError`` with a chained ``ConnectionError``, and
    every call is recorded in ``calls``.
    """

    def __init__(self) -> None:
        self.tokens: Dict[str, uuid.UUID] = {}
        self.subscribers: Dict[uuid.UUID, Dict[str, Any]] = {}
        self.calls: list = []
        self.fail_on: Set[str] = set()

    def _call(self, operation: str) -> None:
        self.calls.append(operation)
        if operation in self.fail_on:
            raise StoreError(operation) from ConnectionError('connection reset by peer')

    def add_subscriber(self, email: str, name: str = 'Ursula Le Guin',
                       status: str = STATUS_PENDING_CONFIRMATION,
                       token: Optional[str] = None) -> uuid.UUID:
        subscriber_id = uuid.uuid4()
        self.subscribers[subscriber_id] = {'email': email, 'name': name, 'status': status}
        if token:
            self.tokens[token] = subscriber_id
        return subscriber_id

    def get_subscriber_id_from_token(self, token: str) -> Optional[uuid.UUID]:
        self._call(OP_GET_SUBSCRIBER_ID_FROM_TOKEN)
        return self.tokens.get(token)

    def get_subscriber_status(self, subscriber_id: uuid.UUID) -> str:
        self._call(OP_GET_SUBSCRIBER_STATUS)
        if subscriber_id not in self.subscribers:
            raise StoreError(OP_GET_SUBSCRIBER_STATUS, 'no row')
        return self.subscribers[subscriber_id]['status']

    def confirm_subscriber(self, subscriber_id: uuid.UUID) -> bool:
        self._call(OP_CONFIRM_SUBSCRIBER)
        subscriber = self.subscribers[subscriber_id]
        if subscriber['status'] == STATUS_CONFIRMED:
            return False
        subscriber['status'] = STATUS_CONFIRMED
        return True

    def get_subscriber_id_by_email(self, email: str) -> Optional[uuid.UUID]:
        self._call(OP_GET_SUBSCRIBER_ID_BY_EMAIL)
        for subscriber_id, subscriber in self.subscribers.items():
            if subscriber['email'] == email:
                return subscriber_id
        return None

    def create_pending_subscriber(self, email: str, name: str, token: str) -> uuid.UUID:
        self._call(OP_CREATE_PENDING_SUBSCRIBER)
        return self.add_subscriber(email, name=name, token=token)


def _add_subscriber(email: str, name: str, status: str, token: str) -> Subscription:
    subscriber = Subscription(id=uuid.uuid4(), email=email, name=name, status=status)
    db.session.add(subscriber)
    db.session.add(SubscriptionToken(subscription_token=token, subscriber=subscriber))
    db.session.commit()
    return subscriber


# Application Fixtures
@pytest.fixture
def app() -> Flask:
    """
    Create an application instance configured for testing.

    Returns:
        Flask: Flask application instance with an in-memory SQLite database
    """
    test_app = create_app('testing')

    with test_app.app_context():
        db.create_all()
        yield test_app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def test_client(app: Flask) -> FlaskClient:
    """Create Flask test client."""
    return app.test_client()


@pytest.fixture
def test_db(app: Flask) -> Any:
    """Provide the database handle for testing."""
    return db


@pytest.fixture
def store(app: Flask) -> SubscriptionStore:
    """Subscription store over the test session."""
    return SubscriptionStore(db.session)


@pytest.fixture
def memory_store() -> InMemoryStore:
    """In-memory subscription store with failure injection."""
    return InMemoryStore()


@pytest.fixture
def pending_subscriber(test_db) -> Subscription:
    """Subscriber waiting for confirmation, reachable through ``tok_valid_unused``."""
    return _add_subscriber('pending@example.com', 'Pending Reader', STATUS_PENDING_CONFIRMATION, PENDING_TOKEN)


@pytest.fixture
def confirmed_subscriber(test_db) -> Subscription:
    """Already confirmed subscriber, reachable through ``tok_confirmed_already``."""
    return _add_subscriber('confirmed@example.com', 'Confirmed Reader', STATUS_CONFIRMED, CONFIRMED_TOKEN)
