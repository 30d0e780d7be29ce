"""
Newsletter service tests.

Exercises the confirmation and subscription workflows against the in-memory
store, so every outcome, including store failures, can be produced without a
database.
"""

import logging

import pytest

from models.subscriber import STATUS_CONFIRMED, STATUS_PENDING_CONFIRMATION
from services.newsletter_service import NewsletterService, generate_subscription_token
from services.service_constants import (
    Outcome,
    OP_GET_SUBSCRIBER_ID_FROM_TOKEN,
    OP_GET_SUBSCRIBER_STATUS,
    OP_CONFIRM_SUBSCRIBER,
    OP_GET_SUBSCRIBER_ID_BY_EMAIL,
    OP_CREATE_PENDING_SUBSCRIBER
)


class TestConfirmSubscription:
    """Confirmation workflow outcomes."""

    def test_pending_subscriber_is_confirmed(self, memory_store) -> None:
        subscriber_id = memory_store.add_subscriber('reader@example.com', token='tok_valid_unused')

        outcome = NewsletterService.confirm_subscription(memory_store, 'tok_valid_unused')

        assert outcome is Outcome.OK
        assert memory_store.get_subscriber_status(subscriber_id) == STATUS_CONFIRMED

    def test_already_confirmed_is_conflict_without_write(self, memory_store) -> None:
        memory_store.add_subscriber('reader@example.com', status=STATUS_CONFIRMED,
                                    token='tok_confirmed_already')

        outcome = NewsletterService.confirm_subscription(memory_store, 'tok_confirmed_already')

        assert outcome is Outcome.CONFLICT
        assert OP_CONFIRM_SUBSCRIBER not in memory_store.calls

    def test_unknown_token_is_unauthorized(self, memory_store) -> None:
        outcome = NewsletterService.confirm_subscription(memory_store, 'unknown_xyz')

        assert outcome is Outcome.UNAUTHORIZED
        assert memory_store.calls == [OP_GET_SUBSCRIBER_ID_FROM_TOKEN]

    @pytest.mark.parametrize('token', ['<script>', 'a/b', '', '   ', 'x' * 26, 'tok{1}'])
    def test_malformed_token_is_bad_request_without_store_access(self, memory_store, token) -> None:
        outcome = NewsletterService.confirm_subscription(memory_store, token)

        assert outcome is Outcome.BAD_REQUEST
        assert memory_store.calls == []

    def test_confirming_twice_never_succeeds_twice(self, memory_store) -> None:
        memory_store.add_subscriber('reader@example.com', token='tok_valid_unused')

        first = NewsletterService.confirm_subscription(memory_store, 'tok_valid_unused')
        second = NewsletterService.confirm_subscription(memory_store, 'tok_valid_unused')

        assert (first, second) == (Outcome.OK, Outcome.CONFLICT)

    def test_lost_race_is_conflict(self, memory_store, monkeypatch) -> None:
        subscriber_id = memory_store.add_subscriber('reader@example.com', token='tok_valid_unused')
        original_status = memory_store.get_subscriber_status

        def status_then_concurrent_confirm(sid):
            status = original_status(sid)
            # Another request confirms between our read and our write
            memory_store.subscribers[subscriber_id]['status'] = STATUS_CONFIRMED
            return status

        monkeypatch.setattr(memory_store, 'get_subscriber_status', status_then_concurrent_confirm)

        outcome = NewsletterService.confirm_subscription(memory_store, 'tok_valid_unused')

        assert outcome is Outcome.CONFLICT

    def test_custom_max_length(self, memory_store) -> None:
        memory_store.add_subscriber('reader@example.com', token='abcdef')

        assert NewsletterService.confirm_subscription(memory_store, 'abcdef', max_length=5) is Outcome.BAD_REQUEST
        assert NewsletterService.confirm_subscription(memory_store, 'abcdef', max_length=6) is Outcome.OK

    @pytest.mark.parametrize('operation', [
        OP_GET_SUBSCRIBER_ID_FROM_TOKEN,
        OP_GET_SUBSCRIBER_STATUS,
        OP_CONFIRM_SUBSCRIBER
    ])
    def test_store_failure_is_internal_error_and_logged(self, memory_store, caplog, operation) -> None:
        memory_store.add_subscriber('reader@example.com', token='tok_valid_unused')
        memory_store.fail_on.add(operation)

        with caplog.at_level(logging.ERROR, logger='services.newsletter_service'):
            outcome = NewsletterService.confirm_subscription(memory_store, 'tok_valid_unused')

        assert outcome is Outcome.INTERNAL_ERROR
        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert errors[0].operation == operation
        assert operation in errors[0].getMessage()
        assert isinstance(errors[0].exc_info[1].__cause__, ConnectionError)

    def test_store_failure_leaves_subscriber_pending(self, memory_store) -> None:
        subscriber_id = memory_store.add_subscriber('reader@example.com', token='tok_valid_unused')
        memory_store.fail_on.add(OP_CONFIRM_SUBSCRIBER)

        NewsletterService.confirm_subscription(memory_store, 'tok_valid_unused')

        assert memory_store.subscribers[subscriber_id]['status'] == STATUS_PENDING_CONFIRMATION

    def test_validation_failure_is_not_logged(self, memory_store, caplog) -> None:
        with caplog.at_level(logging.DEBUG):
            NewsletterService.confirm_subscription(memory_store, '<script>')

        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


class TestSubscribe:
    """Subscription creation workflow outcomes."""

    def test_creates_pending_subscriber_with_token(self, memory_store) -> None:
        outcome = NewsletterService.subscribe(memory_store, 'Ursula Le Guin', 'Ursula@Example.com ')

        assert outcome is Outcome.OK
        subscriber_id = memory_store.get_subscriber_id_by_email('ursula@example.com')
        assert memory_store.subscribers[subscriber_id]['status'] == STATUS_PENDING_CONFIRMATION
        tokens = [t for t, sid in memory_store.tokens.items() if sid == subscriber_id]
        assert len(tokens) == 1
        assert len(tokens[0]) == 25

    def test_issued_token_confirms_subscriber(self, memory_store) -> None:
        NewsletterService.subscribe(memory_store, 'Ursula Le Guin', 'ursula@example.com')
        (token,) = memory_store.tokens

        assert NewsletterService.confirm_subscription(memory_store, token) is Outcome.OK

    def test_name_is_trimmed(self, memory_store) -> None:
        NewsletterService.subscribe(memory_store, '  Ursula  ', 'ursula@example.com')
        (subscriber,) = memory_store.subscribers.values()

        assert subscriber['name'] == 'Ursula'

    @pytest.mark.parametrize('name', ['', '   ', 'Robert"); DROP TABLE', 'a' * 257])
    def test_invalid_name_is_bad_request(self, memory_store, name) -> None:
        outcome = NewsletterService.subscribe(memory_store, name, 'ursula@example.com')

        assert outcome is Outcome.BAD_REQUEST
        assert memory_store.calls == []

    def test_duplicate_email_is_conflict(self, memory_store) -> None:
        memory_store.add_subscriber('ursula@example.com')

        outcome = NewsletterService.subscribe(memory_store, 'Ursula', 'URSULA@example.com')

        assert outcome is Outcome.CONFLICT
        assert OP_CREATE_PENDING_SUBSCRIBER not in memory_store.calls

    @pytest.mark.parametrize('operation', [OP_GET_SUBSCRIBER_ID_BY_EMAIL, OP_CREATE_PENDING_SUBSCRIBER])
    def test_store_failure_is_internal_error(self, memory_store, caplog, operation) -> None:
        memory_store.fail_on.add(operation)

        with caplog.at_level(logging.ERROR, logger='services.newsletter_service'):
            outcome = NewsletterService.subscribe(memory_store, 'Ursula', 'ursula@example.com')

        assert outcome is Outcome.INTERNAL_ERROR
        assert [r.operation for r in caplog.records if r.levelno == logging.ERROR] == [operation]


def test_generate_subscription_token() -> None:
    token = generate_subscription_token()

    assert len(token) == 25
    assert token.isalnum()
