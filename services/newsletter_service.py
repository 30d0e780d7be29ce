"""
Newsletter service for creating and confirming subscriptions.

This module provides a service class that handles the two subscription
workflows: creating a pending subscriber with a confirmation token, and
confirming a subscriber from that token.

Both workflows take the store they run against as their first argument and
return an ``Outcome``; expected user errors (malformed input, unknown token,
already confirmed) are outcomes rather than exceptions. Store failures are
logged here, once, with the name of the failing operation, and reported as
``Outcome.INTERNAL_ERROR`` without any detail reaching the caller.
"""

import logging

from core.utils.string import is_valid_input_string, generate_random_string
from models.subscriber import STATUS_CONFIRMED
from services.service_constants import (
    Outcome,
    TOKEN_MAX_LENGTH,
    NAME_MAX_LENGTH,
    SUBSCRIPTION_TOKEN_LENGTH
)
from services.subscription_store import StoreError

logger = logging.getLogger(__name__)


def generate_subscription_token() -> str:
    """Return a new random alphanumeric confirmation token."""
    return generate_random_string(SUBSCRIPTION_TOKEN_LENGTH)


def _log_store_failure(workflow: str, error: StoreError) -> None:
    logger.error(
        "%s failed during %s", workflow, error.operation,
        exc_info=error,
        extra={'operation': error.operation, 'workflow': workflow}
    )


class NewsletterService:
    """
    Service for newsletter subscription and confirmation.

    Stores passed to these methods must provide ``get_subscriber_id_from_token``,
    ``get_subscriber_status``, ``confirm_subscriber``,
    ``get_subscriber_id_by_email`` and ``create_pending_subscriber`` with the
    semantics of ``services.subscription_store.SubscriptionStore``.
    """

    @staticmethod
    def confirm_subscription(store, token: str, max_length: int = TOKEN_MAX_LENGTH) -> Outcome:
        """
        Confirm a pending subscriber using a confirmation token.

        Args:
            store: Subscription store to run the queries against
            token: The confirmation token from the query string
            max_length: Maximum token length in grapheme clusters

        Returns:
            Outcome: ``OK`` when this call confirmed the subscriber,
            ``BAD_REQUEST`` for a malformed token, ``UNAUTHORIZED`` for a token
            that was never issued, ``CONFLICT`` when the subscriber is already
            confirmed and ``INTERNAL_ERROR`` when the store failed
        """
        if not is_valid_input_string(token, max_length):
            return Outcome.BAD_REQUEST

        try:
            subscriber_id = store.get_subscriber_id_from_token(token)
            if subscriber_id is None:
                return Outcome.UNAUTHORIZED

            if store.get_subscriber_status(subscriber_id) == STATUS_CONFIRMED:
                return Outcome.CONFLICT

            # False when a concurrent request confirmed the subscriber first
            if not store.confirm_subscriber(subscriber_id):
                return Outcome.CONFLICT

        except StoreError as e:
            _log_store_failure('confirm_subscription', e)
            return Outcome.INTERNAL_ERROR

        logger.info("Confirmed newsletter subscription", extra={'subscriber_id': str(subscriber_id)})
        return Outcome.OK

    @staticmethod
    def subscribe(store, name: str, email: str, max_name_length: int = NAME_MAX_LENGTH) -> Outcome:
        """
        Create a subscriber in ``pending_confirmation`` with a new token.

        The email address is expected to be format-checked by the caller; it
        is normalised to lower case here.

        Args:
            store: Subscription store to run the queries against
            name: Subscriber's name
            email: Subscriber's email address
            max_name_length: Maximum name length in grapheme clusters

        Returns:
            Outcome: ``OK`` when the subscriber was created, ``BAD_REQUEST`` for
            an invalid name, ``CONFLICT`` when the email is already subscribed
            and ``INTERNAL_ERROR`` when the store failed
        """
        if not is_valid_input_string(name, max_name_length):
            return Outcome.BAD_REQUEST

        email = email.strip().lower()

        try:
            if store.get_subscriber_id_by_email(email) is not None:
                return Outcome.CONFLICT

            subscriber_id = store.create_pending_subscriber(email, name.strip(), generate_subscription_token())

        except StoreError as e:
            _log_store_failure('subscribe', e)
            return Outcome.INTERNAL_ERROR

        logger.info("New newsletter subscription request", extra={'subscriber_id': str(subscriber_id)})
        return Outcome.OK
