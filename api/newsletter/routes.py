# api/newsletter/routes.py

import logging
from typing import Tuple

from flask import Blueprint, request, current_app
from marshmallow import ValidationError

from extensions import db
from services.newsletter_service import NewsletterService
from services.service_constants import Outcome
from services.subscription_store import SubscriptionStore
from .schemas import subscription_form_schema, confirmation_parameters_schema

logger = logging.getLogger(__name__)

newsletter_api = Blueprint('newsletter_api', __name__)

# Status code for each workflow outcome; every response body is empty
OUTCOME_STATUS_CODES = {
    Outcome.OK: 200,
    Outcome.BAD_REQUEST: 400,
    Outcome.UNAUTHORIZED: 401,
    Outcome.CONFLICT: 409,
    Outcome.INTERNAL_ERROR: 500
}


def get_store() -> SubscriptionStore:
    """Build a subscription store over the request-scoped session."""
    return SubscriptionStore(db.session)


def outcome_response(outcome: Outcome) -> Tuple[str, int]:
    return '', OUTCOME_STATUS_CODES[outcome]


@newsletter_api.route('/subscriptions', methods=['POST'])
def subscribe():
    """
    Newsletter subscription endpoint

    Accepts a form-encoded body with ``name`` and ``email`` and creates a
    subscriber waiting for confirmation.

    Returns:
        Empty response: 200 on success, 400 for invalid input, 409 when the
        email is already subscribed, 500 on a store failure
    """
    try:
        form = subscription_form_schema.load(request.form.to_dict())
    except ValidationError as e:
        logger.debug("Rejected subscription form: %s", sorted(e.messages))
        return outcome_response(Outcome.BAD_REQUEST)

    outcome = NewsletterService.subscribe(
        get_store(),
        form['name'],
        form['email'],
        max_name_length=current_app.config['NAME_MAX_LENGTH']
    )
    return outcome_response(outcome)


@newsletter_api.route('/subscriptions/confirm', methods=['GET'])
def confirm_subscription():
    """
    Confirm a pending subscriber with the token from the confirmation link

    Query parameters:
        subscription_token: The confirmation token

    Returns:
        Empty response: 200 confirmed, 400 malformed or missing token,
        401 unknown token, 409 already confirmed, 500 on a store failure
    """
    try:
        params = confirmation_parameters_schema.load(request.args.to_dict())
    except ValidationError:
        return outcome_response(Outcome.BAD_REQUEST)

    outcome = NewsletterService.confirm_subscription(
        get_store(),
        params['subscription_token'],
        max_length=current_app.config['TOKEN_MAX_LENGTH']
    )
    return outcome_response(outcome)
