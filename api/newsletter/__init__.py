"""
Newsletter API module for the newsletter subscription service.

Key endpoints:
- POST /subscriptions: Subscribe a name and email to the newsletter
- GET /subscriptions/confirm: Confirm a subscription with its token

Every endpoint answers with an empty body; the status code carries the result.
"""

from .routes import newsletter_api

__all__ = ['newsletter_api']
