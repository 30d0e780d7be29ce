"""
CLI command groups for the newsletter subscription service.
"""

from .db import db_cli
from .subscriptions import subscriptions_cli

__all__ = ['db_cli', 'subscriptions_cli']
