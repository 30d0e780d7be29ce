"""
CLI Initialization Module for the newsletter subscription service.

Command groups are attached to ``app.cli`` by the application factory and are
available through the ``flask`` command:

- ``flask database init|drop|check``
- ``flask subscriptions list``
- ``flask db ...`` (migrations, provided by Flask-Migrate)
"""

import logging

from flask import Flask

from .commands import db_cli, subscriptions_cli

# Initialize logger
logger = logging.getLogger(__name__)


def register_cli_commands(app: Flask) -> None:
    """
    Register CLI command groups with the application.

    Args:
        app: Flask application instance
    """
    app.cli.add_command(db_cli)
    app.cli.add_command(subscriptions_cli)
