"""
Database management commands for the newsletter subscription service CLI.

This module provides command-line utilities to create, drop and check the
subscription tables through the application's ORM layer. Incremental schema
changes go through Flask-Migrate (``flask db upgrade``) instead.
"""

import logging

import click
from flask.cli import AppGroup
from sqlalchemy.exc import SQLAlchemyError

from core.health import check_database_health
from extensions import db
import models  # noqa: F401  registers every table on db.metadata

# Initialize CLI group and logger
db_cli = AppGroup('database', help='Create, drop and check the subscription tables.')
logger = logging.getLogger(__name__)


@db_cli.command('init')
def init_db() -> None:
    """
    Initialize database tables.

    Creates all database tables defined in the application models. This command
    should typically be run once when setting up a new environment.

    Examples:
        $ flask database init
    """
    try:
        db.create_all()
    except SQLAlchemyError as e:
        logger.error(f'Database initialization failed: {e}')
        raise click.ClickException(str(e))

    click.echo('Database initialized successfully')
    logger.info('Database tables created')


@db_cli.command('drop')
@click.confirmation_option(prompt='This deletes every subscriber and token. Continue?')
def drop_db() -> None:
    """
    Drop all database tables.

    Examples:
        $ flask database drop --yes
    """
    try:
        db.drop_all()
    except SQLAlchemyError as e:
        logger.error(f'Dropping database tables failed: {e}')
        raise click.ClickException(str(e))

    click.echo('Database tables dropped')
    logger.warning('Database tables dropped')


@db_cli.command('check')
def check_db() -> None:
    """
    Check database connectivity.

    Exits with a non-zero status when the database cannot be reached.

    Examples:
        $ flask database check
    """
    result = check_database_health()
    if result['status'] != 'healthy':
        raise click.ClickException(result['message'])

    click.echo(f"Database: OK ({result['latency_ms']} ms)")
