"""
Subscription inspection commands for the newsletter subscription service CLI.
"""

import json

import click
from flask.cli import AppGroup
from sqlalchemy import select

from extensions import db
from models.subscriber import Subscription, STATUS_PENDING_CONFIRMATION, STATUS_CONFIRMED

subscriptions_cli = AppGroup('subscriptions', help='Inspect newsletter subscriptions.')


@subscriptions_cli.command('list')
@click.option('--status', type=click.Choice([STATUS_PENDING_CONFIRMATION, STATUS_CONFIRMED]),
              default=None, help='Only show subscribers in this state')
@click.option('--format', 'output_format', type=click.Choice(['text', 'json']), default='text',
              help='Output format')
def list_subscriptions(status: str, output_format: str) -> None:
    """
    List subscribers, oldest first.

    Examples:
        $ flask subscriptions list --status pending_confirmation
        $ flask subscriptions list --format json
    """
    query = select(Subscription).order_by(Subscription.subscribed_at)
    if status:
        query = query.where(Subscription.status == status)

    subscribers = db.session.execute(query).scalars().all()

    if output_format == 'json':
        click.echo(json.dumps([s.to_dict() for s in subscribers], indent=2))
        return

    for subscriber in subscribers:
        click.echo(f"{subscriber.id}  {subscriber.status:<20}  {subscriber.email}")
    click.echo(f"{len(subscribers)} subscriber(s)")
