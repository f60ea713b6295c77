"""Notifier adapters."""

from __future__ import annotations

import logging

import click

from pharmacare.application.notifications import Notification, Notifier

logger = logging.getLogger(__name__)


class EchoNotifier(Notifier):
    """Prints each notification to the terminal, toast-style."""

    def notify(self, notification: Notification) -> None:
        click.echo(
            f"{click.style(notification.title, bold=True)}: {notification.description}"
        )


class LoggingNotifier(Notifier):

    def notify(self, notification: Notification) -> None:
        logger.info("%s: %s", notification.title, notification.description)
