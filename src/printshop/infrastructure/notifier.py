"""Terminal implementation of Notifier."""

from __future__ import annotations

import click

from printshop.domain.notification import Notification, NotificationKind, Notifier


class ConsoleNotifier(Notifier):
    """Prints notifications; rejections go to stderr in red."""

    def notify(self, notification: Notification) -> None:
        if notification.kind is NotificationKind.REJECTED:
            click.secho(notification.title, fg="red", bold=True, err=True)
            click.secho(notification.description, fg="red", err=True)
        else:
            click.secho(notification.title, fg="green", bold=True)
            click.echo(notification.description)
