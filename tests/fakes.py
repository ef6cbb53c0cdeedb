"""In-memory fakes for testing.

Stand-ins for the host's collaborators: a notifier that records what
it was told, and deterministic clock / random sources for order ids.
No terminal output, no side effects.
"""

from __future__ import annotations

from printshop.domain.notification import Notification, NotificationKind, Notifier


class FakeNotifier(Notifier):

    def __init__(self) -> None:
        self.sent: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.sent.append(notification)

    def of_kind(self, kind: NotificationKind) -> list[Notification]:
        return [n for n in self.sent if n.kind is kind]


class FixedClock:

    def __init__(self, millis: int = 1700000000000) -> None:
        self.millis = millis

    def __call__(self) -> int:
        return self.millis


class FixedRandom:
    """Returns the same suffix every time, and remembers the bound it was asked for."""

    def __init__(self, value: int = 42) -> None:
        self.value = value
        self.bounds: list[int] = []

    def __call__(self, bound: int) -> int:
        self.bounds.append(bound)
        return self.value
