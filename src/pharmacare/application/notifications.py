"""User-facing notifications emitted by the session stores.

The stores only build ``Notification`` values; how they reach the
shopper (terminal output, log line, toast) is up to the Notifier that
the composition root hands them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Notification:
    title: str
    description: str


class Notifier(ABC):

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        """Deliver *notification* synchronously."""
