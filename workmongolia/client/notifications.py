"""Transient in-page notifications (toasts)"""

from dataclasses import dataclass, field
from typing import List, Optional

DEFAULT = "default"
DESTRUCTIVE = "destructive"


@dataclass
class Notification:
    title: str
    description: str = ""
    variant: str = DEFAULT


@dataclass
class Notifier:
    """Collects notifications for the current view, newest last"""

    items: List[Notification] = field(default_factory=list)

    def success(self, description: str, title: str = "Success") -> Notification:
        return self._push(Notification(title=title, description=description))

    def error(self, description: str, title: str = "Error") -> Notification:
        return self._push(Notification(title=title, description=description, variant=DESTRUCTIVE))

    @property
    def latest(self) -> Optional[Notification]:
        return self.items[-1] if self.items else None

    @property
    def errors(self) -> List[Notification]:
        return [item for item in self.items if item.variant == DESTRUCTIVE]

    def dismiss_all(self) -> None:
        self.items.clear()

    def _push(self, notification: Notification) -> Notification:
        self.items.append(notification)
        return notification
