"""Rich-based console output for notifications.

Provides an observer echoing notifications as they are recorded, and a
table renderer for a finished validation pass.

Requires the 'rich' package: pip install validation-notifications[rich]
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from validation_notifications.events import (
    NotificationEvent,
    NotificationEventType,
    NotificationObserver,
)
from validation_notifications.notification import Notification

if TYPE_CHECKING:
    from rich.console import Console
    from rich.table import Table

__all__ = ["RichNotificationObserver", "render_notifications"]


class RichNotificationObserver(NotificationObserver):
    """Prints each notification to a Rich console as it is recorded.

    Example:
        rules = ValidationRules[User]()
        rules.add_observer(RichNotificationObserver())
        rules.is_email("Email", "nope")
        # ✗ Email: The 'nope' is not a valid email

    Requires:
        pip install rich
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the observer.

        Args:
            console: Rich Console instance. If None, creates a new one.
        """
        # Import Rich components here to make them optional
        from rich.console import Console

        self._console = console or Console()
        self._count = 0

    @property
    def count(self) -> int:
        """Number of notifications printed since creation or the last clear."""
        return self._count

    def on_event(self, event: NotificationEvent) -> None:
        """Print added notifications and summarize merges and resets.

        Args:
            event: The notifier event to handle.
        """
        from rich.markup import escape

        if event.event_type == NotificationEventType.NOTIFICATION_ADDED:
            self._count += 1
            key = event.data.get("key")
            message = escape(str(event.data.get("message", "")))
            label = f"[cyan]{escape(key)}[/]: " if key else ""
            self._console.print(f"[red]✗[/] {label}{message}")

        elif event.event_type == NotificationEventType.NOTIFICATIONS_MERGED:
            merged = event.data.get("count", 0)
            self._count += merged
            self._console.print(f"[yellow]+{merged}[/] merged notification(s)")

        elif event.event_type == NotificationEventType.NOTIFICATIONS_CLEARED:
            self._count = 0
            self._console.print("[green]Notifications cleared[/]")


def render_notifications(
    notifications: Iterable[Notification],
    title: str = "Notifications",
) -> Table:
    """Build a Rich table of notifications.

    Args:
        notifications: Notifications to render, in order.
        title: Table title.

    Returns:
        Rich Table with one row per notification, or a placeholder row
        when there are none.
    """
    from rich.markup import escape
    from rich.table import Table

    table = Table(
        title=title,
        show_header=True,
        header_style="bold magenta",
        expand=True,
    )
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Field", style="cyan", width=20)
    table.add_column("Message", style="yellow")

    rows = 0
    for i, notification in enumerate(notifications, start=1):
        table.add_row(str(i), escape(notification.key or "-"), escape(notification.message))
        rows += 1

    if rows == 0:
        table.add_row("-", "-", "No notifications")

    return table
