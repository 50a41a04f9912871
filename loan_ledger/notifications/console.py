"""Console notifier for debugging and development."""

from collections import Counter

from loan_ledger.models.base import Event
from loan_ledger.notifications.serialization import to_json


class ConsoleNotifier:
    """Print notifications to stdout instead of delivering them."""

    def __init__(self, pretty: bool = True) -> None:
        """Initialize console notifier.

        Parameters
        ----------
        pretty : bool
            Indent the JSON payload.
        """
        self.pretty = pretty
        self.counts: Counter[str] = Counter()

    def send(self, event: Event) -> None:
        """Print one notification with a header naming the loan."""
        print(f"\n{'='*60}")
        print(f"Notification: {event.event_type} (loan {event.subject})")
        print("=" * 60)
        print(to_json(event, pretty=self.pretty))
        self.counts[event.event_type] += 1

    def close(self) -> None:
        """Print how many notifications of each type were shown."""
        print(f"\n{'='*60}")
        print("Console Notifier Summary")
        print("=" * 60)
        for event_type, count in sorted(self.counts.items()):
            print(f"  {event_type}: {count} notifications")
