"""JSON Lines notifier writing notifications to a file."""

from pathlib import Path

from loan_ledger.models.base import Event
from loan_ledger.notifications.serialization import to_json


class JsonLinesNotifier:
    """Append notifications to a JSON Lines file, one event per line."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.count = 0

    def send(self, event: Event) -> None:
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(to_json(event) + "\n")
        self.count += 1

    def close(self) -> None:
        """Print summary."""
        print(f"Notifications written to: {self.path} ({self.count} records)")
