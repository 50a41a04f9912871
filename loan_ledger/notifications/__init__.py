"""Notification side-channel for loan events."""

from loan_ledger.config import LedgerConfig
from loan_ledger.exceptions import ConfigurationError
from loan_ledger.notifications.base import Notifier, NullNotifier, build_notification
from loan_ledger.notifications.console import ConsoleNotifier
from loan_ledger.notifications.dispatcher import NotificationDispatcher
from loan_ledger.notifications.json_file import JsonLinesNotifier


def create_notifier(config: LedgerConfig) -> Notifier:
    """Build the notifier selected by ``config.notifications.backend``."""
    backend = config.notifications.backend
    if backend == "console":
        return ConsoleNotifier()
    if backend == "jsonl":
        return JsonLinesNotifier(config.notifications.output_path)
    if backend == "kafka":
        from loan_ledger.notifications.kafka import KafkaNotifier

        return KafkaNotifier(config.kafka, topic=config.notifications.topic)
    if backend == "none":
        return NullNotifier()
    raise ConfigurationError(f"Unknown notification backend {backend!r}")


def create_dispatcher(config: LedgerConfig) -> NotificationDispatcher:
    """Build a dispatcher around the configured notifier."""
    return NotificationDispatcher(
        create_notifier(config),
        background=config.notifications.background,
        source=config.notifications.source,
        display=config.display,
    )


__all__ = [
    "ConsoleNotifier",
    "JsonLinesNotifier",
    "NotificationDispatcher",
    "Notifier",
    "NullNotifier",
    "build_notification",
    "create_dispatcher",
    "create_notifier",
]
