"""Configuration management for loan-ledger."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from loan_ledger.exceptions import ConfigurationError

NOTIFICATION_BACKENDS = ("console", "jsonl", "kafka", "none")
LOG_FORMATS = ("standard", "json")


@dataclass
class KafkaConfig:
    """Kafka producer configuration for the notification topic."""

    bootstrap_servers: str = "localhost:9092"
    acks: str = "all"
    linger_ms: int = 5
    retries: int = 3

    def to_dict(self) -> dict[str, Any]:
        """Convert to confluent-kafka config dict."""
        return {
            "bootstrap.servers": self.bootstrap_servers,
            "acks": self.acks,
            "linger.ms": self.linger_ms,
            "retries": self.retries,
        }


@dataclass
class NotificationConfig:
    """Notification side-channel configuration."""

    backend: str = "console"
    topic: str = "loans.notifications"
    output_path: Path = field(default_factory=lambda: Path("output/notifications.jsonl"))
    background: bool = True
    source: str = "loan-ledger"


@dataclass
class DisplayConfig:
    """Display formatting for amounts."""

    currency_suffix: str = "Ar"
    thousands_separator: str = " "


@dataclass
class LedgerConfig:
    """Main configuration for loan-ledger."""

    kafka: KafkaConfig = field(default_factory=KafkaConfig)
    notifications: NotificationConfig = field(default_factory=NotificationConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    def validate(self) -> None:
        """Raise ConfigurationError when a setting has an unknown value."""
        if self.notifications.backend not in NOTIFICATION_BACKENDS:
            raise ConfigurationError(
                f"Unknown notification backend {self.notifications.backend!r}; "
                f"expected one of {', '.join(NOTIFICATION_BACKENDS)}"
            )
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format {self.log_format!r}; expected one of {', '.join(LOG_FORMATS)}"
            )

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        import os

        kafka = KafkaConfig(
            bootstrap_servers=os.getenv("KAFKA_BOOTSTRAP_SERVERS", "localhost:9092"),
            acks=os.getenv("KAFKA_ACKS", "all"),
        )

        notifications = NotificationConfig(
            backend=os.getenv("LOAN_LEDGER_NOTIFIER", "console"),
            topic=os.getenv("LOAN_LEDGER_TOPIC", "loans.notifications"),
            output_path=Path(
                os.getenv("LOAN_LEDGER_NOTIFICATIONS_FILE", "output/notifications.jsonl")
            ),
            background=os.getenv("LOAN_LEDGER_NOTIFY_BACKGROUND", "true").lower() == "true",
        )

        display = DisplayConfig(
            currency_suffix=os.getenv("LOAN_LEDGER_CURRENCY", "Ar"),
        )

        seed = os.getenv("LOAN_LEDGER_SEED")

        config = cls(
            kafka=kafka,
            notifications=notifications,
            display=display,
            seed=int(seed) if seed else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
        config.validate()
        return config
