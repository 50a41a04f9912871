"""Kafka notifier publishing loan notifications to a topic."""

import logging
import time
from dataclasses import dataclass

from confluent_kafka import Producer

from loan_ledger.config import KafkaConfig
from loan_ledger.exceptions import NotificationError
from loan_ledger.models.base import Event
from loan_ledger.notifications.serialization import to_json

logger = logging.getLogger(__name__)


@dataclass
class ProducerStats:
    """Track producer delivery statistics."""

    sent: int = 0
    delivered: int = 0
    failed: int = 0
    start_time: float | None = None

    @property
    def success_rate(self) -> float:
        """Calculate success rate."""
        total = self.delivered + self.failed
        return self.delivered / total if total > 0 else 0.0


class KafkaNotifier:
    """Publish notifications to a Kafka topic, keyed by loan id."""

    def __init__(self, config: KafkaConfig | str, topic: str = "loans.notifications") -> None:
        """Initialize Kafka notifier.

        Parameters
        ----------
        config : KafkaConfig | str
            Producer configuration or bootstrap servers string.
        topic : str
            Topic notifications are published to.
        """
        if isinstance(config, str):
            config = KafkaConfig(bootstrap_servers=config)

        self.config = config
        self.topic = topic
        self.producer = Producer(config.to_dict())
        self.stats = ProducerStats(start_time=time.time())

    def _delivery_callback(self, err: object, msg: object) -> None:
        """Handle delivery reports."""
        if err:
            self.stats.failed += 1
            logger.error("Notification delivery failed: %s", err)
        else:
            self.stats.delivered += 1
            logger.debug("Delivered to %s[%d]@%d", msg.topic(), msg.partition(), msg.offset())

    def send(self, event: Event) -> None:
        """Queue one notification for delivery."""
        value = to_json(event).encode("utf-8")
        try:
            self.producer.produce(
                topic=self.topic,
                key=event.subject.encode("utf-8"),
                value=value,
                callback=self._delivery_callback,
            )
        except (BufferError, ValueError) as exc:
            self.stats.failed += 1
            raise NotificationError(f"Could not queue {event.event_type}: {exc}") from exc
        self.stats.sent += 1
        self.producer.poll(0)

    def flush(self, timeout: float = 30.0) -> None:
        """Flush pending messages."""
        self.producer.flush(timeout)

    def close(self) -> None:
        """Flush and close the producer."""
        self.flush()
        logger.info(
            "Kafka notifier closed: sent=%d, delivered=%d, failed=%d",
            self.stats.sent,
            self.stats.delivered,
            self.stats.failed,
        )
