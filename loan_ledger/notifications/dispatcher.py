"""Fire-and-forget notification dispatch.

A notification is attempted after every successful ledger mutation, but its
outcome never reaches the caller: failures are logged and dropped.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor

from loan_ledger.config import DisplayConfig
from loan_ledger.models.enums import NotificationKind
from loan_ledger.models.loan import Loan
from loan_ledger.notifications.base import Notifier, build_notification

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """Send notifications without blocking the ledger operation."""

    def __init__(
        self,
        notifier: Notifier,
        *,
        background: bool = True,
        source: str = "loan-ledger",
        display: DisplayConfig | None = None,
    ) -> None:
        """Initialize dispatcher.

        Parameters
        ----------
        notifier : Notifier
            Destination for notifications.
        background : bool
            Deliver on a worker thread. When False, delivery runs inline
            but failures are still swallowed.
        source : str
            Source name stamped on every event.
        display : DisplayConfig | None
            Currency formatting for payload amounts.
        """
        self.notifier = notifier
        self.background = background
        self.source = source
        self.display = display or DisplayConfig()
        self.failures = 0
        self._executor = (
            ThreadPoolExecutor(max_workers=1, thread_name_prefix="loan-notify")
            if background
            else None
        )

    def notify(self, loan: Loan, kind: NotificationKind) -> Future | None:
        """Dispatch a notification about ``loan``.

        Returns
        -------
        Future | None
            The pending delivery in background mode, for observation only.
        """
        if self._executor is None:
            self._deliver(loan, kind)
            return None
        try:
            future = self._executor.submit(self._deliver, loan, kind)
        except RuntimeError:
            # Executor already shut down
            self.failures += 1
            logger.warning(
                "Notification %s dropped for loan %s: dispatcher is shut down",
                getattr(kind, "value", kind), loan.loan_id,
                extra={"loan_id": loan.loan_id},
            )
            return None
        future.add_done_callback(self._log_outcome)
        return future

    def _deliver(self, loan: Loan, kind: NotificationKind) -> None:
        label = getattr(kind, "value", kind)
        try:
            event = build_notification(loan, kind, source=self.source, display=self.display)
            self.notifier.send(event)
        except Exception:
            self.failures += 1
            logger.exception(
                "Notification %s failed for loan %s", label, loan.loan_id,
                extra={"loan_id": loan.loan_id},
            )
            return
        logger.info(
            "Notification %s sent for loan %s", label, loan.loan_id,
            extra={"loan_id": loan.loan_id},
        )

    def _log_outcome(self, future: Future) -> None:
        if future.cancelled():
            logger.warning("Notification cancelled before delivery")

    def shutdown(self, wait: bool = True) -> None:
        """Stop the worker and close the notifier."""
        if self._executor is not None:
            self._executor.shutdown(wait=wait)
        try:
            self.notifier.close()
        except Exception:
            logger.exception("Closing notifier failed")
