"""Enumeration types for loan ledger entities."""

from enum import Enum


class LoanStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    OVERDUE = "overdue"


class PaymentKind(str, Enum):
    FULL = "full"
    PARTIAL = "partial"


class NotificationKind(str, Enum):
    CREATION = "creation"
    REMINDER = "reminder"
