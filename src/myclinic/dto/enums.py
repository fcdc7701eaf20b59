"""Closed value sets used by request schemas.

Values match what the web client and the database layer exchange on the wire.
"""

from enum import Enum


class AttachmentEntityType(str, Enum):
    """Kind of record an uploaded file is attached to."""

    PATIENT = "PATIENT"
    VISIT = "VISIT"
    APPOINTMENT = "APPOINTMENT"
    INVOICE = "INVOICE"
    CONVERSATION = "CONVERSATION"


class PaymentMethod(str, Enum):
    CASH = "CASH"
    CARD = "CARD"
    BANK_TRANSFER = "BANK_TRANSFER"
    INSURANCE = "INSURANCE"
    ONLINE = "ONLINE"
    OTHER = "OTHER"


class TimeOffType(str, Enum):
    VACATION = "VACATION"
    SICK = "SICK"
    PERSONAL = "PERSONAL"
    OTHER = "OTHER"


class TimeOffStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"


class ReviewAction(str, Enum):
    """Decision a reviewer takes on a pending time-off request.

    Independent of TimeOffStatus; a review only approves or rejects.
    """

    APPROVE = "APPROVE"
    REJECT = "REJECT"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"
