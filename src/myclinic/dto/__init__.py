"""Request DTO catalogue.

Importing this package registers every request schema with the default
registry.
"""

from myclinic.dto.attachments import UPLOAD_ATTACHMENT, UploadAttachmentRequest
from myclinic.dto.auth import (
    LOGIN,
    VERIFY_2FA,
    LoginRequest,
    Setup2FAResponse,
    Verify2FARequest,
)
from myclinic.dto.enums import (
    AttachmentEntityType,
    PaymentMethod,
    ReviewAction,
    SortOrder,
    TimeOffStatus,
    TimeOffType,
)
from myclinic.dto.invoices import ADD_PAYMENT, AddPaymentRequest
from myclinic.dto.scheduling import (
    CREATE_TIME_OFF,
    QUERY_SCHEDULES,
    QUERY_TIME_OFF,
    REVIEW_TIME_OFF,
    CreateTimeOffRequest,
    QuerySchedulesRequest,
    QueryTimeOffRequest,
    ReviewTimeOffRequest,
)

__all__ = [
    "ADD_PAYMENT",
    "CREATE_TIME_OFF",
    "LOGIN",
    "QUERY_SCHEDULES",
    "QUERY_TIME_OFF",
    "REVIEW_TIME_OFF",
    "UPLOAD_ATTACHMENT",
    "VERIFY_2FA",
    "AddPaymentRequest",
    "AttachmentEntityType",
    "CreateTimeOffRequest",
    "LoginRequest",
    "PaymentMethod",
    "QuerySchedulesRequest",
    "QueryTimeOffRequest",
    "ReviewAction",
    "ReviewTimeOffRequest",
    "Setup2FAResponse",
    "SortOrder",
    "TimeOffStatus",
    "TimeOffType",
    "UploadAttachmentRequest",
    "Verify2FARequest",
]
