"""Shared constants for the MyClinic contracts service."""

ENV_DEVELOPMENT = "development"
ENV_PRODUCTION = "production"

WILDCARD_ORIGIN = "*"

REQUEST_ID_HEADER = "X-Request-ID"

DATE_FORMAT = "%Y-%m-%d"
DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

TEXT_MAX_LENGTH = 500
TOTP_CODE_LENGTH = 6

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
DEFAULT_SORT_FIELD = "createdAt"
