"""MyClinic contracts - request validation layer for the MyClinic clinic API.

Provides explicit request schemas for attachments, authentication, invoice
payments, scheduling and time-off requests, a pure validation function that
returns either a normalized record or the full list of violations, and the
static locale routing configuration of the web front end.

Key Features:
- Ordered field-rule schemas registered once at import time
- All violations collected per payload, never fail-fast
- Typed value objects built from normalized records
- FastAPI integration with a uniform error envelope
- Supported locales (ar, en, ckb, kmr) with RTL metadata

Version: 1.0.0
"""

__version__ = "1.0.0"
