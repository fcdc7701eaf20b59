"""Authentication request schemas and the 2FA setup response."""

from typing import Optional

from pydantic import BaseModel, Field

from myclinic.constants import TOTP_CODE_LENGTH
from myclinic.dto.base import RequestModel
from myclinic.validation import FieldRule, Schema, default_registry


class LoginRequest(RequestModel):
    """Login credentials.

    Attributes:
        email: Account email address
        password: Plain-text password
        two_factor_code: TOTP code, only when 2FA is enabled
    """

    email: str
    password: str
    two_factor_code: Optional[str] = None


class Verify2FARequest(RequestModel):
    code: str


class Setup2FAResponse(BaseModel):
    """Data the client needs to enrol an authenticator app."""

    qr_code: str = Field(
        ..., alias="qrCode", description="QR code as base64 data URL"
    )
    secret: str = Field(..., description="Secret for manual entry")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "qrCode": "data:image/png;base64,iVBORw0KGgo...",
                "secret": "JBSWY3DPEHPK3PXP",
            }
        }


LOGIN = default_registry.register(
    Schema(
        name="Login",
        model=LoginRequest,
        rules=(
            FieldRule.email("email", required=True, example="admin@myclinic.com"),
            FieldRule.string("password", required=True, example="Admin123!"),
            FieldRule.string(
                "twoFactorCode", description="2FA code if enabled", example="123456"
            ),
        ),
    )
)

VERIFY_2FA = default_registry.register(
    Schema(
        name="Verify2FA",
        model=Verify2FARequest,
        rules=(
            FieldRule.string(
                "code",
                required=True,
                min_length=TOTP_CODE_LENGTH,
                max_length=TOTP_CODE_LENGTH,
                description="6-digit TOTP code",
                example="123456",
            ),
        ),
    )
)
