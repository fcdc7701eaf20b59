"""Invoice payment request schema."""

from typing import Optional

from myclinic.dto.base import RequestModel
from myclinic.dto.enums import PaymentMethod
from myclinic.validation import FieldRule, Schema, default_registry


class AddPaymentRequest(RequestModel):
    """A payment recorded against an invoice.

    Attributes:
        amount: Amount paid, at least 1
        method: How the patient paid
        reference: External transaction reference
        notes: Free-text notes
    """

    amount: float
    method: PaymentMethod
    reference: Optional[str] = None
    notes: Optional[str] = None


ADD_PAYMENT = default_registry.register(
    Schema(
        name="AddPayment",
        model=AddPaymentRequest,
        rules=(
            FieldRule.number("amount", required=True, minimum=1, example=25000),
            FieldRule.enum(
                "method",
                PaymentMethod,
                required=True,
                example=PaymentMethod.CASH.value,
            ),
            FieldRule.string("reference", example="TXN123456"),
            FieldRule.string("notes", example="Partial payment"),
        ),
    )
)
