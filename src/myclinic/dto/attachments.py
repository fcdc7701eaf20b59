"""Attachment upload request schema."""

from myclinic.dto.base import RequestModel
from myclinic.dto.enums import AttachmentEntityType
from myclinic.validation import FieldRule, Schema, default_registry


class UploadAttachmentRequest(RequestModel):
    """Metadata sent alongside an uploaded file.

    Attributes:
        entity_type: Kind of record the file belongs to
        entity_id: Identifier of that record
    """

    entity_type: AttachmentEntityType
    entity_id: str


UPLOAD_ATTACHMENT = default_registry.register(
    Schema(
        name="UploadAttachment",
        description="Metadata for a file attached to a clinic record",
        model=UploadAttachmentRequest,
        rules=(
            FieldRule.enum(
                "entityType",
                AttachmentEntityType,
                required=True,
                example=AttachmentEntityType.PATIENT.value,
            ),
            FieldRule.string("entityId", required=True, example="patient-id"),
        ),
    )
)
