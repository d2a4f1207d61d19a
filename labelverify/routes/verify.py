from fastapi import APIRouter, Depends, HTTPException

from labelverify.config import Settings, get_settings
from labelverify.models.schemas import VerificationReport, VerifyRequest
from labelverify.services.validation_service import verify

router = APIRouter()


@router.post("/verify", response_model=VerificationReport)
def verify_label(body: VerifyRequest, settings: Settings = Depends(get_settings)):
    """Verify submitted form data against text recognized on the label.

    Precondition failures (no text, blank required fields) are turned into
    422 responses by the handler registered in main.
    """
    if len(body.extracted_text) > settings.max_text_length:
        raise HTTPException(
            status_code=413,
            detail=f"extracted_text exceeds {settings.max_text_length} characters",
        )

    return verify(body.submission, body.extracted_text)
