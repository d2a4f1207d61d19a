import logging
from enum import Enum
from typing import Optional, Protocol

from pydantic import BaseModel, ConfigDict

from labelverify.errors import NoTextDetectedError, OcrUnavailableError
from labelverify.models.schemas import Submission, VerificationReport
from labelverify.services.validation_service import verify

logger = logging.getLogger(__name__)


class OcrSignal(str, Enum):
    TEXT = "text"
    NO_TEXT = "no_text"
    TIMEOUT = "timeout"
    ERROR = "error"


class OcrOutcome(BaseModel):
    """What the OCR collaborator eventually yields for one uploaded image."""

    model_config = ConfigDict(frozen=True)

    signal: OcrSignal
    text: str = ""
    detail: Optional[str] = None


class OcrProvider(Protocol):
    """Text recognition lives outside the engine; anything with this method
    can feed it."""

    def extract_text(self, image_ref: str) -> OcrOutcome: ...


def verify_ocr_outcome(submission: Submission, outcome: OcrOutcome) -> VerificationReport:
    """Map an OCR outcome onto verify().

    "No text detected" and an empty text block are the same precondition
    failure. Timeouts and errors are raised as OcrUnavailableError so the
    caller can offer a retry.
    """
    if outcome.signal in (OcrSignal.TIMEOUT, OcrSignal.ERROR):
        raise OcrUnavailableError(outcome.signal.value, outcome.detail)
    if outcome.signal == OcrSignal.NO_TEXT:
        raise NoTextDetectedError()
    return verify(submission, outcome.text)


class OCRService:
    """Runs an OCR provider on a label image and verifies the result.

    The provider is injected; the engine never talks to a recognition
    backend itself.
    """

    def __init__(self, provider: OcrProvider):
        self._provider = provider

    def verify_image(self, submission: Submission, image_ref: str) -> VerificationReport:
        outcome = self._provider.extract_text(image_ref)
        logger.info("OCR for %s finished: %s", image_ref, outcome.signal.value)
        return verify_ocr_outcome(submission, outcome)
