class LabelVerificationError(Exception):
    """Base application error"""


class ConfigError(LabelVerificationError):
    """Missing or invalid configuration"""


class PreconditionError(LabelVerificationError):
    """Input cannot be verified; no report is produced"""


class NoTextDetectedError(PreconditionError):
    """Extracted label text is empty or OCR detected no text"""

    def __init__(self, message: str = "No text was detected on the label image."):
        super().__init__(message)


class MissingSubmissionFieldError(PreconditionError):
    """A required submission field is blank"""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Required submission field '{field_name}' is missing.")


class OcrUnavailableError(LabelVerificationError):
    """OCR collaborator timed out or failed"""

    def __init__(self, signal: str, message: str | None = None):
        self.signal = signal
        super().__init__(message or f"Text recognition did not complete ({signal}).")
