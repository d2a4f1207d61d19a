from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ProductCategory(str, Enum):
    """Beverage category — chosen once per submission, selects the validator."""

    WINE = "wine"
    BEER = "beer"
    DISTILLED_SPIRITS = "distilled_spirits"


class FieldStatus(str, Enum):
    PASS = "pass"
    FAIL = "fail"
    WARNING = "warning"


class OverallStatus(str, Enum):
    APPROVED = "approved"
    REJECTED = "rejected"
    NEEDS_REVIEW = "needs-review"


class Submission(BaseModel):
    """Structured form input submitted by the applicant.

    These fields represent what the applicant declared for their label.
    The engine checks that these values actually appear in the label text.
    Both snake_case and the form's camelCase keys (brandName, alcoholContent...)
    are accepted.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    category: ProductCategory = Field(alias="productCategory")
    brand_name: str
    product_type: str
    alcohol_content: str
    net_contents: Optional[str] = None

    # Wine
    sulfite_declaration: Optional[str] = None
    # Distilled spirits
    age_statement: Optional[str] = None
    distiller_name: Optional[str] = None
    # Beer
    ingredients: Optional[str] = None

    # Warning text as transcribed or pasted by the submitter
    health_warning: Optional[str] = None


class FieldResult(BaseModel):
    """One verification outcome for a single label field.

    status:
      - "pass"    — value found on the label
      - "warning" — ambiguous, routes the submission to manual review
      - "fail"    — hard mismatch, rejects the submission
    """

    model_config = ConfigDict(frozen=True)

    field: str                          # e.g., "Brand Name", "Health Warning"
    status: FieldStatus
    message: str                        # e.g., "Brand name found on label"
    form_text: Optional[str] = None     # echoed form value
    label_text: Optional[str] = None    # matched label fragment
    confidence: float = Field(ge=0, le=100)


class VerificationReport(BaseModel):
    """Top-level result of verify().

    results are in evaluation order, which is fixed per category.
    notes are advisory reviewer hints and never affect overall_status.
    """

    model_config = ConfigDict(frozen=True)

    overall_status: OverallStatus
    results: tuple[FieldResult, ...]
    detected_text: str
    notes: tuple[str, ...] = ()


class VerifyRequest(BaseModel):
    """Request body for POST /verify."""

    submission: Submission
    extracted_text: str = ""
