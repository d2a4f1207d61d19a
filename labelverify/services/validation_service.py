"""Validation service — orchestrates the full verification pipeline.

For each submission, the pipeline:
  1. Rejects empty text and blank required fields (precondition errors)
  2. Normalizes the extracted text (case-preserved, lower, upper)
  3. Runs extractors once (regex, cached in context)
  4. Builds a ValidationContext with the category's rule set
  5. Selects the validator for the category and runs its matchers in order
  6. Folds the field results into approved / rejected / needs-review
"""

import logging
from functools import reduce
from typing import Iterable

from labelverify.errors import MissingSubmissionFieldError, NoTextDetectedError, PreconditionError
from labelverify.extractors.extractor_registry import run_all_extractors
from labelverify.models.schemas import (
    FieldResult,
    FieldStatus,
    OverallStatus,
    ProductCategory,
    Submission,
    VerificationReport,
)
from labelverify.rules.category_rules import get_rule_set
from labelverify.utils.text_normalization import normalize, normalize_lower, normalize_upper
from labelverify.validators.base_validator import BaseValidator, ValidationContext
from labelverify.validators.malt_validator import MaltValidator
from labelverify.validators.spirits_validator import SpiritsValidator
from labelverify.validators.wine_validator import WineValidator

logger = logging.getLogger(__name__)

VALIDATOR_REGISTRY: dict[ProductCategory, BaseValidator] = {
    ProductCategory.WINE: WineValidator(),
    ProductCategory.BEER: MaltValidator(),
    ProductCategory.DISTILLED_SPIRITS: SpiritsValidator(),
}

# Rank of each disposition in the fold; the higher one wins.
_SEVERITY = {
    OverallStatus.APPROVED: 0,
    OverallStatus.NEEDS_REVIEW: 1,
    OverallStatus.REJECTED: 2,
}

_STATUS_FOR_FIELD = {
    FieldStatus.PASS: OverallStatus.APPROVED,
    FieldStatus.WARNING: OverallStatus.NEEDS_REVIEW,
    FieldStatus.FAIL: OverallStatus.REJECTED,
}


def determine_overall_status(results: Iterable[FieldResult]) -> OverallStatus:
    """Fold field results into one disposition.

    Any fail rejects, otherwise any warning needs review, otherwise approved.
    """
    return reduce(
        lambda acc, status: status if _SEVERITY[status] > _SEVERITY[acc] else acc,
        (_STATUS_FOR_FIELD[r.status] for r in results),
        OverallStatus.APPROVED,
    )


def check_preconditions(submission: Submission, extracted_text: str | None) -> None:
    """Raise a PreconditionError if there is nothing to verify."""
    if not extracted_text or not extracted_text.strip():
        raise NoTextDetectedError()

    for field_name in get_rule_set(submission.category).required_fields:
        value = getattr(submission, field_name)
        if value is None or not value.strip():
            raise MissingSubmissionFieldError(field_name)


def verify(submission: Submission, extracted_text: str) -> VerificationReport:
    """Verify a submission against the text recognized on its label.

    Raises:
        NoTextDetectedError: extracted_text is empty or whitespace-only.
        MissingSubmissionFieldError: a required submission field is blank.

    Returns:
        VerificationReport with results in evaluation order, the overall
        status, the original extracted text and advisory notes.
    """
    try:
        check_preconditions(submission, extracted_text)
    except PreconditionError as e:
        logger.warning(
            "Verification not run for %s submission: %s",
            submission.category.value,
            e,
            extra={"category": submission.category.value},
        )
        raise

    rule_set = get_rule_set(submission.category)
    ctx = ValidationContext(
        submission=submission,
        ocr_raw=extracted_text,
        ocr_text=normalize(extracted_text),
        ocr_lower=normalize_lower(extracted_text),
        ocr_upper=normalize_upper(extracted_text),
        extracted=run_all_extractors(extracted_text, rule_set.required_phrases),
        rule_set=rule_set,
    )

    validator = VALIDATOR_REGISTRY[submission.category]
    results = validator.validate(ctx)
    notes = validator.advise(ctx)
    overall_status = determine_overall_status(results)

    logger.info(
        "Verified %s submission: %s (%d fields, %d notes)",
        submission.category.value,
        overall_status.value,
        len(results),
        len(notes),
        extra={"category": submission.category.value, "overall_status": overall_status.value},
    )

    return VerificationReport(
        overall_status=overall_status,
        results=tuple(results),
        detected_text=extracted_text,
        notes=tuple(notes),
    )
