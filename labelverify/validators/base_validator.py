"""Base validator — defines the shared validation interface and pipeline.

Category-specific validators inherit from this and provide their own
rule list. The base class handles executing rules in order and collecting
field results and advisory notes.
"""

import logging

from labelverify.models.schemas import FieldResult, Submission
from labelverify.rules.category_rules import RegulatoryRuleSet
from labelverify.rules.rule_registry import ADVISORY_REGISTRY, RULE_REGISTRY

logger = logging.getLogger(__name__)


class ValidationContext:
    """Shared context passed to every rule during a single verification.

    Attributes:
        submission: The structured form data submitted by the applicant.
        ocr_raw: Raw extracted text as returned by the OCR collaborator.
        ocr_text: Whitespace-collapsed text, case preserved (for echoing fragments).
        ocr_lower: Lower-cased normalized text for free-text containment checks.
        ocr_upper: Upper-cased normalized text for warning phrase checks.
        extracted: Dict of cached extractor outputs (ABV numerals, volumes, phrases).
        rule_set: Read-only regulatory data for the submission's category.
    """

    def __init__(
        self,
        submission: Submission,
        ocr_raw: str,
        ocr_text: str,
        ocr_lower: str,
        ocr_upper: str,
        extracted: dict,
        rule_set: RegulatoryRuleSet,
    ):
        self.submission = submission
        self.ocr_raw = ocr_raw
        self.ocr_text = ocr_text
        self.ocr_lower = ocr_lower
        self.ocr_upper = ocr_upper
        self.extracted = extracted
        self.rule_set = rule_set


class BaseValidator:
    """Base class for category-specific validators.

    Subclasses override `rule_ids` to define which field matchers apply and in
    what order, and `advisory_ids` for the informational notes they attach.
    """

    # Shared field matchers, in report order. Subclasses append their
    # category-specific matchers after these.
    rule_ids: list[str] = [
        "BRAND_NAME_MATCH",
        "PRODUCT_TYPE_MATCH",
        "ALCOHOL_CONTENT_MATCH",
        "NET_CONTENTS_MATCH",
        "HEALTH_WARNING_PHRASES",
    ]

    advisory_ids: list[str] = [
        "WARNING_WORDING_EXACT",
        "SUBMITTED_WARNING_EXACT",
        "PRODUCT_TYPE_VOCABULARY",
    ]

    def validate(self, ctx: ValidationContext) -> list[FieldResult]:
        """Run all rules for this category and return their field results.

        Rules execute in order. A rule returns None when it doesn't apply to
        this submission (e.g. net contents left blank), and contributes no
        result in that case.
        """
        results = []

        for rule_id in self.rule_ids:
            rule_fn = RULE_REGISTRY[rule_id]
            result = rule_fn(ctx)
            if result is None:
                logger.debug("%s not applicable", rule_id)
                continue
            logger.debug("%s -> %s (%s)", rule_id, result.status.value, result.confidence)
            results.append(result)

        return results

    def advise(self, ctx: ValidationContext) -> list[str]:
        """Collect advisory notes. Notes never change the disposition."""
        notes = []
        for advisory_id in self.advisory_ids:
            note = ADVISORY_REGISTRY[advisory_id](ctx)
            if note is not None:
                notes.append(note)
        return notes
