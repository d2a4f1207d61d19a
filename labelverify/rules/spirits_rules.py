"""Distilled spirits rules: age statement matcher and ABV advisories."""

import re

from labelverify.models.schemas import FieldResult, FieldStatus
from labelverify.rules.common_rules import parse_abv
from labelverify.utils.text_normalization import normalize_lower

AGE_STATEMENT = "Age Statement"

# "12 years", "12 Year Old", "Aged 8 yrs"
AGE_YEARS_PATTERN = re.compile(r"(\d+)\s*(?:year|yr)")


def age_statement_matches(ctx) -> FieldResult | None:
    """AGE_STATEMENT — voluntary age claim; never fails.

    Only runs when the applicant declared an age statement. The number of
    years must appear on the label; otherwise any mention of age is a weak
    warning and no mention at all a zero-confidence warning.
    """
    statement = ctx.submission.age_statement
    if not statement or not statement.strip():
        return None

    # Substring containment, so "12" also matches inside "2012".
    years = AGE_YEARS_PATTERN.search(normalize_lower(statement))
    if years and years.group(1) in ctx.ocr_lower:
        return FieldResult(
            field=AGE_STATEMENT,
            status=FieldStatus.PASS,
            message="Age statement verified on label",
            form_text=statement,
            label_text=years.group(1),
            confidence=85,
        )

    if "age" in ctx.ocr_lower:
        return FieldResult(
            field=AGE_STATEMENT,
            status=FieldStatus.WARNING,
            message="Age statement found but could not verify exact match",
            form_text=statement,
            confidence=60,
        )

    return FieldResult(
        field=AGE_STATEMENT,
        status=FieldStatus.WARNING,
        message="Age statement not found on label",
        form_text=statement,
        confidence=0,
    )


def spirits_minimum_abv(ctx) -> str | None:
    """SPIRITS_MINIMUM_ABV — declared ABV below the lawful minimum."""
    declared = parse_abv(ctx.submission.alcohol_content)
    minimum = ctx.rule_set.spirits.minimum_abv
    if declared is None or declared >= minimum:
        return None
    return f"Distilled spirits must be at least {minimum}% ABV (declared {declared}%)."


def bourbon_minimum_abv(ctx) -> str | None:
    """BOURBON_MINIMUM_ABV — product type names bourbon but ABV is too low."""
    if "bourbon" not in normalize_lower(ctx.submission.product_type):
        return None
    declared = parse_abv(ctx.submission.alcohol_content)
    bourbon = ctx.rule_set.spirits.bourbon
    if declared is None or declared >= bourbon.minimum_abv:
        return None
    return (
        f"Bourbon must be bottled at no less than {bourbon.minimum_abv}% ABV "
        f'(declared {declared}%); expected designation "{bourbon.descriptor}".'
    )
