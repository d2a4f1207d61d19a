"""Field matchers shared across all beverage categories.

Each rule function takes a ValidationContext and returns:
  - a FieldResult (pass, warning or fail) for its field
  - None if the field doesn't apply to this submission

Rules never raise on odd input: unparseable or missing values land in the
existing warning/fail branches so the reviewer always gets a full report.

Confidence scores are fixed heuristic values, not probabilities.
"""

import re
from decimal import Decimal

from labelverify.models.schemas import FieldResult, FieldStatus
from labelverify.utils.text_normalization import compact, normalize_lower, significant_tokens

BRAND_NAME = "Brand Name"
PRODUCT_TYPE = "Product Type"
ALCOHOL_CONTENT = "Alcohol Content"
NET_CONTENTS = "Net Contents"
HEALTH_WARNING = "Health Warning"

ABV_NOT_FOUND = "Could not find any ABV percentage on label"

DECLARED_ABV_PATTERN = re.compile(r"\d+(?:\.\d+)?")


def brand_name_matches(ctx) -> FieldResult:
    """BRAND_NAME_MATCH — exact containment, else partial credit on long words.

    OCR often breaks a multi-word brand across lines, so when the full name
    isn't found we count its words longer than 3 characters. At least half
    of them (and at least one) must appear for a warning; otherwise fail.
    """
    brand = ctx.submission.brand_name
    expected = normalize_lower(brand)

    if expected in ctx.ocr_lower:
        return FieldResult(
            field=BRAND_NAME,
            status=FieldStatus.PASS,
            message="Brand name found on label",
            form_text=brand,
            label_text=_find_fragment(expected, ctx.ocr_text) or brand,
            confidence=100,
        )

    tokens = significant_tokens(expected)
    matched = [t for t in tokens if t in ctx.ocr_lower]

    if matched and len(matched) * 2 >= len(tokens):
        return FieldResult(
            field=BRAND_NAME,
            status=FieldStatus.WARNING,
            message=f"Partial brand match found ({len(matched)}/{len(tokens)} words)",
            form_text=brand,
            label_text=", ".join(matched),
            confidence=len(matched) / len(tokens) * 100,
        )

    return FieldResult(
        field=BRAND_NAME,
        status=FieldStatus.FAIL,
        message=f'Brand name "{brand}" not found on label',
        form_text=brand,
        confidence=0,
    )


def product_type_matches(ctx) -> FieldResult:
    """PRODUCT_TYPE_MATCH — like the brand check but never fails.

    Class/type phrasing legitimately varies ("Kentucky Straight Bourbon
    Whiskey" vs "Bourbon"), so a miss only routes the label to review.
    """
    product_type = ctx.submission.product_type
    expected = normalize_lower(product_type)

    if expected in ctx.ocr_lower:
        return FieldResult(
            field=PRODUCT_TYPE,
            status=FieldStatus.PASS,
            message="Product type found on label",
            form_text=product_type,
            label_text=_find_fragment(expected, ctx.ocr_text) or product_type,
            confidence=90,
        )

    tokens = significant_tokens(expected)
    matched = [t for t in tokens if t in ctx.ocr_lower]

    if matched:
        return FieldResult(
            field=PRODUCT_TYPE,
            status=FieldStatus.WARNING,
            message=f"Product type partially found on label ({len(matched)}/{len(tokens)} words)",
            form_text=product_type,
            label_text=", ".join(matched),
            confidence=60,
        )

    return FieldResult(
        field=PRODUCT_TYPE,
        status=FieldStatus.WARNING,
        message=f'Product type "{product_type}" not explicitly found',
        form_text=product_type,
        confidence=50,
    )


def alcohol_content_matches(ctx) -> FieldResult:
    """ALCOHOL_CONTENT_MATCH — declared ABV vs every "N%" numeral on the label.

    Pass if any numeral is strictly within the tolerance of the declared
    value. Otherwise fail, reporting the closest numeral when one exists.
    """
    raw = ctx.submission.alcohol_content
    declared_text = raw.strip().rstrip("%").strip()
    form_text = f"{declared_text}%"
    candidates = ctx.extracted.get("abv_candidates", [])
    declared = parse_abv(raw)

    if not candidates:
        return FieldResult(
            field=ALCOHOL_CONTENT,
            status=FieldStatus.FAIL,
            message=ABV_NOT_FOUND,
            form_text=form_text,
            confidence=0,
        )

    if declared is None:
        return FieldResult(
            field=ALCOHOL_CONTENT,
            status=FieldStatus.FAIL,
            message=f"{ABV_NOT_FOUND} matching the submitted value '{raw}' (not a number)",
            form_text=form_text,
            confidence=0,
        )

    tolerance = ctx.rule_set.abv_tolerance
    for numeral, value in candidates:
        if abs(value - declared) < tolerance:
            return FieldResult(
                field=ALCOHOL_CONTENT,
                status=FieldStatus.PASS,
                message=f"ABV {numeral}% matches form data",
                form_text=form_text,
                label_text=f"{numeral}%",
                confidence=95,
            )

    # min() keeps the earliest numeral on ties.
    closest, _ = min(candidates, key=lambda c: abs(c[1] - declared))
    return FieldResult(
        field=ALCOHOL_CONTENT,
        status=FieldStatus.FAIL,
        message=f"ABV mismatch: Form shows {declared_text}%, label shows {closest}%",
        form_text=form_text,
        label_text=f"{closest}%",
        confidence=30,
    )


def net_contents_matches(ctx) -> FieldResult | None:
    """NET_CONTENTS_MATCH — declared volume vs "number + unit" candidates.

    Only runs when the applicant declared net contents. Unit formatting noise
    is common, so a miss is a warning, never a fail.
    """
    declared = ctx.submission.net_contents
    if not declared or not declared.strip():
        return None

    declared_key = _volume_key(declared)
    candidates = ctx.extracted.get("net_contents_candidates", [])

    for candidate in candidates:
        detected_key = _volume_key(candidate)
        if (_contains_volume(declared_key, detected_key)
                or _contains_volume(detected_key, declared_key)
                or _contains_volume(detected_key, declared_key.replace("floz", "oz"))):
            return FieldResult(
                field=NET_CONTENTS,
                status=FieldStatus.PASS,
                message="Volume matches label",
                form_text=declared,
                label_text=candidate,
                confidence=90,
            )

    if candidates:
        message = f"Could not verify volume on label (label shows \"{', '.join(candidates)}\")"
    else:
        message = "Could not verify volume on label"
    return FieldResult(
        field=NET_CONTENTS,
        status=FieldStatus.WARNING,
        message=message,
        form_text=declared,
        label_text=", ".join(candidates) or None,
        confidence=0,
    )


def health_warning_matches(ctx) -> FieldResult:
    """HEALTH_WARNING_PHRASES — graduated check of the five required phrases.

    OCR frequently drops one short phrase from an otherwise complete warning,
    so 4 of 5 passes, 2-3 needs review and fewer fails. Exact wording against
    the canonical text is reported separately as an advisory note.
    """
    rules = ctx.rule_set
    found = ctx.extracted.get("gov_warning_phrases_found", [])
    missing = ctx.extracted.get("gov_warning_phrases_missing", [])
    total = len(rules.required_phrases)
    k = len(found)
    confidence = k / total * 100

    if k >= rules.warning_pass_phrases:
        return FieldResult(
            field=HEALTH_WARNING,
            status=FieldStatus.PASS,
            message=f"Required health warning present ({k}/{total} key phrases found)",
            label_text=", ".join(found),
            confidence=confidence,
        )

    if k >= rules.warning_review_phrases:
        return FieldResult(
            field=HEALTH_WARNING,
            status=FieldStatus.WARNING,
            message=f"Partial health warning found ({k}/{total} phrases). Missing: {', '.join(missing)}",
            label_text=", ".join(found),
            confidence=confidence,
        )

    return FieldResult(
        field=HEALTH_WARNING,
        status=FieldStatus.FAIL,
        message=f"Required health warning missing or incomplete ({k}/{total} phrases found)",
        label_text=", ".join(found) or None,
        confidence=confidence,
    )


def parse_abv(value: str | None) -> Decimal | None:
    """Parse a declared ABV such as "40", "12.5" or "45%". None if not a
    finite, non-negative number."""
    if not value:
        return None
    text = value.strip().rstrip("%").strip()
    # Plain decimals only; rejects "-5", "1e3", "nan" and "inf".
    if not DECLARED_ABV_PATTERN.fullmatch(text):
        return None
    return Decimal(text)


def _volume_key(text: str) -> str:
    """"12 FL. OZ." -> "12floz", "1.75 L" -> "1.75l". Decimal points survive."""
    return re.sub(r"(?<!\d)\.|\.(?!\d)", "", compact(text))


def _contains_volume(haystack: str, needle: str) -> bool:
    """Containment that won't let "50ml" match inside "750ml"."""
    if not needle:
        return False
    return re.search(rf"(?<![\d.]){re.escape(needle)}", haystack) is not None


def _find_fragment(query: str, text: str) -> str | None:
    """Return the label's own spelling of query, for display."""
    match = re.search(re.escape(query), text, re.IGNORECASE)
    return match.group(0) if match else None
