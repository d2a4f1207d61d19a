"""Advisory checks shared across categories.

Each function takes a ValidationContext and returns a note string, or None
when there is nothing to say. Notes are shown to the reviewer alongside the
field results and never affect the overall status.
"""

from labelverify.models.schemas import ProductCategory
from labelverify.utils.text_normalization import normalize_lower, normalize_upper

_VOCABULARY_KIND = {
    ProductCategory.WINE: "wine descriptor",
    ProductCategory.BEER: "beer style",
    ProductCategory.DISTILLED_SPIRITS: "spirit class",
}


def warning_wording_exact(ctx) -> str | None:
    """WARNING_WORDING_EXACT — full canonical wording, once every phrase is present."""
    if ctx.extracted.get("gov_warning_phrases_missing"):
        return None

    canonical = [normalize_upper(w) for w in ctx.rule_set.canonical_warnings]
    if any(c in ctx.ocr_upper for c in canonical):
        return "Health warning wording matches the canonical statement."
    return (
        "Health warning contains required elements but wording may not be exact; "
        "verify exact wording matches the canonical statement."
    )


def submitted_warning_exact(ctx) -> str | None:
    """SUBMITTED_WARNING_EXACT — the applicant's transcription vs the canonical text."""
    submitted = normalize_upper(ctx.submission.health_warning)
    if not submitted:
        return None

    canonical = [normalize_upper(w) for w in ctx.rule_set.canonical_warnings]
    if submitted in canonical:
        return "Submitted health warning text matches the canonical statement."
    return "Submitted health warning text differs from the canonical statement."


def product_type_vocabulary(ctx) -> str | None:
    """PRODUCT_TYPE_VOCABULARY — product type names none of the category's terms."""
    vocabulary = ctx.rule_set.vocabulary
    product_type = normalize_lower(ctx.submission.product_type)
    if not vocabulary or any(normalize_lower(v) in product_type for v in vocabulary):
        return None

    kind = _VOCABULARY_KIND[ctx.rule_set.category]
    return (
        f'Product type "{ctx.submission.product_type}" is not a recognized {kind} '
        f"({', '.join(vocabulary)})."
    )
