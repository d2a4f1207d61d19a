"""Wine-only rules: the sulfite declaration matcher and ABV classification."""

import re

from labelverify.models.schemas import FieldResult, FieldStatus
from labelverify.rules.common_rules import parse_abv
from labelverify.utils.text_normalization import normalize_lower

SULFITE_DECLARATION = "Sulfite Declaration (Wine)"


def sulfite_declaration_present(ctx) -> FieldResult:
    """SULFITE_DECLARATION — "sulfite" or "sulphite" must appear on the label.

    Hard requirement: there is no warning tier.
    """
    terms = ctx.rule_set.wine.sulfite_terms
    declaration = ctx.submission.sulfite_declaration

    for term in terms:
        if term in ctx.ocr_lower:
            match = re.search(rf"\w*{re.escape(term)}\w*", ctx.ocr_text, re.IGNORECASE)
            return FieldResult(
                field=SULFITE_DECLARATION,
                status=FieldStatus.PASS,
                message="Sulfite declaration found on label",
                form_text=declaration,
                label_text=match.group(0) if match else term,
                confidence=95,
            )

    return FieldResult(
        field=SULFITE_DECLARATION,
        status=FieldStatus.FAIL,
        message="Required sulfite declaration missing from label",
        form_text=declaration,
        confidence=0,
    )


def wine_abv_classification(ctx) -> str | None:
    """WINE_ABV_CLASSIFICATION — table wine vs dessert/fortified by declared ABV."""
    declared = parse_abv(ctx.submission.alcohol_content)
    if declared is None:
        return None

    rules = ctx.rule_set.wine
    ceiling = rules.table_wine_max_abv
    if declared <= ceiling:
        return (
            f'Declared {declared}% ABV qualifies as "{rules.table_wine_descriptor}" '
            f"(ABV <= {ceiling}%)."
        )

    note = (
        f'Declared {declared}% ABV qualifies as "{rules.over_ceiling_descriptor}" '
        f"or Fortified Wine (ABV > {ceiling}%)."
    )
    if normalize_lower(rules.table_wine_descriptor) in normalize_lower(ctx.submission.product_type):
        note += f' Product type claims "{rules.table_wine_descriptor}" above the {ceiling}% ceiling.'
    return note
