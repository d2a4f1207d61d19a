import re
from decimal import Decimal

from labelverify.utils.gov_warning_text import REQUIRED_PHRASES
from labelverify.utils.text_normalization import normalize_upper

# "40%", "12.5 %", "4.5%ALC": every decimal immediately followed by a percent
# sign (OCR sometimes inserts a space before it).
ABV_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*%")

# "750 mL", "1.75L", "12 FL OZ", "12 fl. oz". The trailing \b keeps "12 Lager"
# from reading as litres.
NET_CONTENTS_PATTERN = re.compile(
    r"(\d+(?:\.\d+)?)\s*(fl\.?\s*oz|ml|oz|l)\b",
    re.IGNORECASE,
)


def extract_abv(ocr_text: str) -> dict:
    """Extract every percentage numeral from OCR text, in order of appearance.

    Each candidate is (numeral as printed, value) so rules can echo the
    label's own spelling ("12.50%") while comparing numerically.
    """
    candidates = [
        (m.group(1), Decimal(m.group(1)))
        for m in ABV_PATTERN.finditer(ocr_text)
    ]
    return {"abv_candidates": candidates}


def extract_net_contents(ocr_text: str) -> dict:
    """Extract net contents volume statements ("number + unit") from OCR text.

    Handles:
      - "750 mL", "750mL", "750 ML", "750ml"
      - "1.75 L", "1.75L"
      - "12 FL OZ", "12 fl. oz", "12FLOZ"
      - "12 oz"
    """
    candidates = [m.group(0).strip() for m in NET_CONTENTS_PATTERN.finditer(ocr_text)]
    return {"net_contents_candidates": candidates}


def extract_gov_warning(ocr_text: str, phrases: tuple[str, ...] = REQUIRED_PHRASES) -> dict:
    """Check which required warning phrases appear in the OCR text.

    Text is upper-cased and whitespace-collapsed first, so a phrase split over
    two OCR lines ("SURGEON\\nGENERAL") still counts.
    """
    upper = normalize_upper(ocr_text)
    found = [p for p in phrases if p in upper]
    missing = [p for p in phrases if p not in upper]
    return {
        "gov_warning_phrases_found": found,
        "gov_warning_phrases_missing": missing,
    }
