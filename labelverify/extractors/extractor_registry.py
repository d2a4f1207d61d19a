from labelverify.extractors.common_extractors import (
    extract_abv,
    extract_gov_warning,
    extract_net_contents,
)
from labelverify.utils.gov_warning_text import REQUIRED_PHRASES


def run_all_extractors(ocr_text: str, warning_phrases: tuple[str, ...] = REQUIRED_PHRASES) -> dict:
    """Run every registered extractor once on the OCR text and merge results.

    This function is called once per verification. The returned dict is cached
    in ValidationContext.extracted so that rules can read pre-computed values
    instead of re-running regex patterns themselves.

    Returns a flat dict combining outputs from all extractors, e.g.:
        {
            "abv_candidates": [("12.5", Decimal("12.5"))],
            "net_contents_candidates": ["750 mL"],
            "gov_warning_phrases_found": ["GOVERNMENT WARNING", ...],
            "gov_warning_phrases_missing": [],
        }
    """
    results = {}
    results.update(extract_abv(ocr_text))
    results.update(extract_net_contents(ocr_text))
    results.update(extract_gov_warning(ocr_text, warning_phrases))
    return results
