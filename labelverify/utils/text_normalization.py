import re
import unicodedata

# Case applied by normalize(). Warning phrases are compared upper-case,
# free-text containment (brand, type, volume, sulfites) lower-case.
UPPER = "upper"
LOWER = "lower"


def normalize(text: str | None, case: str | None = None) -> str:
    """Canonicalize recognized text for comparison.

    Steps:
      1. NFC-normalize unicode so composed/decomposed accents compare equal
      2. Replace curly quotes/apostrophes with their ASCII equivalents
      3. Collapse every run of whitespace (spaces, newlines, tabs) to one space
      4. Trim, then fold case if requested
      5. NFC again; upper-casing can leave combining marks behind (e.g. U+0390)

    Total and idempotent: None becomes "" and normalize(normalize(x)) == normalize(x).
    """
    if not text:
        return ""

    text = unicodedata.normalize("NFC", text)

    # OCR engines produce these variants inconsistently.
    text = text.replace("\u2018", "'").replace("\u2019", "'")
    text = text.replace("\u201c", '"').replace("\u201d", '"')

    text = re.sub(r"\s+", " ", text).strip()

    if case == UPPER:
        text = text.upper()
    elif case == LOWER:
        text = text.lower()
    return unicodedata.normalize("NFC", text)


def normalize_upper(text: str | None) -> str:
    """Upper-case normalization used for warning-text comparison."""
    return normalize(text, UPPER)


def normalize_lower(text: str | None) -> str:
    """Lower-case normalization used for free-text containment checks."""
    return normalize(text, LOWER)


def compact(text: str | None) -> str:
    """Lower-case and drop all whitespace, e.g. "12 FL OZ" -> "12floz"."""
    return re.sub(r"\s+", "", text or "").lower()


def significant_tokens(text: str, min_length: int = 4) -> list[str]:
    """Whitespace-split tokens at least min_length characters long.

    Short filler words ("the", "co", "of") are dropped so that partial
    matching can't succeed on them alone.
    """
    return [t for t in text.split() if len(t) >= min_length]
