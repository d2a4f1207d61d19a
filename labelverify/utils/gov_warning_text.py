# The canonical government health warning statement required on all alcohol
# labels (27 CFR 16.21). Two literal renderings are accepted: the numbered
# two-sentence form and the single-sentence form without "(1)"/"(2)".
CANONICAL_WARNING = (
    "GOVERNMENT WARNING: (1) According to the Surgeon General, "
    "women should not drink alcoholic beverages during pregnancy because of "
    "the risk of birth defects. (2) Consumption of alcoholic beverages impairs "
    "your ability to drive a car or operate machinery, and may cause health problems."
)

CANONICAL_WARNING_ALT = (
    "GOVERNMENT WARNING: According to the Surgeon General, "
    "women should not drink alcoholic beverages during pregnancy because of "
    "the risk of birth defects. Consumption of alcoholic beverages impairs "
    "your ability to drive a car or operate machinery, and may cause health problems."
)

CANONICAL_WARNINGS = (CANONICAL_WARNING, CANONICAL_WARNING_ALT)

# Phrases checked for partial credit, in the order they appear in the warning.
# Compared against upper-cased, whitespace-collapsed label text.
REQUIRED_PHRASES = (
    "GOVERNMENT WARNING",
    "SURGEON GENERAL",
    "PREGNANCY",
    "BIRTH DEFECTS",
    "IMPAIRS YOUR ABILITY TO DRIVE",
)
