"""Rule registry — central lookup of all field matchers and advisories by ID.

Rules are registered here so validators can reference them by ID string
rather than importing functions directly. This keeps each category's set of
checks an explicit, enumerable list.
"""

from typing import Callable

from labelverify.rules.advisory_rules import (
    product_type_vocabulary,
    submitted_warning_exact,
    warning_wording_exact,
)
from labelverify.rules.common_rules import (
    alcohol_content_matches,
    brand_name_matches,
    health_warning_matches,
    net_contents_matches,
    product_type_matches,
)
from labelverify.rules.spirits_rules import (
    age_statement_matches,
    bourbon_minimum_abv,
    spirits_minimum_abv,
)
from labelverify.rules.wine_rules import sulfite_declaration_present, wine_abv_classification

# Maps rule ID strings to their implementation functions.
# Each function takes a ValidationContext and returns a FieldResult, or None
# when the field doesn't apply to the submission.
RULE_REGISTRY: dict[str, Callable] = {
    "BRAND_NAME_MATCH": brand_name_matches,
    "PRODUCT_TYPE_MATCH": product_type_matches,
    "ALCOHOL_CONTENT_MATCH": alcohol_content_matches,
    "NET_CONTENTS_MATCH": net_contents_matches,
    "HEALTH_WARNING_PHRASES": health_warning_matches,
    "SULFITE_DECLARATION": sulfite_declaration_present,
    "AGE_STATEMENT": age_statement_matches,
}

# Advisory checks return a note string or None.
ADVISORY_REGISTRY: dict[str, Callable] = {
    "WARNING_WORDING_EXACT": warning_wording_exact,
    "SUBMITTED_WARNING_EXACT": submitted_warning_exact,
    "PRODUCT_TYPE_VOCABULARY": product_type_vocabulary,
    "WINE_ABV_CLASSIFICATION": wine_abv_classification,
    "SPIRITS_MINIMUM_ABV": spirits_minimum_abv,
    "BOURBON_MINIMUM_ABV": bourbon_minimum_abv,
}
