"""Wine validator.

Adds the sulfite declaration, which is a hard requirement for wine: a label
without it is rejected.
"""

from labelverify.validators.base_validator import BaseValidator


class WineValidator(BaseValidator):
    rule_ids = BaseValidator.rule_ids + ["SULFITE_DECLARATION"]

    advisory_ids = BaseValidator.advisory_ids + ["WINE_ABV_CLASSIFICATION"]
