"""Distilled spirits validator.

Adds the voluntary age statement check (only when the applicant declared
one) and the minimum-ABV and bourbon advisories.
"""

from labelverify.validators.base_validator import BaseValidator


class SpiritsValidator(BaseValidator):
    rule_ids = BaseValidator.rule_ids + ["AGE_STATEMENT"]

    advisory_ids = BaseValidator.advisory_ids + [
        "SPIRITS_MINIMUM_ABV",
        "BOURBON_MINIMUM_ABV",
    ]
