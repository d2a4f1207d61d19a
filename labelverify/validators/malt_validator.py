"""Beer/malt beverage validator.

Runs the shared matchers only. Beer styles are informational vocabulary and
never a pass/fail criterion.
"""

from labelverify.validators.base_validator import BaseValidator


class MaltValidator(BaseValidator):
    pass
