from fastapi import APIRouter

from labelverify.models.schemas import ProductCategory
from labelverify.rules.category_rules import get_rule_set

router = APIRouter()


@router.get("/rules/{category}")
def category_rules(category: ProductCategory):
    """Return the regulatory thresholds and vocabulary applied to a category."""
    rule_set = get_rule_set(category)
    payload = rule_set.model_dump(mode="json", exclude_none=True)
    payload["vocabulary"] = list(rule_set.vocabulary)
    return payload
