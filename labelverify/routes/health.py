from fastapi import APIRouter

from labelverify.rules.category_rules import RULE_SETS

router = APIRouter()


@router.get("/health")
def health_check():
    """Health endpoint — confirms FastAPI is running and rule sets are loaded."""
    return {
        "status": "healthy",
        "rule_sets": [category.value for category in RULE_SETS],
    }
