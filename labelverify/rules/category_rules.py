"""Regulatory rule registry — per-category thresholds and vocabularies.

All category-specific constants live here as frozen models so matchers and
advisory checks read them instead of carrying their own literals. Nothing
mutates these objects at evaluation time.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict

from labelverify.models.schemas import ProductCategory
from labelverify.utils.gov_warning_text import CANONICAL_WARNINGS, REQUIRED_PHRASES


class _Rules(BaseModel):
    model_config = ConfigDict(frozen=True)


class WineRules(_Rules):
    table_wine_max_abv: Decimal = Decimal("14.0")
    table_wine_descriptor: str = "Table Wine"
    # Descriptor used above the table-wine ceiling.
    over_ceiling_descriptor: str = "Dessert Wine"
    requires_sulfite_declaration: bool = True
    sulfite_threshold_ppm: int = 10
    # Either spelling satisfies the declaration.
    sulfite_terms: tuple[str, ...] = ("sulfite", "sulphite")
    allowed_descriptors: tuple[str, ...] = (
        "Table Wine",
        "Light Wine",
        "Dessert Wine",
        "Sparkling Wine",
    )


class BeerRules(_Rules):
    # Optional but recommended; never checked.
    requires_ingredients_list: bool = False
    common_styles: tuple[str, ...] = (
        "IPA",
        "Pale Ale",
        "Lager",
        "Stout",
        "Porter",
        "Pilsner",
        "Wheat Beer",
        "Sour Beer",
    )


class BourbonRules(_Rules):
    minimum_abv: Decimal = Decimal("40.0")
    descriptor: str = "Kentucky Straight Bourbon Whiskey"


class SpiritsRules(_Rules):
    minimum_abv: Decimal = Decimal("20.0")
    classes: tuple[str, ...] = (
        "Whiskey",
        "Bourbon",
        "Rye Whiskey",
        "Tennessee Whiskey",
        "Scotch Whisky",
        "Vodka",
        "Gin",
        "Rum",
        "Tequila",
        "Brandy",
        "Cognac",
    )
    bourbon: BourbonRules = BourbonRules()


class RegulatoryRuleSet(_Rules):
    """Everything a validator needs to know about one beverage category."""

    category: ProductCategory
    canonical_warnings: tuple[str, ...] = CANONICAL_WARNINGS
    required_phrases: tuple[str, ...] = REQUIRED_PHRASES
    # Phrases needed for a pass, and for a review instead of a fail.
    warning_pass_phrases: int = 4
    warning_review_phrases: int = 2
    # Declared vs. label ABV must differ by strictly less than this.
    abv_tolerance: Decimal = Decimal("0.5")
    # Submission fields that must be non-blank before verification runs.
    required_fields: tuple[str, ...] = ("brand_name", "product_type", "alcohol_content")
    wine: Optional[WineRules] = None
    beer: Optional[BeerRules] = None
    spirits: Optional[SpiritsRules] = None

    @property
    def vocabulary(self) -> tuple[str, ...]:
        """Canonical descriptors/classes/styles recognized for this category."""
        if self.wine is not None:
            return self.wine.allowed_descriptors
        if self.beer is not None:
            return self.beer.common_styles
        if self.spirits is not None:
            return self.spirits.classes
        return ()


RULE_SETS: dict[ProductCategory, RegulatoryRuleSet] = {
    ProductCategory.WINE: RegulatoryRuleSet(category=ProductCategory.WINE, wine=WineRules()),
    ProductCategory.BEER: RegulatoryRuleSet(category=ProductCategory.BEER, beer=BeerRules()),
    ProductCategory.DISTILLED_SPIRITS: RegulatoryRuleSet(
        category=ProductCategory.DISTILLED_SPIRITS, spirits=SpiritsRules()
    ),
}


def get_rule_set(category: ProductCategory) -> RegulatoryRuleSet:
    return RULE_SETS[ProductCategory(category)]
