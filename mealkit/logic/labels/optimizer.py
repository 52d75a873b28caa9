"""Label content optimizer.

Works only from a ContentAnalysis: abbreviates ingredient text progressively
with density, derives absolute font sizes and decides which optional sections
still fit on the label.
"""
from __future__ import annotations

from typing import Dict

from mealkit.domain.ContentAnalysis import ContentAnalysis, ContentVisibility, QualityMode, SizeSet
from mealkit.logic.labels.abbreviations import (
    AGGRESSIVE_ABBREVIATIONS,
    BASIC_ABBREVIATIONS,
    EMERGENCY_CONTRACTIONS,
    apply_table,
)

__all__ = [
    "BASE_SIZES", "BASIC_DENSITY", "AGGRESSIVE_DENSITY", "HIDE_NUTRITION_DENSITY", "HIDE_ALLERGENS_DENSITY",
    "optimize_ingredients", "calculate_dynamic_sizes", "should_show_optional_content",
]

BASIC_DENSITY = 50
AGGRESSIVE_DENSITY = 70
HIDE_NUTRITION_DENSITY = 90
HIDE_ALLERGENS_DENSITY = 95

# mm; the logo is the brand mark and is never scaled
BASE_SIZES: Dict[str, float] = {
    "logo": 6.5,
    "meal_name": 3.5,
    "nutrition": 2.2,
    "instructions": 1.8,
    "ingredients": 1.6,
    "footer": 1.5,
}


def optimize_ingredients(ingredients: str, analysis: ContentAnalysis) -> str:
    """Abbreviate ingredient text; each level builds on the previous one."""
    if not ingredients:
        return ""
    if analysis.density < BASIC_DENSITY:
        return ingredients

    optimized = apply_table(ingredients, BASIC_ABBREVIATIONS)
    if analysis.density >= AGGRESSIVE_DENSITY:
        optimized = apply_table(optimized, AGGRESSIVE_ABBREVIATIONS)
    if analysis.quality_mode == QualityMode.EMERGENCY:
        optimized = apply_table(optimized, EMERGENCY_CONTRACTIONS)
    return optimized


def calculate_dynamic_sizes(analysis: ContentAnalysis) -> SizeSet:
    factors = analysis.scaling_factors
    return SizeSet(
        logo=BASE_SIZES["logo"],
        meal_name=BASE_SIZES["meal_name"] * factors.meal_name_scale,
        nutrition=BASE_SIZES["nutrition"] * factors.nutrition_scale,
        instructions=BASE_SIZES["instructions"] * factors.instructions_scale,
        ingredients=BASE_SIZES["ingredients"] * factors.ingredients_scale,
        footer=BASE_SIZES["footer"] * factors.footer_scale,
    )


def should_show_optional_content(analysis: ContentAnalysis) -> ContentVisibility:
    # allergens are food-safety information, dropped only in the most extreme case
    return ContentVisibility(
        show_allergens=analysis.density < HIDE_ALLERGENS_DENSITY,
        show_detailed_instructions=analysis.quality_mode != QualityMode.EMERGENCY,
        show_nutrition_details=analysis.density < HIDE_NUTRITION_DENSITY,
    )
