"""Label content density analysis.

Turns the free text of a label (meal name, ingredients, allergens, storage
instructions) into a 0-100 density score, a QualityMode tier, per-field font
scale factors and section spacing. Everything here is a pure function of the
LabelData text; the constant tables are hand-tuned and must not be re-derived.
"""
from __future__ import annotations

import logging
import math
from typing import Dict, Tuple

from mealkit.domain.ContentAnalysis import ContentAnalysis, QualityMode, ScalingFactors, SpacingConfig
from mealkit.domain.LabelData import LabelData

__all__ = [
    "BASE_FONT_SIZES", "MIN_FONT_SIZES", "QUALITY_THRESHOLDS", "QUALITY_SETTINGS",
    "SPACING_ADJUSTMENTS", "BASE_SPACING", "MIN_SPACING",
    "analyze_content_density", "get_quality_mode", "calculate_scaling_factors",
    "enforce_quality_thresholds", "calculate_spacing", "analyze",
]

logger = logging.getLogger(__name__)

# Font sizes in mm; minimums are the legibility floor for each field
BASE_FONT_SIZES: Dict[str, float] = {
    "meal_name": 3.5,
    "nutrition": 2.2,
    "instructions": 1.8,
    "ingredients": 1.6,
    "footer": 1.5,
}
MIN_FONT_SIZES: Dict[str, float] = {
    "meal_name": 3.0,
    "nutrition": 2.0,
    "instructions": 1.6,
    "ingredients": 1.4,
    "footer": 1.3,
}

# First match wins, evaluated top-down
QUALITY_THRESHOLDS: Tuple[Tuple[int, QualityMode], ...] = (
    (85, QualityMode.EMERGENCY),
    (70, QualityMode.COMPRESSED),
    (55, QualityMode.OPTIMIZED),
    (35, QualityMode.OPTIMAL),
    (20, QualityMode.ENHANCED),
)

# mode -> ((min %, max %), spacing scale)
QUALITY_SETTINGS: Dict[QualityMode, Tuple[Tuple[int, int], float]] = {
    QualityMode.EMERGENCY: ((-30, -20), 0.7),
    QualityMode.COMPRESSED: ((-25, -15), 0.8),
    QualityMode.OPTIMIZED: ((-15, -5), 0.9),
    QualityMode.OPTIMAL: ((-5, 5), 1.0),
    QualityMode.ENHANCED: ((5, 15), 1.1),
    QualityMode.PREMIUM: ((15, 25), 1.2),
}

SPACING_ADJUSTMENTS: Dict[QualityMode, float] = {
    QualityMode.EMERGENCY: 0.8,
    QualityMode.COMPRESSED: 0.9,
    QualityMode.OPTIMIZED: 1.0,
    QualityMode.OPTIMAL: 1.0,
    QualityMode.ENHANCED: 1.1,
    QualityMode.PREMIUM: 1.2,
}

# Margins in mm, keyed by SpacingConfig field
BASE_SPACING: Dict[str, float] = {
    "header_margin": 0.8,
    "logo_margin": 0.5,
    "meal_name_margin": 0.8,
    "separator_margin": 0.8,
    "nutrition_margin": 1.0,
    "section_margin": 1.0,
    "use_by_margin": 0.5,
    "storage_margin": 0.8,
    "ingredients_margin": 0.8,
    "footer_margin": 1.0,
}
MIN_SPACING: Dict[str, float] = {
    "header_margin": 0.3,
    "logo_margin": 0.2,
    "meal_name_margin": 0.3,
    "separator_margin": 0.3,
    "nutrition_margin": 0.4,
    "section_margin": 0.4,
    "use_by_margin": 0.2,
    "storage_margin": 0.3,
    "ingredients_margin": 0.3,
    "footer_margin": 0.4,
}


def _segment_count(text: str, sep: str) -> int:
    return len(text.split(sep)) if text else 0


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def analyze_content_density(data: LabelData) -> int:
    """Weighted text-complexity score, rounded half-up and clamped to [0, 100]."""
    meal_name = data.meal_name or ""
    ingredients = data.ingredients or ""
    allergens = data.allergens or ""
    storage = data.effective_storage_instructions

    meal_name_length = len(meal_name)
    ingredients_length = len(ingredients)
    allergens_length = len(allergens)
    storage_length = len(storage)
    total_characters = meal_name_length + ingredients_length + allergens_length + storage_length

    word_count = _segment_count(meal_name, " ")
    ingredient_count = _segment_count(ingredients, ",")
    allergen_count = _segment_count(allergens, ",")

    score = 0.0
    score += min(1.2 * (meal_name_length + 3 * word_count), 25)
    score += min(0.12 * (ingredients_length + 8 * ingredient_count), 40)
    score += min(0.8 * allergens_length + 4 * allergen_count, 15)
    score += min(0.1 * storage_length, 10)

    if ingredients_length > 300:
        score += 15
    if ingredient_count > 12:
        score += 10
    if meal_name_length > 25:
        score += 8
    if allergen_count > 6:
        score += 8
    if total_characters > 500:
        score += 12

    return max(0, min(_round_half_up(score), 100))


def get_quality_mode(density: int) -> QualityMode:
    for threshold, mode in QUALITY_THRESHOLDS:
        if density >= threshold:
            return mode
    return QualityMode.PREMIUM


def calculate_scaling_factors(density: int, quality_mode: QualityMode) -> ScalingFactors:
    """Interpolate within the mode's range; denser labels sit at the tight end."""
    (low, high), spacing_scale = QUALITY_SETTINGS[quality_mode]
    normalized = max(0.0, min(1.0, density / 100))
    pct = low + (high - low) * (1 - normalized)
    scale = 1 + pct / 100
    return ScalingFactors(
        meal_name_scale=scale,
        nutrition_scale=scale * 0.95,
        instructions_scale=scale * 0.90,
        ingredients_scale=scale * 0.85,
        footer_scale=scale * 0.80,
        spacing_scale=spacing_scale,
        quality_mode=quality_mode,
    )


def enforce_quality_thresholds(factors: ScalingFactors) -> ScalingFactors:
    """Raise any scale that would print a field below its legibility minimum."""
    def floor(scale: float, field: str) -> float:
        return max(scale, MIN_FONT_SIZES[field] / BASE_FONT_SIZES[field])

    return ScalingFactors(
        meal_name_scale=floor(factors.meal_name_scale, "meal_name"),
        nutrition_scale=floor(factors.nutrition_scale, "nutrition"),
        instructions_scale=floor(factors.instructions_scale, "instructions"),
        ingredients_scale=floor(factors.ingredients_scale, "ingredients"),
        footer_scale=floor(factors.footer_scale, "footer"),
        spacing_scale=factors.spacing_scale,
        quality_mode=factors.quality_mode,
    )


def calculate_spacing(factors: ScalingFactors) -> SpacingConfig:
    multiplier = factors.spacing_scale * SPACING_ADJUSTMENTS.get(factors.quality_mode, 1.0)
    return SpacingConfig(**{
        name: max(base * multiplier, MIN_SPACING[name])
        for name, base in BASE_SPACING.items()
    })


def analyze(data: LabelData) -> ContentAnalysis:
    """Full analysis for one label. Never raises on business input."""
    density = analyze_content_density(data)
    quality_mode = get_quality_mode(density)
    scaling_factors = enforce_quality_thresholds(calculate_scaling_factors(density, quality_mode))
    spacing = calculate_spacing(scaling_factors)
    logger.debug("Analyzed label %r: density=%s mode=%s scale=%.3f",
                 data.meal_name, density, quality_mode.value, scaling_factors.meal_name_scale)
    return ContentAnalysis(
        density=density,
        quality_mode=quality_mode,
        scaling_factors=scaling_factors,
        spacing=spacing,
    )
