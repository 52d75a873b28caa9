from mealkit.domain.ContentAnalysis import ContentAnalysis
from mealkit.domain.LabelData import LabelData
from mealkit.logic.labels.analyzer import (
    calculate_scaling_factors,
    calculate_spacing,
    enforce_quality_thresholds,
    get_quality_mode,
)

SCENARIO_B_INGREDIENTS = ", ".join([
    "Modified Maize Starch", "Emulsifier (Soya Lecithin)", "Beef Stock Concentrate",
    "Coconut Milk Extract", "Onion Powder", "Vitamin C", "Sodium Citrate", "Calcium Chloride",
    "Potassium Sorbate", "Colour (Paprika Extract)", "Flavour enhancer (Yeast Extract)",
    "Acidity regulator (Citric Acid)", "Stabiliser (Xanthan Gum)", "Preservative (Sodium Benzoate)",
    "Antioxidant (Rosemary Extract)", "Salt and Pepper", "Natural flavourings",
    "Mustard Seeds derived from Canada",
])


def analysis_for(density: int) -> ContentAnalysis:
    """Build the analysis the engine would produce for a given density."""
    mode = get_quality_mode(density)
    factors = enforce_quality_thresholds(calculate_scaling_factors(density, mode))
    return ContentAnalysis(density=density, quality_mode=mode,
                           scaling_factors=factors, spacing=calculate_spacing(factors))


def chicken_bowl(**overrides) -> LabelData:
    fields = dict(
        meal_name="Chicken Rice Bowl",
        calories=520, protein=42, fat=14, carbs=55,
        ingredients="Chicken, Rice, Soy Sauce, Ginger",
        allergens="Soy",
        quantity=1,
    )
    fields.update(overrides)
    return LabelData(**fields)


def beef_massaman(**overrides) -> LabelData:
    fields = dict(
        meal_name="Slow Cooked Beef Massaman Stew",
        calories=640, protein=38, fat=31, carbs=48,
        ingredients=SCENARIO_B_INGREDIENTS,
        allergens="Milk, Eggs, Soya, Mustard, Celery, Sulphites, Wheat",
        quantity=1,
    )
    fields.update(overrides)
    return LabelData(**fields)
