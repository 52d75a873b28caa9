import unittest

from mealkit.domain.ContentAnalysis import QualityMode, ScalingFactors
from mealkit.domain.LabelData import LabelData
from mealkit.logic.labels.analyzer import (
    BASE_FONT_SIZES,
    MIN_FONT_SIZES,
    MIN_SPACING,
    analyze,
    analyze_content_density,
    calculate_scaling_factors,
    calculate_spacing,
    enforce_quality_thresholds,
    get_quality_mode,
)
from mealkit.tests.helpers import beef_massaman, chicken_bowl

EXPECTED_MODES = [
    (85, QualityMode.EMERGENCY),
    (70, QualityMode.COMPRESSED),
    (55, QualityMode.OPTIMIZED),
    (35, QualityMode.OPTIMAL),
    (20, QualityMode.ENHANCED),
    (0, QualityMode.PREMIUM),
]


def _expected_mode(density):
    for threshold, mode in EXPECTED_MODES:
        if density >= threshold:
            return mode


class TestDensity(unittest.TestCase):

    def test_chicken_bowl_uses_default_storage_text(self):
        # 25 (name cap) + 7.68 + 6.4 + 9.1 (91-char default storage) = 48.18
        label = chicken_bowl(storage_instructions=None)
        analysis = analyze(label)
        self.assertEqual(analysis.density, 48)
        self.assertEqual(analysis.quality_mode, QualityMode.OPTIMAL)
        self.assertEqual(
            analyze_content_density(label),
            analyze_content_density(chicken_bowl(storage_instructions=label.effective_storage_instructions)),
        )

    def test_short_label_is_premium(self):
        label = LabelData(meal_name="Soup", storage_instructions="Keep chilled.")
        analysis = analyze(label)
        self.assertEqual(analysis.density, 10)
        self.assertEqual(analysis.quality_mode, QualityMode.PREMIUM)

    def test_empty_meal_name_contributes_nothing(self):
        label = LabelData(meal_name="")
        # only the default storage text remains: 0.1 * 91
        self.assertEqual(analyze_content_density(label), 9)

    def test_dense_label_is_emergency(self):
        label = beef_massaman()
        self.assertEqual(len(label.meal_name), 30)
        self.assertGreater(len(label.ingredients), 300)
        self.assertEqual(len(label.ingredients.split(",")), 18)
        analysis = analyze(label)
        self.assertGreater(analysis.density, 85)
        self.assertEqual(analysis.quality_mode, QualityMode.EMERGENCY)

    def test_bounded_for_pathological_input(self):
        label = LabelData(
            meal_name="Very " * 200,
            ingredients=", ".join(["Ingredient"] * 1000),
            allergens=", ".join(["Nuts"] * 500),
            storage_instructions="x" * 10000,
        )
        density = analyze_content_density(label)
        self.assertIsInstance(density, int)
        self.assertEqual(density, 100)
        self.assertEqual(analyze_content_density(LabelData(meal_name="", storage_instructions="")), 9)

    def test_longer_ingredients_never_lower_density(self):
        previous = -1
        for n in range(0, 700, 7):
            density = analyze_content_density(chicken_bowl(ingredients="Rice" + "a" * n))
            self.assertGreaterEqual(density, previous)
            previous = density

    def test_allergens_never_lower_density(self):
        without = analyze(chicken_bowl(allergens=""))
        with_allergens = analyze(chicken_bowl(allergens="Milk, Eggs, Soya"))
        self.assertGreaterEqual(with_allergens.density, without.density)

    def test_deterministic(self):
        self.assertEqual(analyze(beef_massaman()), analyze(beef_massaman()))
        self.assertEqual(analyze(chicken_bowl()), analyze(chicken_bowl()))


class TestQualityMode(unittest.TestCase):

    def test_thresholds(self):
        for density in range(0, 101):
            self.assertEqual(get_quality_mode(density), _expected_mode(density), density)
        self.assertEqual(get_quality_mode(60), QualityMode.OPTIMIZED)

    def test_analysis_mode_matches_density(self):
        labels = [
            chicken_bowl(),
            beef_massaman(),
            LabelData(meal_name="Soup", storage_instructions="Keep chilled."),
            chicken_bowl(ingredients="Rice, " * 30),
        ]
        for label in labels:
            analysis = analyze(label)
            self.assertEqual(analysis.quality_mode, _expected_mode(analysis.density))
            self.assertEqual(analysis.scaling_factors.quality_mode, analysis.quality_mode)

    def test_mode_ordering(self):
        self.assertEqual([m.value for m in QualityMode],
                         ["emergency", "compressed", "optimized", "optimal", "enhanced", "premium"])


class TestScaling(unittest.TestCase):

    def test_interpolation_and_floor(self):
        factors = enforce_quality_thresholds(calculate_scaling_factors(48, QualityMode.OPTIMAL))
        self.assertAlmostEqual(factors.meal_name_scale, 1.002)
        self.assertAlmostEqual(factors.nutrition_scale, 1.002 * 0.95)
        self.assertAlmostEqual(factors.instructions_scale, 1.002 * 0.90)
        # 0.8517 and 0.8016 fall under the legibility floor
        self.assertAlmostEqual(factors.ingredients_scale, 1.4 / 1.6)
        self.assertAlmostEqual(factors.footer_scale, 1.3 / 1.5)
        self.assertEqual(factors.spacing_scale, 1.0)

    def test_premium_beats_emergency(self):
        premium = enforce_quality_thresholds(calculate_scaling_factors(10, QualityMode.PREMIUM))
        emergency = enforce_quality_thresholds(calculate_scaling_factors(95, QualityMode.EMERGENCY))
        self.assertAlmostEqual(premium.meal_name_scale, 1.24)
        self.assertGreater(premium.meal_name_scale, emergency.meal_name_scale)

        short = analyze(LabelData(meal_name="Soup", storage_instructions="Keep chilled."))
        dense = analyze(beef_massaman())
        self.assertGreater(short.scaling_factors.meal_name_scale, dense.scaling_factors.meal_name_scale)

    def test_floor_guarantee(self):
        for density in range(0, 101):
            mode = get_quality_mode(density)
            factors = enforce_quality_thresholds(calculate_scaling_factors(density, mode))
            scales = {
                "meal_name": factors.meal_name_scale,
                "nutrition": factors.nutrition_scale,
                "instructions": factors.instructions_scale,
                "ingredients": factors.ingredients_scale,
                "footer": factors.footer_scale,
            }
            for field, scale in scales.items():
                self.assertGreaterEqual(scale * BASE_FONT_SIZES[field] + 1e-9, MIN_FONT_SIZES[field],
                                        f"{field} at density {density}")


class TestSpacing(unittest.TestCase):

    def test_emergency_spacing(self):
        spacing = analyze(beef_massaman()).spacing
        # 0.7 spacing scale * 0.8 emergency adjustment
        self.assertAlmostEqual(spacing.header_margin, 0.8 * 0.56)
        self.assertAlmostEqual(spacing.logo_margin, 0.5 * 0.56)
        self.assertAlmostEqual(spacing.footer_margin, 1.0 * 0.56)

    def test_premium_spacing(self):
        spacing = analyze(LabelData(meal_name="Soup", storage_instructions="Keep chilled.")).spacing
        self.assertAlmostEqual(spacing.nutrition_margin, 1.0 * 1.44)
        self.assertAlmostEqual(spacing.use_by_margin, 0.5 * 1.44)

    def test_spacing_floor(self):
        factors = ScalingFactors(1.0, 1.0, 1.0, 1.0, 1.0, spacing_scale=0.1, quality_mode=QualityMode.EMERGENCY)
        self.assertEqual(calculate_spacing(factors).to_dict(), MIN_SPACING)


if __name__ == '__main__':
    unittest.main()
