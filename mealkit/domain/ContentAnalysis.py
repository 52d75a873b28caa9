"""Value objects produced by the label content engine.

ContentAnalysis is derived from a LabelData and never stored: the printing
workflow recomputes it for every label it renders.
"""
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict


class QualityMode(str, Enum):
    """Layout tier, ordered from the tightest to the most spacious."""

    EMERGENCY = "emergency"
    COMPRESSED = "compressed"
    OPTIMIZED = "optimized"
    OPTIMAL = "optimal"
    ENHANCED = "enhanced"
    PREMIUM = "premium"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ScalingFactors:
    meal_name_scale: float
    nutrition_scale: float
    instructions_scale: float
    ingredients_scale: float
    footer_scale: float
    spacing_scale: float
    quality_mode: QualityMode

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["quality_mode"] = self.quality_mode.value
        return d


@dataclass(frozen=True)
class SpacingConfig:
    """Margins in millimetres between the sections of a label."""

    header_margin: float
    logo_margin: float
    meal_name_margin: float
    separator_margin: float
    nutrition_margin: float
    section_margin: float
    use_by_margin: float
    storage_margin: float
    ingredients_margin: float
    footer_margin: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class ContentAnalysis:
    density: int
    quality_mode: QualityMode
    scaling_factors: ScalingFactors
    spacing: SpacingConfig

    def to_dict(self) -> Dict[str, Any]:
        return {
            "density": self.density,
            "quality_mode": self.quality_mode.value,
            "scaling_factors": self.scaling_factors.to_dict(),
            "spacing": self.spacing.to_dict(),
        }


@dataclass(frozen=True)
class SizeSet:
    """Font sizes in millimetres for each text field on a label."""

    logo: float
    meal_name: float
    nutrition: float
    instructions: float
    ingredients: float
    footer: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class ContentVisibility:
    show_allergens: bool
    show_detailed_instructions: bool
    show_nutrition_details: bool

    def to_dict(self) -> Dict[str, bool]:
        return asdict(self)
