"""A4 label sheet layout: geometry, pagination and per-label view models.

The sheet holds 2 x 5 labels of 96 x 50.8 mm. Coordinates are in mm with the
origin at the top-left corner of the page.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional, Tuple

from mealkit.domain.ContentAnalysis import ContentAnalysis, ContentVisibility, SizeSet
from mealkit.domain.LabelData import LabelData
from mealkit.logic.labels.analyzer import analyze
from mealkit.logic.labels.optimizer import (
    calculate_dynamic_sizes,
    optimize_ingredients,
    should_show_optional_content,
)
from mealkit.utilities.constants import SHORT_WEEKDAYS, USE_BY_FORMAT

__all__ = ["SheetGeometry", "LABEL_SHEET", "SheetPage", "LabelView",
           "paginate", "slot_origin", "format_use_by", "build_label_view", "nutrition_line"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SheetGeometry:
    label_width: float = 96.0
    label_height: float = 50.8
    labels_per_row: int = 2
    labels_per_column: int = 5
    page_width: float = 210.0
    page_height: float = 297.0
    padding_top: float = 11.5
    padding_side: float = 6.5
    gap: float = 5.0
    label_padding: float = 3.0

    @property
    def labels_per_page(self) -> int:
        return self.labels_per_row * self.labels_per_column


LABEL_SHEET = SheetGeometry()


@dataclass(frozen=True)
class SheetPage:
    number: int
    # always labels_per_page long; None marks an empty slot
    slots: Tuple[Optional[LabelData], ...]

    @property
    def filled(self) -> int:
        return sum(1 for s in self.slots if s is not None)


@dataclass(frozen=True)
class LabelView:
    """Everything a renderer needs to draw one label."""

    data: LabelData
    analysis: ContentAnalysis
    sizes: SizeSet
    visibility: ContentVisibility
    ingredients: str
    nutrition: str
    use_by: str
    storage_instructions: str
    heating_instructions: str

    def to_dict(self):
        return {
            "label": self.data.to_dict(),
            "analysis": self.analysis.to_dict(),
            "sizes": self.sizes.to_dict(),
            "visibility": self.visibility.to_dict(),
            "optimized_ingredients": self.ingredients,
            "nutrition": self.nutrition,
            "use_by": self.use_by,
            "storage_instructions": self.storage_instructions,
            "heating_instructions": self.heating_instructions,
        }


def format_use_by(value: Optional[date]) -> str:
    """Short en-GB style, e.g. 'Mon, 19/10/2026'. Empty when no date is set."""
    if value is None:
        return ""
    return f"{SHORT_WEEKDAYS[value.weekday()]}, {value.strftime(USE_BY_FORMAT)}"


def nutrition_line(data: LabelData) -> str:
    return f"{data.calories} Calories • {data.protein}g Protein • {data.fat}g Fat • {data.carbs}g Carbs"


def build_label_view(data: LabelData) -> LabelView:
    analysis = analyze(data)
    return LabelView(
        data=data,
        analysis=analysis,
        sizes=calculate_dynamic_sizes(analysis),
        visibility=should_show_optional_content(analysis),
        ingredients=optimize_ingredients(data.ingredients, analysis),
        nutrition=nutrition_line(data),
        use_by=format_use_by(data.use_by_date),
        storage_instructions=data.effective_storage_instructions,
        heating_instructions=data.effective_heating_instructions,
    )


def paginate(labels: Iterable[LabelData], geometry: SheetGeometry = LABEL_SHEET) -> List[SheetPage]:
    """Expand every label by its quantity and split the copies into pages."""
    copies: List[LabelData] = []
    for label in labels:
        copies.extend([label] * label.quantity)

    per_page = geometry.labels_per_page
    pages: List[SheetPage] = []
    for start in range(0, len(copies), per_page):
        chunk: List[Optional[LabelData]] = list(copies[start:start + per_page])
        chunk.extend([None] * (per_page - len(chunk)))
        pages.append(SheetPage(number=len(pages) + 1, slots=tuple(chunk)))
    logger.info("Paginated %d labels into %d page(s)", len(copies), len(pages))
    return pages


def slot_origin(index: int, geometry: SheetGeometry = LABEL_SHEET) -> Tuple[float, float]:
    """Top-left corner (x, y) in mm of slot ``index`` on a page, row-major."""
    if not 0 <= index < geometry.labels_per_page:
        raise IndexError(f"Slot {index} outside 0..{geometry.labels_per_page - 1}")
    row, col = divmod(index, geometry.labels_per_row)
    x = geometry.padding_side + col * (geometry.label_width + geometry.gap)
    y = geometry.padding_top + row * (geometry.label_height + geometry.gap)
    return x, y
