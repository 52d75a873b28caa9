"""Kitchen label report: how many labels each meal needs for a production day.

Order items (individual orders and package selections alike) are plain dicts
with ``meal_id`` and ``quantity``; meals come from the catalogue as dicts with
``id``, ``name``, ``total_calories`` / ``total_protein`` / ``total_fat`` /
``total_carbs`` and lists of ``ingredients`` and ``allergens`` names.
"""
from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Optional

from mealkit.domain.LabelData import LabelData
from mealkit.utilities.constants import USE_BY_DAYS

__all__ = ["MealProduction", "build_meal_production", "production_to_label_data", "total_labels"]

logger = logging.getLogger(__name__)


@dataclass
class MealProduction:
    meal_id: str
    meal_name: str
    quantity: int
    total_calories: int
    total_protein: int
    total_fat: int
    total_carbs: int
    ingredients: str
    allergens: str
    order_count: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _round(value: Any) -> int:
    return int(math.floor(float(value or 0) + 0.5))


def _names(values: Any) -> str:
    if isinstance(values, str):
        return values
    return ", ".join(str(v) for v in (values or []) if v)


def build_meal_production(order_items: Iterable[Dict[str, Any]],
                          meals: Iterable[Dict[str, Any]]) -> List[MealProduction]:
    """Aggregate order items per meal, largest quantity first."""
    catalogue = {str(m.get("id")): m for m in meals}
    production: Dict[str, MealProduction] = {}
    skipped = 0

    for item in order_items:
        key = str(item.get("meal_id"))
        meal = catalogue.get(key)
        if meal is None:
            skipped += 1
            logger.debug("Skipping order item for unknown meal %s", key)
            continue
        quantity = int(item.get("quantity") or 0)
        existing = production.get(key)
        if existing:
            existing.quantity += quantity
            existing.order_count += 1
        else:
            production[key] = MealProduction(
                meal_id=key,
                meal_name=meal.get("name", ""),
                quantity=quantity,
                total_calories=_round(meal.get("total_calories")),
                total_protein=_round(meal.get("total_protein")),
                total_fat=_round(meal.get("total_fat")),
                total_carbs=_round(meal.get("total_carbs")),
                ingredients=_names(meal.get("ingredients")),
                allergens=_names(meal.get("allergens")),
                order_count=1,
            )

    rows = sorted(production.values(), key=lambda p: p.quantity, reverse=True)
    logger.info("Built production for %d meal(s), %d label(s); skipped %d item(s)",
                len(rows), total_labels(rows), skipped)
    return rows


def total_labels(rows: Iterable[MealProduction]) -> int:
    return sum(r.quantity for r in rows)


def production_to_label_data(rows: Iterable[MealProduction], use_by: Optional[date] = None, *,
                             today: Optional[date] = None, days: int = USE_BY_DAYS) -> List[LabelData]:
    """Label records for every meal with something to print.

    Without an explicit ``use_by`` the date is ``today + days``.
    """
    if use_by is None:
        use_by = (today or date.today()) + timedelta(days=days)
    return [
        LabelData(
            meal_name=r.meal_name,
            calories=r.total_calories,
            protein=r.total_protein,
            fat=r.total_fat,
            carbs=r.total_carbs,
            ingredients=r.ingredients,
            allergens=r.allergens,
            use_by_date=use_by,
            quantity=r.quantity,
        )
        for r in rows
        if r.quantity > 0
    ]
