"""LabelData domain entity: everything printed on one physical meal label."""
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional

from mealkit.utilities.constants import (
    DATE_FORMAT,
    DEFAULT_HEATING_INSTRUCTIONS,
    DEFAULT_LABEL_QUANTITY,
    DEFAULT_STORAGE_INSTRUCTIONS,
)

# camelCase keys sent by the storefront -> field names
_KEY_ALIASES = {
    "mealName": "meal_name",
    "storageInstructions": "storage_instructions",
    "heatingInstructions": "heating_instructions",
    "useByDate": "use_by_date",
}


def _parse_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        return datetime.strptime(value.strip()[:10], DATE_FORMAT).date()
    return None


@dataclass(frozen=True)
class LabelData:
    """Immutable content for one label job.

    ``ingredients`` and ``allergens`` are comma-separated lists; an empty string
    means none. Missing instructions fall back to the house defaults.
    ``quantity`` is how many copies end up on the sheet.
    """

    meal_name: str
    calories: float = 0
    protein: float = 0
    fat: float = 0
    carbs: float = 0
    ingredients: str = ""
    allergens: str = ""
    storage_instructions: Optional[str] = None
    heating_instructions: Optional[str] = None
    use_by_date: Optional[date] = None
    quantity: int = DEFAULT_LABEL_QUANTITY

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError(f"Label quantity must be positive, got {self.quantity}")

    @property
    def effective_storage_instructions(self) -> str:
        return self.storage_instructions or DEFAULT_STORAGE_INSTRUCTIONS

    @property
    def effective_heating_instructions(self) -> str:
        return self.heating_instructions or DEFAULT_HEATING_INSTRUCTIONS

    def __str__(self) -> str:
        return f"{self.meal_name} - {self.calories} kcal - x{self.quantity}"

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "LabelData":
        '''Creates a LabelData from a dict, accepting camelCase keys. Ignores unknown keys.'''
        d = {_KEY_ALIASES.get(k, k): v for k, v in dict(data).items()}
        allowed = {
            "meal_name", "calories", "protein", "fat", "carbs", "ingredients", "allergens",
            "storage_instructions", "heating_instructions", "use_by_date", "quantity",
        }
        filtered = {k: v for k, v in d.items() if k in allowed}
        filtered["meal_name"] = filtered.get("meal_name") or ""
        filtered["ingredients"] = filtered.get("ingredients") or ""
        filtered["allergens"] = filtered.get("allergens") or ""
        filtered["use_by_date"] = _parse_date(filtered.get("use_by_date"))
        if filtered.get("quantity") is None:
            filtered.pop("quantity", None)
        return LabelData(**filtered)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "meal_name": self.meal_name,
            "calories": self.calories,
            "protein": self.protein,
            "fat": self.fat,
            "carbs": self.carbs,
            "ingredients": self.ingredients,
            "allergens": self.allergens,
            "storage_instructions": self.storage_instructions,
            "heating_instructions": self.heating_instructions,
            "use_by_date": self.use_by_date.strftime(DATE_FORMAT) if self.use_by_date else None,
            "quantity": self.quantity,
        }
