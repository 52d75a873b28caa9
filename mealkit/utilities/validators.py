"""
Input validation schemas using Pydantic for label print jobs.
"""
from datetime import date
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mealkit.domain.LabelData import LabelData
from mealkit.utilities import config


class LabelDataInput(BaseModel):
    """Schema for a single label record; accepts the storefront's camelCase keys."""
    model_config = ConfigDict(populate_by_name=True)

    meal_name: str = Field(..., alias="mealName", min_length=1, max_length=500)
    calories: Union[int, float] = Field(0, ge=0)
    protein: Union[int, float] = Field(0, ge=0)
    fat: Union[int, float] = Field(0, ge=0)
    carbs: Union[int, float] = Field(0, ge=0)
    ingredients: str = ""
    allergens: Optional[str] = None
    storage_instructions: Optional[str] = Field(None, alias="storageInstructions")
    heating_instructions: Optional[str] = Field(None, alias="heatingInstructions")
    use_by_date: Optional[date] = Field(None, alias="useByDate")
    # None falls back to config.DEFAULT_LABEL_QUANTITY when the record is built
    quantity: Optional[int] = Field(None, ge=1, le=1000)

    @field_validator('meal_name')
    @classmethod
    def validate_meal_name(cls, v):
        """Meal name is the dominant element of the label and cannot be blank."""
        if not v.strip():
            raise ValueError('Meal name cannot be empty')
        return v.strip()

    @field_validator('ingredients', 'allergens', 'storage_instructions', 'heating_instructions')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v

    def to_label_data(self) -> LabelData:
        return LabelData(
            meal_name=self.meal_name,
            calories=self.calories,
            protein=self.protein,
            fat=self.fat,
            carbs=self.carbs,
            ingredients=self.ingredients,
            allergens=self.allergens or "",
            storage_instructions=self.storage_instructions or None,
            heating_instructions=self.heating_instructions or None,
            use_by_date=self.use_by_date,
            quantity=self.quantity if self.quantity is not None else config.DEFAULT_LABEL_QUANTITY,
        )


class LabelBatchInput(BaseModel):
    """Schema for a print job made of several labels."""
    labels: List[LabelDataInput] = Field(..., min_length=1)
    debug: bool = False

    def to_label_data(self) -> List[LabelData]:
        return [label.to_label_data() for label in self.labels]


class OrderItemInput(BaseModel):
    """One confirmed order line or package meal selection."""
    meal_id: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=0)


class MealCatalogueInput(BaseModel):
    """Schema for a catalogue meal used to build production labels."""
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    total_calories: float = Field(0, ge=0)
    total_protein: float = Field(0, ge=0)
    total_fat: float = Field(0, ge=0)
    total_carbs: float = Field(0, ge=0)
    ingredients: List[str] = Field(default_factory=list)
    allergens: List[str] = Field(default_factory=list)

    @field_validator('ingredients', 'allergens')
    @classmethod
    def validate_names(cls, v):
        """Ensure names are non-empty strings."""
        return [name.strip() for name in v if name and name.strip()]


class ProductionInput(BaseModel):
    """Schema for a production-day label report."""
    order_items: List[OrderItemInput] = Field(default_factory=list)
    meals: List[MealCatalogueInput] = Field(default_factory=list)
    use_by_date: Optional[date] = None
