"""
Coffee Order Domain Model

A coffee order is a single tasting entry (`coffee_entries` table)
tied to the shop it was tried at.

Author: TM3
Date: 2025-11-02
"""
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StrengthLevel(str, Enum):
    """Roast strength of a coffee"""
    LIGHT = "light"
    MEDIUM = "medium"
    DARK = "dark"


STRENGTH_LEVELS = tuple(level.value for level in StrengthLevel)

MIN_RATING = 1
MAX_RATING = 5


class CoffeeOrder(BaseModel):
    """
    Coffee order domain model - one row of coffee_entries

    Fields:
        id: Store-assigned identifier
        shop_id: Owning shop (FK enforced by the store)
        coffee_name: Name of the coffee, never blank
        strength_level: light, medium or dark (optional)
        price: Price paid (optional, >= 0)
        rating: 1-5 (optional)
        tasting_notes: Free text (optional)
        photo_url: Photo reference (optional)
        date_tried: Day the coffee was tried (optional)
        created_at: Store-assigned creation timestamp
    """

    id: str = Field(..., description="Order ID")
    shop_id: str = Field(..., description="Owning shop ID")
    coffee_name: str = Field(..., min_length=1, description="Coffee name")
    strength_level: Optional[StrengthLevel] = Field(None, description="Roast level")
    price: Optional[Decimal] = Field(None, ge=0, description="Price")
    rating: Optional[int] = Field(None, ge=MIN_RATING, le=MAX_RATING, description="Rating 1-5")
    tasting_notes: Optional[str] = Field(None, description="Tasting notes")
    photo_url: Optional[str] = Field(None, description="Photo URL")
    date_tried: Optional[date] = Field(None, description="Date tried")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")

    model_config = ConfigDict(extra="allow", use_enum_values=True)

    @field_validator("id", "shop_id", mode="before")
    @classmethod
    def _ids_as_str(cls, value):
        return str(value) if value is not None else value
