"""
Coffee Shop Domain Model

Represents a coffee shop row in the `coffee_shops` table.

Author: TM3
Date: 2025-11-02
"""
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SeatingLevel(str, Enum):
    """How much seating a shop has"""
    LOTS = "lots"
    MODERATE = "moderate"
    LIMITED = "limited"


SEATING_LEVELS = tuple(level.value for level in SeatingLevel)


class CoffeeShop(BaseModel):
    """
    Coffee shop domain model - one row of coffee_shops

    Fields:
        id: Store-assigned identifier (uuid)
        name: Shop name, never blank
        address: Street address (optional)
        seating_level: lots, moderate or limited (optional)
        vibe: Ordered vibe tags, empty list when none
        good_for_work: Whether the shop suits remote work
        photo_url: Photo reference (optional)
        created_at: Store-assigned creation timestamp
    """

    id: str = Field(..., description="Shop ID")
    name: str = Field(..., min_length=1, description="Shop name")
    address: Optional[str] = Field(None, description="Street address")
    seating_level: Optional[SeatingLevel] = Field(None, description="Seating availability")
    vibe: List[str] = Field(default_factory=list, description="Vibe tags")
    good_for_work: bool = Field(False, description="Good for studying / remote work")
    photo_url: Optional[str] = Field(None, description="Photo URL")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")

    # Columns added to the table later are kept as-is
    model_config = ConfigDict(extra="allow", use_enum_values=True)

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, value):
        return str(value) if value is not None else value

    @field_validator("vibe", mode="before")
    @classmethod
    def _vibe_never_null(cls, value):
        return value if value is not None else []
