"""
Shaping Service
Validates loosely-typed form input and builds store-ready records

Purpose:
- Check required fields, enumerated values and numeric ranges
- Trim strings and coerce numbers (price, rating)
- Build the exact record inserted into coffee_shops / coffee_entries

Record policies differ per entity and are kept on purpose:
- Orders are sparse: blank optional fields are left out so column defaults apply
- Shops always carry address, seating_level and photo_url (None when blank)
  and vibe is always a list

Both functions are pure: they never touch the store.

Author: TM3
Date: 2025-11-02
"""
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

from app.core.errors import ValidationError
from app.domain.coffee_order import MAX_RATING, MIN_RATING, STRENGTH_LEVELS
from app.domain.shop import SEATING_LEVELS

_TRUTHY = {"true", "t", "yes", "y", "on", "1"}


# ============================================================================
# Field helpers
# ============================================================================

def is_blank(value: Any) -> bool:
    """None, or a string with nothing but whitespace"""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False


def clean_text(value: Any) -> Optional[str]:
    """Trimmed string, or None when blank"""
    if is_blank(value):
        return None
    return str(value).strip()


def _to_decimal(value: Any) -> Optional[Decimal]:
    """Decimal from int/float/str, None if it isn't a finite number"""
    if isinstance(value, bool):
        return None
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not number.is_finite():
        return None
    return number


def coerce_rating(value: Any) -> int:
    """
    Integer rating in [MIN_RATING, MAX_RATING]

    Fractional values are truncated toward zero before the range check,
    so "4.5" gives 4, "5.9" gives 5 and "0.5" fails. Non-numeric text
    and anything out of range raise.
    """
    number = _to_decimal(value)
    if number is None:
        raise ValidationError("rating", "invalid rating")

    rating = int(number)
    if rating < MIN_RATING or rating > MAX_RATING:
        raise ValidationError("rating", "invalid rating")
    return rating


def coerce_price(value: Any) -> float:
    """Non-negative price as float (0 is allowed)"""
    number = _to_decimal(value)
    if number is None or number < 0:
        raise ValidationError("price", "invalid price")
    return float(number)


def coerce_bool(value: Any) -> bool:
    """Checkbox-style boolean: real bools, "true"/"on"/"1", numbers"""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    if isinstance(value, (int, float, Decimal)):
        return value != 0
    return False


def normalize_vibe(value: Any) -> List[str]:
    """
    Vibe tags as a list of non-empty trimmed strings

    "cozy, quiet ,  modern" and ["cozy", "quiet", "modern"] both give
    ["cozy", "quiet", "modern"]. Anything else (None, numbers, dicts) gives [].
    """
    if value is None:
        return []

    if isinstance(value, str):
        parts = value.split(",")
    elif isinstance(value, Iterable) and not isinstance(value, (bytes, Mapping)):
        parts = value
    else:
        return []

    tags = []
    for part in parts:
        tag = clean_text(part)
        if tag:
            tags.append(tag)
    return tags


def _date_text(value: Any) -> str:
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value).strip()


# ============================================================================
# Shapers
# ============================================================================

def shape_order(raw: Optional[Mapping]) -> Dict[str, Any]:
    """
    Validate and shape a coffee order (tasting entry)

    Args:
        raw: Form data with shop_id and coffee_name plus optional
             strength_level, price, rating, tasting_notes, photo_url, date_tried

    Returns:
        Record with shop_id, coffee_name and only the optional fields
        that were given (blank ones are left out)

    Raises:
        ValidationError: On the first field that breaks a rule, checked in order
            shop_id, coffee_name, strength_level, rating, price
    """
    raw = raw or {}

    shop_id = clean_text(raw.get("shop_id"))
    if not shop_id:
        raise ValidationError("shop_id", "shop reference required")

    coffee_name = clean_text(raw.get("coffee_name"))
    if not coffee_name:
        raise ValidationError("coffee_name", "coffee name required")

    strength_level = clean_text(raw.get("strength_level"))
    if strength_level is not None and strength_level not in STRENGTH_LEVELS:
        raise ValidationError("strength_level", "invalid strength level")

    rating = None
    if not is_blank(raw.get("rating")):
        rating = coerce_rating(raw.get("rating"))

    price = None
    if not is_blank(raw.get("price")):
        price = coerce_price(raw.get("price"))

    record: Dict[str, Any] = {
        "shop_id": shop_id,
        "coffee_name": coffee_name,
    }

    if strength_level is not None:
        record["strength_level"] = strength_level
    if price is not None:
        record["price"] = price
    if rating is not None:
        record["rating"] = rating

    tasting_notes = clean_text(raw.get("tasting_notes"))
    if tasting_notes:
        record["tasting_notes"] = tasting_notes

    photo_url = clean_text(raw.get("photo_url"))
    if photo_url:
        record["photo_url"] = photo_url

    if not is_blank(raw.get("date_tried")):
        record["date_tried"] = _date_text(raw.get("date_tried"))

    return record


def shape_shop(raw: Optional[Mapping]) -> Dict[str, Any]:
    """
    Validate and shape a coffee shop

    Args:
        raw: Form data with name plus optional address, seating_level,
             vibe (comma string or list), good_for_work, photo_url

    Returns:
        Record with every column present: blank address / seating_level /
        photo_url become None, vibe is always a list, good_for_work a bool

    Raises:
        ValidationError: Missing name or unknown seating level
    """
    raw = raw or {}

    name = clean_text(raw.get("name"))
    if not name:
        raise ValidationError("name", "shop name required")

    seating_level = clean_text(raw.get("seating_level"))
    if seating_level is not None and seating_level not in SEATING_LEVELS:
        raise ValidationError("seating_level", "invalid seating level")

    return {
        "name": name,
        "address": clean_text(raw.get("address")),
        "seating_level": seating_level,
        "good_for_work": coerce_bool(raw.get("good_for_work")),
        "photo_url": clean_text(raw.get("photo_url")),
        "vibe": normalize_vibe(raw.get("vibe")),
    }
