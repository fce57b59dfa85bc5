"""Scale factor arithmetic for displaying a parsed recipe."""

import math
import re
from typing import List, Optional, Sequence

from baking_assistant.app.services.url_parsing.models import ParsedIngredient

_SERVINGS_NUMBER_RE = re.compile(r"\d+(\.\d+)?")


def _check_scale(scale: float) -> float:
    if not isinstance(scale, (int, float)) or not math.isfinite(scale) or scale <= 0:
        raise ValueError(f"Scale must be a positive number, got {scale!r}")
    return float(scale)


def numeric_servings(servings: Optional[str]) -> Optional[float]:
    """First number in a servings string, e.g. "4 servings" -> 4.0."""
    if not servings:
        return None
    m = _SERVINGS_NUMBER_RE.search(servings)
    return float(m.group()) if m else None


def scale_servings(servings: Optional[str], scale: float = 1) -> Optional[str]:
    """Scaled servings with two decimals, e.g. ("4 servings", 2) -> "8.00"."""
    scale = _check_scale(scale)
    base = numeric_servings(servings)
    if base is None:
        return None
    return f"{base * scale:.2f}"


def format_scaled_quantity(quantity: Optional[float], scale: float = 1) -> Optional[str]:
    """Quantity times scale, rounded to 3 decimals with trailing zeros dropped."""
    scale = _check_scale(scale)
    if quantity is None or not math.isfinite(quantity):
        return None
    text = f"{quantity * scale:.3f}"
    return text.rstrip("0").rstrip(".")


def format_ingredient(ingredient: ParsedIngredient, scale: float = 1) -> str:
    parts = []
    qty = format_scaled_quantity(ingredient.quantity, scale)
    if qty is not None:
        parts.append(qty)
    if ingredient.unit:
        parts.append(ingredient.unit)
    parts.append(ingredient.ingredient_name or ingredient.original_text)
    return " ".join(parts)


def scale_ingredients(ingredients: Sequence[ParsedIngredient], scale: float = 1) -> List[str]:
    """Display lines for each ingredient at the given scale."""
    return [format_ingredient(ing, scale) for ing in ingredients]
