"""Ingredient line parsing: optional unit-aware primary parser plus numeric fallback."""

import logging
import re
from typing import Callable, List, Optional

from baking_assistant.app.services.quantity_parser import parse_quantity_text
from baking_assistant.app.services.url_parsing.models import ParsedIngredient
from baking_assistant.app.services.url_parsing.parsing_utils import (
    clean_text,
    is_known_unit,
    normalize_fractions,
    separate_attached_fractions,
)

logger = logging.getLogger(__name__)

IngredientLineParser = Callable[[str], ParsedIngredient]

_LEADING_QUANTITY_RE = re.compile(r"^([\d\s/.]+)\s+(.*)$")
_QUANTITY_UNIT_RE = re.compile(r"^\s*([\d\s/.]+)\s+([A-Za-z][A-Za-z.]*)\s+(.*)$")


def parse_quantity_fallback(line: str) -> ParsedIngredient:
    """Split a leading integer, decimal, fraction or mixed fraction off an ingredient line.

    Never raises: a line without a usable quantity comes back with
    ``quantity=None`` and the whole line as the name.
    """
    original = line.strip()
    # "1½" -> "1 ½" so the glyph reads as a mixed fraction
    normalized = normalize_fractions(separate_attached_fractions(original))
    m = _LEADING_QUANTITY_RE.match(normalized)
    if m:
        qty = parse_quantity_text(m.group(1))
        if qty is not None:
            return ParsedIngredient(
                quantity=qty, ingredient_name=m.group(2), original_text=original
            )
    return ParsedIngredient(quantity=None, ingredient_name=original, original_text=original)


def split_quantity_unit(line: str) -> ParsedIngredient:
    """Parse "<qty> <known unit> <name>" lines; anything else reports no quantity."""
    original = line.strip()
    # "1½" -> "1 ½" so the glyph reads as a mixed fraction
    normalized = normalize_fractions(separate_attached_fractions(original))
    m = _QUANTITY_UNIT_RE.match(normalized)
    if m and is_known_unit(m.group(2)):
        qty = parse_quantity_text(m.group(1))
        if qty is not None:
            return ParsedIngredient(
                quantity=qty,
                unit=m.group(2).rstrip("."),
                ingredient_name=clean_text(m.group(3)),
                original_text=original,
            )
    return ParsedIngredient(ingredient_name=original, original_text=original)


def parse_ingredient_line(
    line: str, primary: Optional[IngredientLineParser] = None
) -> ParsedIngredient:
    """Parse one ingredient line, falling back to the numeric parser when needed."""
    original = line.strip()
    if primary is not None:
        parsed = primary(original)
        parsed.original_text = original
        if parsed.quantity is not None:
            return parsed
    else:
        parsed = ParsedIngredient(ingredient_name=original, original_text=original)

    fallback = parse_quantity_fallback(original)
    parsed.quantity = fallback.quantity
    parsed.ingredient_name = fallback.ingredient_name
    return parsed


def parse_ingredients(
    lines: List[str], primary: Optional[IngredientLineParser] = None
) -> List[ParsedIngredient]:
    parsed = [parse_ingredient_line(line, primary) for line in lines]
    logger.debug(
        "Parsed %d ingredient lines (%d with quantity)",
        len(parsed),
        sum(1 for p in parsed if p.quantity is not None),
    )
    return parsed
