"""General parsing utilities for recipe extraction."""

import re
from typing import Iterable, List, Optional

from baking_assistant.app.services.url_parsing.constants import (
    COMMON_UNITS,
    FRACTION_CHARS,
    FRACTION_MAP,
)

_FRACTION_RE = re.compile(f"[{FRACTION_CHARS}]")
_ATTACHED_FRACTION_RE = re.compile(rf"(\d)([{FRACTION_CHARS}])")


def clean_text(text: str) -> str:
    """Normalize whitespace in text."""
    return re.sub(r"\s+", " ", text or "").strip()


def normalize_unit_token(unit: str) -> str:
    """Normalize a unit token for comparison."""
    token = unit.lower().strip(".")
    if token.endswith("s") and len(token) > 1:
        token = token[:-1]
    return token


def is_known_unit(unit: str) -> bool:
    """Check if a unit string is a recognized cooking unit."""
    return normalize_unit_token(unit) in COMMON_UNITS


def normalize_fractions(text: str) -> str:
    """Replace unicode vulgar fractions with their ASCII ``a/b`` form."""
    return _FRACTION_RE.sub(lambda m: FRACTION_MAP[m.group()], text)


def separate_attached_fractions(text: str) -> str:
    """Insert a space between a digit and a fraction glyph, e.g. "1½" -> "1 ½"."""
    return _ATTACHED_FRACTION_RE.sub(r"\1 \2", text)


def clean_lines(lines: Iterable[str]) -> List[str]:
    """Trim lines and drop empties and case-insensitive repeats, keeping first occurrences."""
    seen = set()
    out: List[str] = []
    for line in lines:
        stripped = line.strip()
        key = stripped.lower()
        if not stripped or key in seen:
            continue
        seen.add(key)
        out.append(stripped)
    return out


def is_recipe_type(value) -> bool:
    """Check whether a JSON-LD ``@type`` value names a Recipe."""
    if isinstance(value, str):
        return value.lower() == "recipe"
    if isinstance(value, list):
        return "recipe" in [str(t).lower() for t in value]
    return False


def extract_ingredient_text(ingredients) -> List[str]:
    """Coerce a ``recipeIngredient`` value into a list of raw lines."""
    lines: List[str] = []
    if isinstance(ingredients, str):
        lines.append(ingredients)
    elif isinstance(ingredients, list):
        for entry in ingredients:
            if isinstance(entry, str):
                lines.append(entry)
            elif isinstance(entry, dict):
                text_val = entry.get("text") or entry.get("name")
                if text_val:
                    lines.append(str(text_val))
            elif entry is not None:
                lines.append(str(entry))
    return lines


def extract_instruction_text(instructions) -> List[str]:
    """Extract step text from the string, list and HowTo shapes of ``recipeInstructions``."""
    steps: List[str] = []
    if isinstance(instructions, list):
        for entry in instructions:
            if isinstance(entry, str):
                steps.append(entry)
            elif isinstance(entry, dict):
                text_val = entry.get("text")
                if text_val:
                    steps.append(str(text_val))
                elif isinstance(entry.get("itemListElement"), list):
                    # HowToSection
                    steps.extend(extract_instruction_text(entry["itemListElement"]))
                else:
                    steps.append(str(entry))
            elif entry is not None:
                steps.append(str(entry))
    elif isinstance(instructions, str):
        steps.append(instructions)
    return steps


def extract_yield(value) -> Optional[str]:
    """Take a ``recipeYield`` value (string, number or list) as a servings string."""
    if isinstance(value, list):
        value = value[0] if value else None
    if value is None or value == "":
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)
