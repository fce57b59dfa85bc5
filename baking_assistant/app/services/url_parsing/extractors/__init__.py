"""Recipe extractors for the JSON-LD and CSS selector strategies."""

from baking_assistant.app.services.url_parsing.extractors.heuristic import (
    collect_selector_text,
    extract_ingredients_by_selector,
    extract_instructions_by_selector,
)
from baking_assistant.app.services.url_parsing.extractors.schema_org import (
    extract_structured_data,
    find_recipe_records,
)

__all__ = [
    "collect_selector_text",
    "extract_ingredients_by_selector",
    "extract_instructions_by_selector",
    "extract_structured_data",
    "find_recipe_records",
]
