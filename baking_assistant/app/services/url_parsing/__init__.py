"""URL recipe parsing package.

This package provides functionality for extracting recipes from URLs using
two strategies: schema.org JSON-LD first, then CSS selectors for whatever the
JSON-LD left empty.
"""

from baking_assistant.app.services.url_parsing.errors import (
    FetchError,
    RecipeExtractionError,
    RecipeParseError,
)
from baking_assistant.app.services.url_parsing.html_fetcher import (
    fetch_html,
    is_private_host,
    validate_url,
)
from baking_assistant.app.services.url_parsing.ingredient_parser import (
    parse_ingredient_line,
    parse_ingredients,
    parse_quantity_fallback,
    split_quantity_unit,
)
from baking_assistant.app.services.url_parsing.models import (
    ParsedIngredient,
    RecipeExtractionResult,
    StructuredData,
    StructuredRecipeRecord,
)
from baking_assistant.app.services.url_parsing.parsing_utils import (
    clean_lines,
    clean_text,
    extract_ingredient_text,
    extract_instruction_text,
    extract_yield,
    is_known_unit,
    is_recipe_type,
    normalize_fractions,
    normalize_unit_token,
)

__all__ = [
    # Errors
    "FetchError",
    "RecipeExtractionError",
    "RecipeParseError",
    # Models
    "ParsedIngredient",
    "RecipeExtractionResult",
    "StructuredData",
    "StructuredRecipeRecord",
    # HTML fetching
    "fetch_html",
    "is_private_host",
    "validate_url",
    # Ingredient parsing
    "parse_ingredient_line",
    "parse_ingredients",
    "parse_quantity_fallback",
    "split_quantity_unit",
    # Parsing utilities
    "clean_lines",
    "clean_text",
    "extract_ingredient_text",
    "extract_instruction_text",
    "extract_yield",
    "is_known_unit",
    "is_recipe_type",
    "normalize_fractions",
    "normalize_unit_token",
]
