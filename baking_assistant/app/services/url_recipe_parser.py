import logging
from typing import Optional

from bs4 import BeautifulSoup

from baking_assistant.app.core.config import get_settings
from baking_assistant.app.services.url_parsing.errors import RecipeExtractionError
from baking_assistant.app.services.url_parsing.extractors import (
    extract_ingredients_by_selector,
    extract_instructions_by_selector,
    extract_structured_data,
)
from baking_assistant.app.services.url_parsing.html_fetcher import fetch_html
from baking_assistant.app.services.url_parsing.ingredient_parser import (
    IngredientLineParser,
    parse_ingredients,
    split_quantity_unit,
)
from baking_assistant.app.services.url_parsing.models import RecipeExtractionResult
from baking_assistant.app.services.url_parsing.parsing_utils import clean_lines

logger = logging.getLogger(__name__)

EXTRACTION_FAILED_MESSAGE = "Could not extract recipe details from this page."


def default_primary_parser() -> Optional[IngredientLineParser]:
    if get_settings().ingredient_unit_parsing:
        return split_quantity_unit
    return None


def extract_recipe_from_html(
    html: str, primary: Optional[IngredientLineParser] = None
) -> RecipeExtractionResult:
    """Extract ingredients, instructions and servings from a page.

    JSON-LD is tried first; CSS selectors fill in whichever list it left
    empty. Raises RecipeExtractionError unless both lists end up non-empty.
    """
    soup = BeautifulSoup(html, "lxml")

    structured = extract_structured_data(soup)
    ingredients = structured.ingredients
    instructions = structured.instructions
    if not ingredients:
        logger.info("No JSON-LD ingredients; falling back to selectors")
        ingredients = extract_ingredients_by_selector(soup)
    if not instructions:
        logger.info("No JSON-LD instructions; falling back to selectors")
        instructions = extract_instructions_by_selector(soup)

    ingredients = clean_lines(ingredients)
    instructions = clean_lines(instructions)
    logger.debug("Raw ingredient lines: %s", ingredients)

    parsed_ingredients = parse_ingredients(ingredients, primary)

    if not parsed_ingredients or not instructions:
        logger.warning(
            "Extraction incomplete: ingredients=%d, instructions=%d",
            len(parsed_ingredients),
            len(instructions),
        )
        raise RecipeExtractionError(EXTRACTION_FAILED_MESSAGE)

    logger.info(
        "Extracted %d ingredients and %d instructions (servings=%s)",
        len(parsed_ingredients),
        len(instructions),
        structured.servings,
    )
    return RecipeExtractionResult(
        ingredients=parsed_ingredients,
        instructions=instructions,
        servings=structured.servings,
    )


async def parse_recipe_from_url(url: str) -> RecipeExtractionResult:
    """Fetch a recipe page and extract it. Fetch and extraction errors propagate."""
    html = await fetch_html(url)
    return extract_recipe_from_html(html, primary=default_primary_parser())
