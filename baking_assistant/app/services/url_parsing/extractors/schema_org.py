"""Schema.org JSON-LD recipe extraction."""

import json
import logging
from typing import Iterator, List

from bs4 import BeautifulSoup

from baking_assistant.app.services.url_parsing.models import (
    StructuredData,
    StructuredRecipeRecord,
)
from baking_assistant.app.services.url_parsing.parsing_utils import (
    extract_ingredient_text,
    extract_instruction_text,
    extract_yield,
    is_recipe_type,
)

logger = logging.getLogger(__name__)


def _decoded_blocks(soup: BeautifulSoup) -> Iterator[object]:
    """Yield each JSON-LD block that decodes; broken blocks are skipped."""
    scripts = soup.find_all("script", attrs={"type": "application/ld+json"})
    logger.info("Found %d JSON-LD script blocks", len(scripts))
    for idx, script in enumerate(scripts):
        raw_json = script.string or script.get_text()
        if not raw_json or not raw_json.strip():
            logger.debug("JSON-LD block %d is empty", idx)
            continue
        try:
            data = json.loads(raw_json)
        except (json.JSONDecodeError, RecursionError) as exc:
            # RecursionError: nesting deeper than the decoder can follow
            logger.warning(
                "JSON-LD block %d failed to parse: %s (first 200 chars: %s)",
                idx,
                exc,
                raw_json[:200],
            )
            continue
        yield data


def _recipe_objects(data) -> List[dict]:
    """Pick the Recipe-typed objects out of one decoded block."""
    if isinstance(data, list):
        return [d for d in data if isinstance(d, dict) and is_recipe_type(d.get("@type"))]
    if not isinstance(data, dict):
        return []
    if is_recipe_type(data.get("@type")):
        return [data]
    graph = data.get("@graph")
    if isinstance(graph, list):
        logger.info("Found @graph with %d items", len(graph))
        return [d for d in graph if isinstance(d, dict) and is_recipe_type(d.get("@type"))]
    return []


def to_record(obj: dict) -> StructuredRecipeRecord:
    return StructuredRecipeRecord(
        recipe_ingredient=extract_ingredient_text(obj.get("recipeIngredient")),
        recipe_instructions=extract_instruction_text(obj.get("recipeInstructions")),
        recipe_yield=extract_yield(obj.get("recipeYield")),
    )


def find_recipe_records(soup: BeautifulSoup) -> List[StructuredRecipeRecord]:
    """All Recipe-typed JSON-LD candidates on the page, in document order."""
    records: List[StructuredRecipeRecord] = []
    for data in _decoded_blocks(soup):
        records.extend(to_record(obj) for obj in _recipe_objects(data))
    logger.info("Found %d Recipe candidates in JSON-LD", len(records))
    return records


def extract_structured_data(soup: BeautifulSoup) -> StructuredData:
    """Merge Recipe candidates field by field; the first non-empty value of each field wins."""
    result = StructuredData()
    for idx, record in enumerate(find_recipe_records(soup)):
        if not result.ingredients and record.recipe_ingredient:
            logger.debug("Ingredients taken from Recipe candidate %d", idx)
            result.ingredients = record.recipe_ingredient
        if not result.instructions and record.recipe_instructions:
            logger.debug("Instructions taken from Recipe candidate %d", idx)
            result.instructions = record.recipe_instructions
        if result.servings is None and record.recipe_yield:
            result.servings = record.recipe_yield
    return result
