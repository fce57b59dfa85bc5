"""CSS selector fallback for pages without usable JSON-LD."""

import logging
from typing import List, Sequence

from bs4 import BeautifulSoup

from baking_assistant.app.services.url_parsing.constants import (
    INGREDIENT_SELECTORS,
    INSTRUCTION_SELECTORS,
)

logger = logging.getLogger(__name__)


def collect_selector_text(soup: BeautifulSoup, selectors: Sequence[str]) -> List[str]:
    """Text of every element matching each selector, concatenated in selector order.

    Every selector runs even after earlier ones matched, so an element can
    show up more than once.
    """
    texts: List[str] = []
    for selector in selectors:
        matches = [el.get_text() for el in soup.select(selector)]
        if matches:
            logger.debug("Selector %r matched %d elements", selector, len(matches))
        texts.extend(matches)
    return texts


def extract_ingredients_by_selector(soup: BeautifulSoup) -> List[str]:
    return collect_selector_text(soup, INGREDIENT_SELECTORS)


def extract_instructions_by_selector(soup: BeautifulSoup) -> List[str]:
    return collect_selector_text(soup, INSTRUCTION_SELECTORS)
