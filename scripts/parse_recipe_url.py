#!/usr/bin/env python
"""
Fetch a recipe page and print the extracted ingredients and instructions as JSON.

Usage: python scripts/parse_recipe_url.py https://example.com/recipe [--scale 2]
"""
import argparse
import asyncio
import json
import logging
import math
import sys

from baking_assistant.app.services import recipe_scaling, url_recipe_parser
from baking_assistant.app.services.url_parsing.errors import RecipeParseError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("parse_recipe_url")


def positive_scale(value: str) -> float:
    try:
        scale = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid scale: {value!r}") from None
    if not math.isfinite(scale) or scale <= 0:
        raise argparse.ArgumentTypeError(f"scale must be a positive number, got {value!r}")
    return scale


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("url", help="Recipe page URL")
    parser.add_argument("--scale", type=positive_scale, default=1.0, help="Scale factor for quantities")
    return parser


def run(url: str, scale: float) -> int:
    try:
        result = asyncio.run(url_recipe_parser.parse_recipe_from_url(url))
    except RecipeParseError as exc:
        logger.error("Failed to parse recipe: %s", exc)
        return 1

    output = result.model_dump(by_alias=True)
    if scale != 1:
        output["scaled_ingredients"] = recipe_scaling.scale_ingredients(result.ingredients, scale)
        output["scaled_servings"] = recipe_scaling.scale_servings(result.servings, scale)
    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    args = build_parser().parse_args()
    sys.exit(run(args.url, args.scale))
