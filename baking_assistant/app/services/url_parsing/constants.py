"""Lookup tables shared by the URL parsing helpers."""

FRACTION_MAP = {
    "¼": "1/4",
    "½": "1/2",
    "¾": "3/4",
    "⅐": "1/7",
    "⅑": "1/9",
    "⅒": "1/10",
    "⅓": "1/3",
    "⅔": "2/3",
    "⅕": "1/5",
    "⅖": "2/5",
    "⅗": "3/5",
    "⅘": "4/5",
    "⅙": "1/6",
    "⅚": "5/6",
    "⅛": "1/8",
    "⅜": "3/8",
    "⅝": "5/8",
    "⅞": "7/8",
}

FRACTION_CHARS = "".join(FRACTION_MAP.keys())

# Singular, lowercase, no trailing period; see normalize_unit_token.
COMMON_UNITS = {
    "cup",
    "c",
    "tablespoon",
    "tbsp",
    "tbs",
    "tb",
    "teaspoon",
    "tsp",
    "t",
    "ounce",
    "oz",
    "fluid",
    "pound",
    "lb",
    "gram",
    "g",
    "kilogram",
    "kg",
    "milligram",
    "mg",
    "liter",
    "litre",
    "l",
    "milliliter",
    "millilitre",
    "ml",
    "pint",
    "pt",
    "quart",
    "qt",
    "gallon",
    "gal",
    "stick",
    "can",
    "package",
    "pkg",
    "clove",
    "pinch",
    "dash",
    "slice",
    "sprig",
    "bunch",
    "head",
    "piece",
    "jar",
    "bottle",
    "bag",
    "box",
    "container",
    "envelope",
    "handful",
    "drop",
}

INGREDIENT_SELECTORS = (
    ".ingredients-section li",
    "[data-ingredient]",
    '[itemprop="recipeIngredient"]',
    ".ingredient",
    ".ingredients-list li",
    ".ingredients li",
)

INSTRUCTION_SELECTORS = (
    ".instructions-section li",
    "[data-instruction]",
    '[itemprop="recipeInstructions"]',
    ".instruction",
    ".instructions-list li",
    ".directions li",
    ".method li",
    "ol li",
    "ul.instructions li",
)
