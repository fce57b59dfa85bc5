import pytest

from baking_assistant.app.services.recipe_scaling import (
    format_scaled_quantity,
    numeric_servings,
    scale_ingredients,
    scale_servings,
)
from baking_assistant.app.services.url_parsing.models import ParsedIngredient


def test_scale_servings():
    assert scale_servings("4 servings", 2) == "8.00"
    assert scale_servings("Makes 2.5 loaves", 2) == "5.00"
    assert scale_servings("4 servings") == "4.00"
    assert scale_servings("a crowd", 2) is None
    assert scale_servings(None, 2) is None


def test_numeric_servings():
    assert numeric_servings("Serves 6") == 6
    assert numeric_servings("") is None


@pytest.mark.parametrize(
    "quantity,scale,expected",
    [
        (1.25, 1, "1.25"),
        (2, 2, "4"),
        (0.5, 3, "1.5"),
        (1 / 3, 1, "0.333"),
        (0, 5, "0"),
        (None, 2, None),
    ],
)
def test_format_scaled_quantity(quantity, scale, expected):
    assert format_scaled_quantity(quantity, scale) == expected


@pytest.mark.parametrize("scale", [0, -1, float("nan"), float("inf")])
def test_invalid_scale(scale):
    with pytest.raises(ValueError):
        format_scaled_quantity(1, scale)


def test_scale_ingredients():
    ingredients = [
        ParsedIngredient(quantity=1.25, ingredient="cups flour", original="1 1/4 cups flour"),
        ParsedIngredient(quantity=1, unit="cup", ingredient="sugar", original="1 cup sugar"),
        ParsedIngredient(ingredient="pinch of salt", original="pinch of salt"),
    ]
    assert scale_ingredients(ingredients, 2) == [
        "2.5 cups flour",
        "2 cup sugar",
        "pinch of salt",
    ]
