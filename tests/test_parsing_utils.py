import pytest

from baking_assistant.app.services.url_parsing.constants import FRACTION_MAP
from baking_assistant.app.services.url_parsing.parsing_utils import (
    clean_lines,
    extract_ingredient_text,
    extract_instruction_text,
    extract_yield,
    is_known_unit,
    is_recipe_type,
    normalize_fractions,
)


@pytest.mark.parametrize("glyph,ascii_text", sorted(FRACTION_MAP.items()))
def test_normalize_fractions_each_glyph(glyph, ascii_text):
    assert normalize_fractions(f"{glyph} cup") == f"{ascii_text} cup"


def test_normalize_fractions_leaves_other_text_alone():
    text = "2 ½ cups flour, 1/3 tsp salt & ⅞ oz café"
    assert normalize_fractions(text) == "2 1/2 cups flour, 1/3 tsp salt & 7/8 oz café"
    assert normalize_fractions("") == ""


@pytest.mark.parametrize("text", ["¾ cup sugar", "1 1/4 cups", "⅒⅐⅑", "no fractions"])
def test_normalize_fractions_idempotent(text):
    once = normalize_fractions(text)
    assert normalize_fractions(once) == once


def test_clean_lines_trims_and_dedupes_case_insensitively():
    lines = ["  1 Cup Sugar ", "1 cup sugar", "", "   ", "2 eggs\n", "1 CUP SUGAR", "Salt"]
    assert clean_lines(lines) == ["1 Cup Sugar", "2 eggs", "Salt"]


def test_clean_lines_keeps_symbols_and_digits():
    lines = ["1/2 tsp. salt (kosher)!", "#2 — 350°F"]
    assert clean_lines(lines) == lines


def test_clean_lines_output_keys_unique_and_ordered():
    lines = ["b", "A", "a", "B", "c", " a "]
    out = clean_lines(lines)
    assert out == ["b", "A", "c"]
    assert len({line.lower() for line in out}) == len(out)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("Recipe", True),
        ("recipe", True),
        ("RECIPE", True),
        (["Thing", "Recipe"], True),
        (["NewsArticle", "WebPage"], False),
        ("WebPage", False),
        ("RecipeCollection", False),
        (None, False),
        ({"@id": "Recipe"}, False),
    ],
)
def test_is_recipe_type(value, expected):
    assert is_recipe_type(value) is expected


def test_extract_instruction_text_shapes():
    assert extract_instruction_text("Mix everything.") == ["Mix everything."]
    assert extract_instruction_text(
        [
            "Preheat oven.",
            {"@type": "HowToStep", "text": "Mix."},
            {
                "@type": "HowToSection",
                "name": "Bake",
                "itemListElement": [{"@type": "HowToStep", "text": "Bake 20 minutes."}],
            },
        ]
    ) == ["Preheat oven.", "Mix.", "Bake 20 minutes."]
    assert extract_instruction_text({"text": "Not a list"}) == []
    assert extract_instruction_text(None) == []


def test_extract_instruction_text_object_without_text_uses_string_form():
    step = {"@type": "HowToStep", "name": "Stir"}
    assert extract_instruction_text([step]) == [str(step)]


def test_extract_ingredient_text_shapes():
    assert extract_ingredient_text("1 cup flour") == ["1 cup flour"]
    assert extract_ingredient_text(["1 egg", {"text": "2 tbsp milk"}, None]) == [
        "1 egg",
        "2 tbsp milk",
    ]
    assert extract_ingredient_text(None) == []


def test_extract_yield():
    assert extract_yield(["4 servings", "4"]) == "4 servings"
    assert extract_yield("12 cookies") == "12 cookies"
    assert extract_yield(6) == "6"
    assert extract_yield(2.0) == "2"
    assert extract_yield([]) is None
    assert extract_yield(None) is None


def test_is_known_unit():
    assert is_known_unit("cups")
    assert is_known_unit("Tbsp.")
    assert not is_known_unit("eggs")
