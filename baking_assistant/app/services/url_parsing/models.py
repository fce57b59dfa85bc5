"""Pydantic models for URL recipe parsing."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ParsedIngredient(BaseModel):
    """An ingredient line split into quantity, unit and name.

    ``original_text`` always holds the trimmed source line, whatever the
    parsers made of it.
    """

    model_config = ConfigDict(populate_by_name=True)

    quantity: Optional[float] = None
    unit: Optional[str] = None
    ingredient_name: str = Field(alias="ingredient")
    original_text: str = Field(alias="original")


class RecipeExtractionResult(BaseModel):
    """Ingredients, instructions and servings recovered from one page."""

    ingredients: List[ParsedIngredient] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    servings: Optional[str] = None


class StructuredRecipeRecord(BaseModel):
    """One Recipe-typed JSON-LD object, normalized to list-of-string fields."""

    recipe_ingredient: List[str] = Field(default_factory=list)
    recipe_instructions: List[str] = Field(default_factory=list)
    recipe_yield: Optional[str] = None


class StructuredData(BaseModel):
    """Fields adopted from all JSON-LD candidates on a page."""

    ingredients: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    servings: Optional[str] = None
