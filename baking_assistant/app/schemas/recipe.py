from typing import List, Optional

from pydantic import BaseModel, Field

from baking_assistant.app.services.url_parsing.models import ParsedIngredient


class ParseRecipeRequest(BaseModel):
    url: Optional[str] = None


class ParseRecipeResponse(BaseModel):
    ingredients: List[ParsedIngredient] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    servings: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
