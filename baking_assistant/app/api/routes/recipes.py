import logging
from typing import Optional

import httpx
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from starlette import status

from baking_assistant.app.schemas.recipe import (
    ErrorResponse,
    ParseRecipeRequest,
    ParseRecipeResponse,
)
from baking_assistant.app.services import url_recipe_parser
from baking_assistant.app.services.url_parsing.errors import RecipeParseError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["recipes"])


def _error(status_code: int, error: str, details: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


@router.post(
    "/parse-recipe",
    response_model=ParseRecipeResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def parse_recipe(payload: Optional[ParseRecipeRequest] = None):
    url = (payload.url or "").strip() if payload else ""
    if not url:
        return _error(status.HTTP_400_BAD_REQUEST, "Missing url")

    try:
        result = await url_recipe_parser.parse_recipe_from_url(url)
    except RecipeParseError as exc:
        logger.warning("Failed to parse recipe from %s (%s): %s", url, exc.error_code, exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to parse recipe", str(exc))
    except httpx.HTTPError as exc:
        logger.warning("Failed to parse recipe from %s (fetch_failed): %s", url, exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to parse recipe", str(exc))
    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected error parsing recipe from %s", url)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to parse recipe", repr(exc))

    return ParseRecipeResponse(
        ingredients=result.ingredients,
        instructions=result.instructions,
        servings=result.servings,
    )
