class RecipeParseError(Exception):
    """Base class for failures that end a parse request."""

    error_code = "parse_failed"


class FetchError(RecipeParseError):
    """Raised when the recipe page cannot be fetched or read."""

    error_code = "fetch_failed"


class RecipeExtractionError(RecipeParseError):
    """Raised when a page does not yield both ingredients and instructions."""

    error_code = "extraction_failed"
