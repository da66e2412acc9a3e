"""Client for the Spoonacular random recipe endpoint."""

import logging
from typing import Any, Dict, Optional

import httpx

from app.core.errors import (
    ConfigurationError,
    NoResultsError,
    TransportError,
    UpstreamAuthError,
    UpstreamError,
    UpstreamQuotaError,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.spoonacular.com"
RANDOM_RECIPE_PATH = "/recipes/random"
NO_JSON_ERROR_BODY = {"message": "No JSON error response."}


class SpoonacularClient:
    """Fetches a single random recipe from Spoonacular.

    Each call opens its own ``httpx.AsyncClient``; no timeout is set here,
    so httpx's default applies. ``transport`` lets callers substitute the
    network layer (tests pass an ``httpx.MockTransport``).
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.transport = transport

    def build_random_recipe_url(
        self, diet: Optional[str] = None, meal_type: Optional[str] = None
    ) -> httpx.URL:
        """Build the upstream URL asking for exactly one random recipe."""
        params = {"number": "1", "apiKey": self.api_key}
        if diet:
            params["diet"] = diet
        if meal_type:
            params["type"] = meal_type
        return httpx.URL(f"{self.base_url}{RANDOM_RECIPE_PATH}", params=params)

    async def get_random_recipe(
        self, diet: Optional[str] = None, meal_type: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Fetch one random recipe matching the optional filters.

        Returns the first recipe object exactly as upstream sent it. Raises a
        ``RecipeProxyError`` subclass for every failure branch.
        """
        url = self.build_random_recipe_url(diet, meal_type)

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            logger.error(f"Error fetching recipe from Spoonacular API: {e!r}")
            raise TransportError() from e

        if not response.is_success:
            raise self._classify_failure(response)

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Spoonacular returned an unreadable body with status {response.status_code}: {e}")
            raise TransportError() from e

        recipes = data.get("recipes") if isinstance(data, dict) else None
        if not recipes:
            raise NoResultsError()

        logger.info(f"Fetched random recipe (diet={diet!r}, type={meal_type!r})")
        return recipes[0]

    def _classify_failure(self, response: httpx.Response) -> Exception:
        try:
            error_data = response.json()
        except ValueError:
            error_data = dict(NO_JSON_ERROR_BODY)

        status = response.status_code
        reason = response.reason_phrase
        logger.error(f"Spoonacular API error: {status} - {reason} {error_data}")

        if status == 401:
            return UpstreamAuthError()
        if status == 402:
            return UpstreamQuotaError()
        if status == 404:
            return NoResultsError.from_not_found()
        return UpstreamError(status, reason, error_data)


async def fetch_random_recipe(
    settings,
    diet: Optional[str] = None,
    meal_type: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Dict[str, Any]:
    """Check the configured key, then fetch a random recipe."""
    if not settings.spoonacular_api_key:
        logger.error("SPOONACULAR_API_KEY is not set; refusing to call Spoonacular.")
        raise ConfigurationError()

    client = SpoonacularClient(
        api_key=settings.spoonacular_api_key,
        base_url=settings.spoonacular_base_url,
        transport=transport,
    )
    return await client.get_random_recipe(diet=diet, meal_type=meal_type)
