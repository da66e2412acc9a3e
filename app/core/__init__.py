"""Core application modules."""

from .cors import OriginPolicy, cors_headers
from .errors import RecipeProxyError
from .spoonacular import SpoonacularClient, fetch_random_recipe

__all__ = [
    "OriginPolicy",
    "cors_headers",
    "RecipeProxyError",
    "SpoonacularClient",
    "fetch_random_recipe"
]
