"""FastAPI application for the Random Recipe Proxy."""

import logging
from typing import Optional

import httpx
from fastapi import FastAPI, Query, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.cors import ALLOWED_METHODS, cors_headers
from app.core.errors import MethodNotAllowedError, RecipeProxyError
from app.core.spoonacular import fetch_random_recipe
from app.models.schemas import ErrorResponse, HealthResponse
from config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Other methods are answered by the 405 handler registered in create_app.
ROUTED_METHODS = ["GET", "OPTIONS"]


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Build the application.

    - **settings**: configuration to use instead of the environment
    - **transport**: httpx transport for upstream calls (tests use a mock)
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    # httpx logs full request URLs at INFO, and ours carry the API key.
    logging.getLogger("httpx").setLevel(logging.WARNING)

    app = FastAPI(
        title="Random Recipe Proxy",
        description="Fetches a random Spoonacular recipe filtered by diet and meal type",
        version=settings.app_version,
    )
    app.state.settings = settings
    app.state.transport = transport
    app.state.origin_policy = settings.origin_policy()

    def _method_not_allowed(request: Request) -> JSONResponse:
        headers = cors_headers(request.headers.get("origin"), request.app.state.origin_policy)
        headers["Allow"] = ALLOWED_METHODS
        error = MethodNotAllowedError()
        return JSONResponse(status_code=error.status_code, content=error.to_dict(), headers=headers)

    @app.exception_handler(StarletteHTTPException)
    async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
        """Answer unrouted methods with the JSON 405 body."""
        if exc.status_code == 405:
            return _method_not_allowed(request)
        return await http_exception_handler(request, exc)

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check():
        """Check service health and whether the upstream key is configured."""
        return HealthResponse(
            status="healthy",
            version=settings.app_version,
            api_key_configured=settings.api_key_configured,
        )

    @app.api_route(
        "/generate-recipe",
        methods=ROUTED_METHODS,
        tags=["Recipes"],
        responses={405: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def generate_recipe(
        request: Request,
        diet: Optional[str] = Query(None, description="Diet filter, e.g. vegan"),
        meal_type: Optional[str] = Query(None, alias="mealType", description="Meal type, e.g. breakfast"),
    ):
        """
        Get one random recipe.

        - **diet**: optional diet passed through to Spoonacular
        - **mealType**: optional meal type passed through as Spoonacular's `type`
        """
        headers = cors_headers(request.headers.get("origin"), request.app.state.origin_policy)

        if request.method == "OPTIONS":
            return Response(status_code=200, headers=headers)

        if request.method != "GET":
            return _method_not_allowed(request)

        try:
            recipe = await fetch_random_recipe(
                request.app.state.settings,
                diet=diet,
                meal_type=meal_type,
                transport=request.app.state.transport,
            )
        except RecipeProxyError as e:
            return JSONResponse(status_code=e.status_code, content=e.to_dict(), headers=headers)

        return JSONResponse(status_code=200, content=recipe, headers=headers)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    _settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=_settings.host,
        port=_settings.port,
        reload=_settings.debug
    )
