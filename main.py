# main.py
import logging
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from routes.deps import get_settings
from routes.ingredient_route import router as ingredient_router
from routes.recipe_route import router as recipe_router
from services.config import Settings
from services.errors import APIError
from services.spoonacular import SpoonacularClient
from services.vision_ocr import VisionOCR

logger = logging.getLogger("recipe-relay")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )


def create_app(
    settings: Optional[Settings] = None,
    vision_ocr: Optional[VisionOCR] = None,
    recipe_client: Optional[SpoonacularClient] = None,
) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)
    logger.info("Starting recipe relay backend...")

    app = FastAPI(title="Recipe relay backend")

    # Clients are created once and shared read-only by every request
    app.state.settings = settings
    app.state.vision_ocr = vision_ocr or VisionOCR(settings.google_credentials_path, timeout=settings.request_timeout)
    app.state.recipe_client = recipe_client or SpoonacularClient(
        settings.spoonacular_api_key,
        base_url=settings.spoonacular_base_url,
        timeout=settings.request_timeout,
    )
    if not settings.spoonacular_api_key:
        logger.warning("SPOONACULAR_API_KEY is not set")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Invalid request to %s: %s", request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"error": "Invalid request", "details": str(exc.errors())})

    @app.get("/")
    def root():
        return {"message": "Recipe relay backend is running"}

    @app.get("/health")
    def health(settings: Settings = Depends(get_settings)):
        """Configuration check only; no remote service is called."""
        if not settings.config_complete:
            return {
                "status": "warning",
                "message": "SPOONACULAR_API_KEY must be configured.",
                "ocr_engine": "google-vision",
                "vision_credentials": settings.vision_credentials,
                "config_status": "incomplete",
            }
        return {
            "status": "healthy",
            "message": "Service is running.",
            "ocr_engine": "google-vision",
            "vision_credentials": settings.vision_credentials,
            "config_status": "complete",
        }

    app.include_router(ingredient_router)
    app.include_router(recipe_router)
    return app


if __name__ == "__main__":
    settings = Settings.from_env()
    app = create_app(settings)
    logger.info("Backend listening on port %d", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_level=settings.log_level.lower())
