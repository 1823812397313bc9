"""
CropAI advisory API application.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.routers import advisory

logger = logging.getLogger(__name__)

__version__ = "0.1.0"

FEATURES = [
    {"name": "Disease Prediction", "endpoint": "/api/predict-disease", "method": "POST"},
    {"name": "Crop Recommendation", "endpoint": "/api/recommend-crop", "method": "POST"},
    {"name": "Fertilizer Suggestion", "endpoint": "/api/suggest-fertilizer", "method": "POST"},
]


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="CropAI API", version=__version__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.info(f"Rejected request to {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "Invalid request"})

    @app.get("/")
    def index():
        return {"name": "CropAI", "version": __version__, "features": FEATURES}

    @app.get("/healthz")
    def healthz():
        return {"status": "ok"}

    app.include_router(advisory.router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=8000)
