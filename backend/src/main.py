# main.py
import logging
import sys
import time
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from typing import Optional

from fastapi import FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from routes.routers import translation, conversion, health
from routes.dependencies import get_client_ip
from config import settings, Settings
from models.responses import ErrorResponse
from services.convert.script_converter import ScriptConverter
from services.translate.base import BaseTranslator
from services.translate.deepl_translator import DeepLTranslator
from utils.exceptions import NihongoRelayException, ConfigurationError

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    encoding="utf-8",
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
        RotatingFileHandler(
            settings.log_file_path,
            maxBytes=settings.log_max_size_mb * 1024 * 1024,
            backupCount=settings.log_backup_count,
            encoding="utf-8",
        ) if settings.log_to_file else logging.NullHandler()
    ]
)

logger = logging.getLogger(__name__)

MISSING_API_KEY_MESSAGE = "DEEPL_API_KEY is not set. Add it to the environment or the .env file."
INVALID_REQUEST_MESSAGE = "リクエストの形式が正しくありません。"
INTERNAL_ERROR_MESSAGE = "サーバー内部でエラーが発生しました。"


def build_translator(app_settings: Settings) -> BaseTranslator:
    """Create the DeepL translator, failing fast without an API key"""
    if not app_settings.deepl_api_key:
        raise ConfigurationError(MISSING_API_KEY_MESSAGE)

    return DeepLTranslator(
        api_key=app_settings.deepl_api_key,
        server_url=app_settings.deepl_api_url or None,
    )


def build_converter(app_settings: Settings) -> ScriptConverter:
    return ScriptConverter(
        default_script=app_settings.default_script,
        default_romaji_system=app_settings.default_romaji_system,
    )


def create_app(
    translator: Optional[BaseTranslator] = None,
    converter: Optional[ScriptConverter] = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Build the API application.

    The translator and converter are created at startup unless given, so
    tests can pass doubles in their place.
    """
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager"""
        # Startup
        logger.info(f"Starting {app_settings.app_name}...")

        try:
            logger.info("Initializing translation service...")
            app.state.translator = translator or build_translator(app_settings)

            logger.info("Scheduling script analyzer initialization...")
            app.state.converter = converter or build_converter(app_settings)
            app.state.converter.start()

        except Exception as e:
            logger.error(f"Failed to initialize services: {e}")
            raise

        yield

        # Shutdown
        logger.info(f"Shutting down {app_settings.app_name}...")

        try:
            await app.state.converter.close()
            logger.info("Cleanup completed successfully")

        except Exception as e:
            logger.error(f"Error during cleanup: {e}")

    app = FastAPI(
        title=app_settings.app_name,
        description=app_settings.app_description,
        version=app_settings.app_version,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.allowed_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Request logging middleware"""
        start_time = time.time()
        client_ip = get_client_ip(request)

        logger.info(f"Request started: {request.method} {request.url.path} from {client_ip}")

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(
            f"Request completed: {request.method} {request.url.path} "
            f"- Status: {response.status_code} - Time: {process_time:.3f}s"
        )

        response.headers["X-Process-Time"] = str(process_time)
        return response

    @app.exception_handler(NihongoRelayException)
    async def relay_error_handler(request: Request, exc: NihongoRelayException):
        """Handle application errors"""
        if exc.status_code >= 500:
            logger.error(f"{type(exc).__name__}: {exc}")
        else:
            logger.warning(f"{type(exc).__name__}: {exc}")
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=exc.message, details=exc.details).model_dump(exclude_none=True)
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle request validation errors"""
        logger.warning(f"Validation error: {exc.errors()}")
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error=INVALID_REQUEST_MESSAGE, details=str(exc.errors())).model_dump()
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions"""
        logger.error(f"HTTP error: {exc.status_code} - {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions"""
        logger.error(f"Unexpected error: {str(exc)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": INTERNAL_ERROR_MESSAGE}
        )

    app.include_router(translation.router, tags=["translation"])
    app.include_router(conversion.router, tags=["conversion"])
    app.include_router(health.router, tags=["health"])

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "message": app_settings.app_name,
            "version": app_settings.app_version,
            "status": "running",
            "docs": "/docs",
            "health": "/health"
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    if not settings.deepl_api_key:
        logger.error(MISSING_API_KEY_MESSAGE)
        sys.exit(1)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level="info" if settings.debug else "warning",
        access_log=settings.debug
    )
