# routes/routers/health.py
import logging
import time
from fastapi import APIRouter, Depends
from config import settings
from models.responses import HealthResponse
from routes.dependencies import get_converter, get_translator
from services.convert.script_converter import ScriptConverter
from services.translate.base import BaseTranslator

logger = logging.getLogger(__name__)
router = APIRouter()

# Track uptime
START_TIME = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check(
    translator: BaseTranslator = Depends(get_translator),
    converter: ScriptConverter = Depends(get_converter),
):
    """
    API health check.
    Reports version, uptime, translation provider and whether the script
    analyzer has finished loading. Never fails while the analyzer is still
    loading; status is "initializing" instead.
    """
    ready = converter.is_ready()

    return HealthResponse(
        status="ok" if ready else "initializing",
        version=settings.app_version,
        converter_ready=ready,
        translation_service=translator.name,
        uptime_seconds=time.time() - START_TIME,
    )
