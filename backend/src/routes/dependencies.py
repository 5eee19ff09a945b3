# routes/dependencies.py
import logging
from fastapi import Depends, Request

from services.convert.script_converter import ScriptConverter
from services.translate.base import BaseTranslator
from utils.exceptions import ServiceUnavailableError


logger = logging.getLogger(__name__)

NOT_READY_MESSAGE = "変換サービスの準備がまだできていません。しばらくしてから再度お試しください。"


def get_client_ip(request: Request) -> str:
    """Get client IP address"""
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip

    return request.client.host if request.client else "unknown"


def get_translator(request: Request) -> BaseTranslator:
    """Translation provider attached to the application at startup"""
    return request.app.state.translator


def get_converter(request: Request) -> ScriptConverter:
    """Script converter attached to the application at startup"""
    return request.app.state.converter


async def require_converter_ready(
    converter: ScriptConverter = Depends(get_converter)
) -> None:
    """
    Refuse conversion requests until the analyzer has loaded.

    Runs before the request body is validated, so an early request is
    answered with 503 whatever it contains.
    """
    if not converter.is_ready():
        logger.warning("Conversion requested before the script analyzer finished loading")
        raise ServiceUnavailableError(NOT_READY_MESSAGE)
