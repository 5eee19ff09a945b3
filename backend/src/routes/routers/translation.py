# routes/routers/translation.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends

from models.requests import TranslateRequest
from models.responses import TranslationResponse, ErrorResponse
from routes.dependencies import get_translator
from services.translate.base import BaseTranslator
from utils.exceptions import TranslationError, ValidationError

router = APIRouter()
logger = logging.getLogger(__name__)

MISSING_TEXT_MESSAGE = "翻訳するテキストがありません。"
UPSTREAM_FAILURE_MESSAGE = "翻訳サーバーでエラーが発生しました。"


@router.post(
    "/translate",
    response_model=TranslationResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def translate_text(
    body: Optional[TranslateRequest] = None,
    translator: BaseTranslator = Depends(get_translator),
):
    """Translate text into Japanese via the configured provider"""
    text = body.text if body else None
    if not text:
        raise ValidationError(MISSING_TEXT_MESSAGE)

    try:
        translation = await translator.translate(text)
    except TranslationError as e:
        logger.error(f"{translator.name} request failed: {e}")
        raise TranslationError(UPSTREAM_FAILURE_MESSAGE) from e

    return TranslationResponse(translation=translation)
