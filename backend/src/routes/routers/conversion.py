# routes/routers/conversion.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends

from models.requests import ConvertRequest
from models.responses import ConversionResponse, ErrorResponse
from routes.dependencies import get_converter, require_converter_ready
from services.convert.script_converter import ScriptConverter
from utils.exceptions import ConversionError, ValidationError

router = APIRouter()
logger = logging.getLogger(__name__)

MISSING_TEXT_MESSAGE = "変換するテキストがありません。"
CONVERSION_FAILURE_MESSAGE = "テキストの変換中にエラーが発生しました。"


@router.post(
    "/convert",
    response_model=ConversionResponse,
    dependencies=[Depends(require_converter_ready)],
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def convert_text(
    body: Optional[ConvertRequest] = None,
    converter: ScriptConverter = Depends(get_converter),
):
    """Convert Japanese text to hiragana, katakana or romaji"""
    text = body.text if body else None
    if not text:
        raise ValidationError(MISSING_TEXT_MESSAGE)

    try:
        result = await converter.convert(text, to=body.to, romaji_system=body.romaji_system)
    except ConversionError as e:
        logger.error(f"Conversion to {body.to or converter.default_script} failed: {e}")
        raise ConversionError(CONVERSION_FAILURE_MESSAGE, e.details or e.message) from e

    return ConversionResponse(
        original=result.original,
        converted=result.converted,
        format=result.format.value,
    )
