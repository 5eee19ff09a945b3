# models/requests.py
from pydantic import BaseModel, Field
from typing import Optional

class TranslateRequest(BaseModel):
    text: Optional[str] = Field(
        default=None,
        description="Text to translate into Japanese"
    )

class ConvertRequest(BaseModel):
    text: Optional[str] = Field(
        default=None,
        description="Japanese text to convert"
    )
    to: Optional[str] = Field(
        default=None,
        description="Target script: hiragana, katakana or romaji (default hiragana)"
    )
    romaji_system: Optional[str] = Field(
        default=None,
        description="Romanization system for romaji output: hepburn, kunrei or passport"
    )
