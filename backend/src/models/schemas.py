# models/schemas.py
from pydantic import BaseModel, Field
from enum import Enum


# Target scripts
class ScriptKind(str, Enum):
    HIRAGANA = "hiragana"
    KATAKANA = "katakana"
    ROMAJI = "romaji"

class RomajiSystem(str, Enum):
    HEPBURN = "hepburn"
    KUNREI = "kunrei"
    PASSPORT = "passport"


class ConversionResult(BaseModel):
    """Outcome of a single script conversion"""
    original: str = Field(..., description="Text as submitted")
    converted: str = Field(..., description="Converted text")
    format: ScriptKind = Field(..., description="Resolved target script")
