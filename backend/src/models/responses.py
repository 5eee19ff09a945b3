from pydantic import BaseModel, Field
from typing import Optional

class TranslationResponse(BaseModel):
    translation: str = Field(..., description="Japanese translation of the submitted text")

class ConversionResponse(BaseModel):
    original: str = Field(..., description="Text as submitted")
    converted: str = Field(..., description="Converted text")
    format: str = Field(..., description="Target script used for the conversion")

class HealthResponse(BaseModel):
    status: str = Field(..., description="API health status")
    version: str = Field(..., description="API version")
    converter_ready: bool = Field(..., description="Whether the script analyzer has finished loading")
    translation_service: str = Field(..., description="Translation provider in use")
    uptime_seconds: float = Field(..., description="API uptime in seconds")

class ErrorResponse(BaseModel):
    error: str = Field(..., description="Error message")
    details: Optional[str] = Field(None, description="Detailed error information")
