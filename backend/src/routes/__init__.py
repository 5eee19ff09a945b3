# routes/__init__.py
"""
API package for the translation and script conversion relay
"""

from .routers import translation, conversion, health
from .dependencies import (
    get_client_ip,
    get_translator,
    get_converter,
    require_converter_ready,
)

__all__ = [
    "translation",
    "conversion",
    "health",
    "get_client_ip",
    "get_translator",
    "get_converter",
    "require_converter_ready",
]
