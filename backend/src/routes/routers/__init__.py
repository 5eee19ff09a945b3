# routes/routers/__init__.py
"""
API endpoints package
"""

from . import translation, conversion, health

__all__ = ["translation", "conversion", "health"]
