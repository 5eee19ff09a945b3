# base.py
import logging
from abc import ABC, abstractmethod
from typing import List

from utils.exceptions import TranslationError

logger = logging.getLogger(__name__)


class BaseTranslator(ABC):
    """Base class for translation providers.

    A provider translates a batch of queries into its configured target
    language. The relay always sends a batch of exactly one query and
    returns the first translation unmodified.
    """

    def __init__(self):
        self.logger = logger
        self.request_count = 0

    async def translate(self, text: str) -> str:
        """Translate a single text, returning the first translation verbatim"""
        translations = await self._translate([text])

        if not translations:
            raise TranslationError(f"{self.name} returned no translations")

        self.request_count += 1
        return translations[0]

    @property
    def name(self) -> str:
        return self.__class__.__name__.replace('Translator', '')

    @abstractmethod
    async def _translate(self, queries: List[str]) -> List[str]:
        """Actual translation implementation - to be overridden"""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if translator is available"""
        pass

    def get_usage_stats(self) -> dict:
        """Get usage statistics"""
        return {
            'service': self.name,
            'requests_made': self.request_count,
            'available': self.is_available(),
        }
