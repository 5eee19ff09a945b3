# deepl_translator.py
import asyncio
import logging
from typing import List, Optional

import deepl

from .base import BaseTranslator
from utils.exceptions import ConfigurationError, TranslationError

logger = logging.getLogger(__name__)


class DeepLTranslator(BaseTranslator):
    """DeepL translation service implementation"""

    # Translations are always into Japanese
    TARGET_LANG = "JA"

    def __init__(self, api_key: str, server_url: Optional[str] = None):
        super().__init__()

        if not api_key:
            raise ConfigurationError("DeepL API key is required")

        self.api_key = api_key
        self.server_url = server_url or None
        self.target_lang = self.TARGET_LANG
        self.translator = None
        self.quota_exceeded = False
        self.auth_failed = False

        self._initialize_translator()

    def _initialize_translator(self):
        """Create the DeepL client. No request is sent until the first translation."""
        # One request to the relay is one attempt against DeepL
        deepl.http_client.max_network_retries = 0
        self.translator = deepl.Translator(self.api_key, server_url=self.server_url)
        self.logger.info(
            f"DeepL client ready (target: {self.target_lang}, "
            f"endpoint: {self.server_url or 'auto'})"
        )

    async def _translate(self, queries: List[str]) -> List[str]:
        """Translate queries using DeepL API"""
        if not self.translator:
            raise TranslationError("DeepL translator not initialized")

        # DeepL API is synchronous, so run in executor
        loop = asyncio.get_running_loop()

        try:
            results = await loop.run_in_executor(None, self._translate_sync, queries)

        except deepl.QuotaExceededException as e:
            self.logger.warning("DeepL quota exceeded")
            self.quota_exceeded = True
            raise TranslationError("DeepL quota exceeded", str(e))

        except deepl.AuthorizationException as e:
            self.logger.error("DeepL authorization failed")
            self.auth_failed = True
            raise TranslationError("DeepL authorization failed", str(e))

        except deepl.DeepLException as e:
            self.logger.error(f"DeepL API error: {e}")
            raise TranslationError("DeepL API error", str(e))

        try:
            return [result.text for result in results]
        except (AttributeError, TypeError) as e:
            self.logger.error(f"Malformed DeepL response: {results!r}")
            raise TranslationError("Malformed DeepL response", str(e))

    def _translate_sync(self, queries: List[str]):
        """Synchronous DeepL translation call"""
        return self.translator.translate_text(queries, target_lang=self.target_lang)

    def is_available(self) -> bool:
        """Check if DeepL is available for use"""
        return self.translator is not None

    def get_usage_stats(self) -> dict:
        """Get usage statistics"""
        return {
            **super().get_usage_stats(),
            'quota_exceeded': self.quota_exceeded,
            'auth_failed': self.auth_failed,
        }
