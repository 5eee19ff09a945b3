# convert/script_converter.py
import asyncio
import logging
from typing import Callable, List, Optional

import pykakasi

from models.schemas import ConversionResult, RomajiSystem, ScriptKind
from utils.exceptions import ConversionError, ServiceUnavailableError
from .punctuation import normalize_punctuation
from .readiness import Readiness

logger = logging.getLogger(__name__)

# pykakasi token keys per target script
_READING_KEYS = {
    ScriptKind.HIRAGANA: "hira",
    ScriptKind.KATAKANA: "kana",
}


class ScriptConverter:
    """
    Converts Japanese text to hiragana, katakana or romaji.

    The analyzer loads its dictionaries once, in the background, after
    start(). Until that finishes every conversion is refused with
    ServiceUnavailableError rather than waiting.
    """

    def __init__(self, analyzer_factory: Optional[Callable] = None,
                 default_script: str = ScriptKind.HIRAGANA.value,
                 default_romaji_system: str = RomajiSystem.HEPBURN.value):
        self._analyzer_factory = analyzer_factory or pykakasi.kakasi
        self.default_script = default_script
        self.default_romaji_system = default_romaji_system
        self.analyzer = None
        self.readiness = Readiness()
        self._init_task: Optional[asyncio.Task] = None

    def start(self) -> asyncio.Task:
        """Schedule initialization without waiting for it"""
        if self._init_task is None:
            self._init_task = asyncio.create_task(self.initialize())
        return self._init_task

    async def initialize(self):
        """Load the analyzer and mark the converter ready"""
        if self.readiness.is_ready:
            return

        logger.info("Loading script analyzer dictionaries...")
        try:
            loop = asyncio.get_running_loop()
            self.analyzer = await loop.run_in_executor(None, self._analyzer_factory)
        except Exception as e:
            logger.error(f"Script analyzer initialization failed: {e}", exc_info=True)
            return

        self.readiness.mark_ready()
        logger.info("Script analyzer ready")

    def is_ready(self) -> bool:
        return self.readiness.is_ready

    async def convert(self, text: str, to: Optional[str] = None,
                      romaji_system: Optional[str] = None) -> ConversionResult:
        """
        Convert text to the requested script.

        Args:
            text: Japanese text to convert
            to: Target script name, defaults to hiragana when None
            romaji_system: Romanization system, only used for romaji

        Returns:
            ConversionResult with the original text, the converted text
            and the resolved script
        """
        if not self.is_ready():
            raise ServiceUnavailableError("Script analyzer is not ready")

        script = self._resolve_script(to)
        system = self._resolve_romaji_system(romaji_system) if script == ScriptKind.ROMAJI else None

        try:
            loop = asyncio.get_running_loop()
            converted = await loop.run_in_executor(None, self._convert_sync, text, script, system)
        except Exception as e:
            logger.error(f"Script conversion failed for '{text[:50]}': {e}")
            raise ConversionError("Script conversion failed", str(e))

        if script == ScriptKind.HIRAGANA:
            converted = normalize_punctuation(converted)

        return ConversionResult(original=text, converted=converted, format=script)

    def _resolve_script(self, to: Optional[str]) -> ScriptKind:
        try:
            return ScriptKind(to if to is not None else self.default_script)
        except ValueError:
            raise ConversionError(
                "Script conversion failed",
                f'Invalid target script: "{to}". Choose from: {", ".join(s.value for s in ScriptKind)}'
            )

    def _resolve_romaji_system(self, romaji_system: Optional[str]) -> RomajiSystem:
        try:
            return RomajiSystem(romaji_system or self.default_romaji_system)
        except ValueError:
            raise ConversionError(
                "Script conversion failed",
                f'Invalid romaji system: "{romaji_system}". Choose from: {", ".join(s.value for s in RomajiSystem)}'
            )

    def _convert_sync(self, text: str, script: ScriptKind, system: Optional[RomajiSystem]) -> str:
        """Synchronous analyzer call"""
        tokens: List[dict] = self.analyzer.convert(text)

        # Readings are concatenated as returned; spacing and punctuation come from the analyzer
        key = system.value if script == ScriptKind.ROMAJI else _READING_KEYS[script]
        return "".join(token[key] for token in tokens)

    async def close(self):
        """Cancel a pending initialization"""
        if self._init_task and not self._init_task.done():
            self._init_task.cancel()
            try:
                await self._init_task
            except asyncio.CancelledError:
                pass
        logger.info("Script converter closed")
