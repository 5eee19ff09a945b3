from pathlib import Path
import asyncio
import sys
import threading

import pytest
from fastapi.testclient import TestClient

SRC = Path(__file__).resolve().parents[1] / 'src'
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from main import create_app
from services.convert.script_converter import ScriptConverter
from services.translate.base import BaseTranslator
from utils.exceptions import TranslationError


class FakeAnalyzer:
    """Stands in for pykakasi: one token per call, readings echo the input."""

    def __init__(self, tokens=None, error=None):
        self.tokens = tokens
        self.error = error
        self.calls = []

    def convert(self, text):
        self.calls.append(text)
        if self.error:
            raise self.error
        if self.tokens is not None:
            return self.tokens
        return [{
            'orig': text,
            'hira': text,
            'kana': text,
            'hepburn': text,
            'kunrei': text,
            'passport': text,
        }]


class FakeTranslator(BaseTranslator):
    def __init__(self, result='こんにちは', error=None):
        super().__init__()
        self.result = result
        self.error = error
        self.calls = []

    async def _translate(self, queries):
        self.calls.append(list(queries))
        if self.error:
            raise self.error
        return [self.result]

    def is_available(self):
        return True


@pytest.fixture
def analyzer():
    return FakeAnalyzer()


@pytest.fixture
def translator():
    return FakeTranslator()


@pytest.fixture
def ready_converter(analyzer):
    converter = ScriptConverter(analyzer_factory=lambda: analyzer)
    asyncio.run(converter.initialize())
    assert converter.is_ready()
    return converter


@pytest.fixture
def analyzer_gate():
    gate = threading.Event()
    yield gate
    gate.set()


@pytest.fixture
def pending_converter(analyzer_gate):
    """Converter whose analyzer keeps loading until the gate opens."""
    def slow_factory():
        analyzer_gate.wait(timeout=10)
        return FakeAnalyzer()

    return ScriptConverter(analyzer_factory=slow_factory)


@pytest.fixture
def client(translator, ready_converter):
    app = create_app(translator=translator, converter=ready_converter)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def failing_translator():
    return FakeTranslator(error=TranslationError('DeepL API error', 'HTTP 456'))
