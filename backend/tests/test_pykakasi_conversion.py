import asyncio

import pytest
from fastapi.testclient import TestClient

from main import create_app
from services.convert.script_converter import ScriptConverter


@pytest.fixture(scope='module')
def kakasi_converter():
    converter = ScriptConverter()
    asyncio.run(converter.initialize())
    assert converter.is_ready()
    return converter


@pytest.fixture
def kakasi_client(translator, kakasi_converter):
    with TestClient(create_app(translator=translator, converter=kakasi_converter)) as test_client:
        yield test_client


def test_hiragana_punctuation_from_analyzer_tokens(kakasi_client):
    response = kakasi_client.post('/convert', json={'text': 'こんにちは,世界.OK?', 'to': 'hiragana'})

    assert response.status_code == 200
    body = response.json()
    assert body['original'] == 'こんにちは,世界.OK?'
    assert body['converted'].endswith('、せかい。OK！')
    assert body['format'] == 'hiragana'


def test_hiragana_comma_run_collapses(kakasi_client):
    response = kakasi_client.post('/convert', json={'text': '　、、、', 'to': 'hiragana'})

    assert response.json()['converted'] == '、'


def test_kanji_defaults_to_hiragana_reading(kakasi_client):
    response = kakasi_client.post('/convert', json={'text': '犬'})

    assert response.json() == {'original': '犬', 'converted': 'いぬ', 'format': 'hiragana'}


def test_katakana_keeps_ascii_text_and_punctuation(kakasi_client):
    assert kakasi_client.post('/convert', json={'text': 'test', 'to': 'katakana'}).json()['converted'] == 'test'
    assert kakasi_client.post('/convert', json={'text': 'test, ok?', 'to': 'katakana'}).json()['converted'] == 'test, ok?'


def test_romaji_keeps_analyzer_spacing_and_punctuation(kakasi_client):
    response = kakasi_client.post('/convert', json={'text': 'hello world, ok?', 'to': 'romaji'})

    assert response.status_code == 200
    assert response.json()['converted'] == 'hello world, ok?'
