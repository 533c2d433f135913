"""
Pytest configuration and fixtures for all tests.

This file is automatically loaded by pytest and provides common fixtures
and configuration for all test modules.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import httpx
import pytest

from autotranslate.services.deepl import DeepLService


DEFAULT_CATALOG = [
    {"language": "DE", "name": "German", "supports_formality": True},
    {"language": "EN-GB", "name": "English (British)", "supports_formality": False},
    {"language": "EN-US", "name": "English (American)", "supports_formality": False},
    {"language": "ES", "name": "Spanish", "supports_formality": True},
    {"language": "JA", "name": "Japanese", "supports_formality": False},
    {"language": "PT-BR", "name": "Portuguese (Brazilian)", "supports_formality": True},
]


class FakeDeepL:
    """
    In-memory stand-in for the DeepL HTTP API, used through httpx.MockTransport.

    Translate requests are answered from `queued` first (one response per
    request), then by running `translate` over the request's text.
    """

    def __init__(self, catalog=None):
        self.catalog = DEFAULT_CATALOG if catalog is None else catalog
        self.catalog_response = None
        self.queued = []
        self.translate = lambda text: text
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path.endswith("/languages"):
            if self.catalog_response is not None:
                return self.catalog_response
            return httpx.Response(200, json=self.catalog)

        if self.queued:
            return self.queued.pop(0)

        text = request.url.params["text"]
        return httpx.Response(200, json={
            "translations": [{"detected_source_language": "EN", "text": self.translate(text)}]
        })

    def queue(self, *responses: httpx.Response):
        self.queued.extend(responses)

    @property
    def catalog_requests(self):
        return [r for r in self.requests if r.url.path.endswith("/languages")]

    @property
    def translate_requests(self):
        return [r for r in self.requests if r.url.path.endswith("/translate")]


@pytest.fixture
def fake_deepl():
    """Fake DeepL API with the default language catalog."""
    return FakeDeepL()


@pytest.fixture
def make_service(fake_deepl):
    """Factory creating an initialized service talking to fake_deepl."""
    async def factory(config="test-key", matcher=None, decode_escapes=False,
                      service_class=DeepLService, **kwargs):
        service = service_class(transport=httpx.MockTransport(fake_deepl.handler), **kwargs)
        await service.initialize(config, matcher=matcher, decode_escapes=decode_escapes)
        return service
    return factory
