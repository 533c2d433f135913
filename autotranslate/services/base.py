"""
Base class for machine-translation services.

This module defines the abstract base class that all translation services
must implement. A service is initialized once per session, which fetches
the provider's capabilities, and then translates lists of key/value items.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
import httpx

from autotranslate.config import REQUEST_TIMEOUT, ProviderConfig
from autotranslate.core.capabilities import CapabilitySet
from autotranslate.core.exceptions import ServiceNotInitializedError
from autotranslate.core.matchers import Matcher
from autotranslate.core.models import TranslatableItem, TranslationResult


class TranslationService(ABC):
    """Abstract base class for translation services"""

    name: str = ""

    def __init__(self, timeout: float = REQUEST_TIMEOUT,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize the translation service.

        Args:
            timeout: Request timeout in seconds
            transport: Optional httpx transport (e.g. httpx.MockTransport)
        """
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._config: Optional[ProviderConfig] = None
        self._capabilities: Optional[CapabilitySet] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create a persistent HTTP client with connection pooling"""
        if self._client is None:
            self._client = httpx.AsyncClient(
                limits=httpx.Limits(max_keepalive_connections=5, max_connections=10),
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport
            )
        return self._client

    async def close(self):
        """Close the HTTP client"""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "TranslationService":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    @property
    def config(self) -> ProviderConfig:
        if self._config is None:
            raise ServiceNotInitializedError(f"{self.name} has not been initialized")
        return self._config

    @property
    def capabilities(self) -> CapabilitySet:
        if self._capabilities is None:
            raise ServiceNotInitializedError(f"{self.name} has not been initialized")
        return self._capabilities

    @property
    def is_initialized(self) -> bool:
        return self._config is not None and self._capabilities is not None

    @abstractmethod
    async def initialize(self, config: Optional[str] = None,
                         matcher: Optional[Matcher] = None,
                         decode_escapes: bool = False) -> None:
        """
        Configure the service and fetch the provider's capabilities.

        Args:
            config: Service configuration string (credential and options)
            matcher: Interpolation matcher used to protect placeholders
            decode_escapes: Decode HTML entities in translated output
        """
        pass

    def supports_language(self, language: str) -> bool:
        """Whether language is a valid target for this service."""
        return self.capabilities.supports_language(language)

    def supports_formality(self, language: str) -> bool:
        """Whether a formality preference may be sent for target language."""
        return self.capabilities.supports_formality(language)

    @abstractmethod
    async def translate_strings(self, items: List[TranslatableItem],
                                source_lang: str, target_lang: str) -> List[TranslationResult]:
        """
        Translate every item from source_lang to target_lang.

        Returns:
            One TranslationResult per item, in input order
        """
        pass
