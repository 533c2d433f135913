"""
DeepL translation service.

This module provides the DeepLService class for translating key/value
strings with the DeepL API, and DeepLFreeService for accounts on the free
plan, which are served from a different host.

Features:
    - Interpolations protected from translation by the configured matcher
    - Formality preference sent only to languages that support it
    - Bounded retry of rate-limited (429) requests
"""

from typing import List, Optional
import asyncio
import logging
import httpx

from autotranslate.config import (
    DEEPL_API_ENDPOINT,
    DEEPL_API_KEY,
    DEEPL_FREE_API_ENDPOINT,
    MAX_RATE_LIMIT_RETRIES,
    RATE_LIMIT_STATUS,
    REQUEST_TIMEOUT,
    ProviderConfig,
)
from autotranslate.core.capabilities import CapabilitySet
from autotranslate.core.exceptions import (
    CapabilityFetchError,
    ProviderError,
    ProviderResponseError,
    RateLimitedError,
)
from autotranslate.core.matchers import Matcher, replace_interpolations, reinsert_interpolations
from autotranslate.core.models import LanguageEntry, TranslatableItem, TranslationResult
from autotranslate.utils.text_encoding import decode_escapes
from .base import TranslationService

logger = logging.getLogger(__name__)


class DeepLService(TranslationService):
    """
    Translation service for the DeepL API.

    Configuration:
        config string: "<auth key>[,less|more]"

    Example:
        >>> async with DeepLService() as deepl:
        ...     await deepl.initialize("my-key,less", matcher=get_matcher("i18next"))
        ...     results = await deepl.translate_strings(
        ...         [TranslatableItem("greeting", "Hello {{name}}")], "en", "de")
    """

    name = "DeepL"
    default_endpoint = DEEPL_API_ENDPOINT

    def __init__(self, api_endpoint: Optional[str] = None, timeout: float = REQUEST_TIMEOUT,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize the DeepL service.

        Args:
            api_endpoint: API base URL (default depends on the plan)
            timeout: Request timeout in seconds
            transport: Optional httpx transport (e.g. httpx.MockTransport)
        """
        super().__init__(timeout=timeout, transport=transport)
        self.api_endpoint = (api_endpoint or self.default_endpoint).rstrip('/')

    async def initialize(self, config: Optional[str] = None,
                         matcher: Optional[Matcher] = None,
                         decode_escapes: bool = False) -> None:
        """
        Parse the configuration and fetch the supported target languages.

        When config is None the key is read from the DEEPL_API_KEY environment
        variable.

        Raises:
            ConfigurationError: If no API key was provided (no request is made)
            CapabilityFetchError: If the language catalog cannot be fetched
        """
        if config is None:
            config = DEEPL_API_KEY
        provider_config = ProviderConfig.parse(config, matcher=matcher, decode_escapes=decode_escapes)
        languages = await self.fetch_languages(provider_config.api_key)

        self._config = provider_config
        self._capabilities = CapabilitySet.from_languages(languages)
        logger.info(
            f"{self.name} initialized: {len(languages)} target languages, "
            f"formality '{provider_config.formality.value}'"
        )

    async def fetch_languages(self, api_key: str) -> List[LanguageEntry]:
        """
        Fetch the languages DeepL can translate to.

        Args:
            api_key: DeepL authentication key

        Returns:
            List of LanguageEntry

        Raises:
            CapabilityFetchError: On a non-success response
        """
        client = await self._get_client()
        response = await client.get(
            f"{self.api_endpoint}/languages",
            params={"auth_key": api_key, "type": "target"}
        )

        if not response.is_success:
            raise CapabilityFetchError(
                response.status_code,
                response.reason_phrase,
                response.text,
                context={'reason': f"Could not fetch supported languages from {self.name}"}
            )

        try:
            return [LanguageEntry.from_dict(language) for language in response.json()]
        except (ValueError, KeyError, TypeError) as e:
            raise CapabilityFetchError(
                response.status_code,
                response.reason_phrase,
                response.text,
                context={'reason': f"Malformed language catalog: {e}"}
            ) from e

    def _build_translate_params(self, text: str, source_lang: str, target_lang: str) -> dict:
        params = {
            "text": text,
            "source_lang": source_lang.upper(),
            "target_lang": target_lang.upper(),
            "auth_key": self.config.api_key,
        }
        # DeepL rejects the whole request when formality is sent for a
        # language that does not support it
        if self.supports_formality(target_lang):
            params["formality"] = self.config.formality.value
        return params

    async def translate_strings(self, items: List[TranslatableItem],
                                source_lang: str, target_lang: str) -> List[TranslationResult]:
        """
        Translate all items concurrently.

        Returns:
            Results in the same order as items

        Raises:
            TranslationError: Any failure fails the whole batch; the error of the
                first failed item (in input order) is raised once all items settled
        """
        if not items:
            return []

        logger.debug(f"{self.name}: translating {len(items)} string(s) {source_lang} -> {target_lang}")
        results = await asyncio.gather(
            *(self.translate_string(item, source_lang, target_lang) for item in items),
            return_exceptions=True
        )
        failures = [r for r in results if isinstance(r, BaseException)]
        if failures:
            logger.debug(f"{self.name}: {len(failures)} of {len(items)} string(s) failed")
            raise failures[0]
        return list(results)

    async def translate_string(self, item: TranslatableItem, source_lang: str, target_lang: str,
                               retries: int = MAX_RATE_LIMIT_RETRIES) -> TranslationResult:
        """
        Translate one item, retrying rate-limited requests.

        Args:
            item: Item to translate
            source_lang: Source language code
            target_lang: Target language code
            retries: Number of retries allowed after a 429 response

        Returns:
            TranslationResult for item

        Raises:
            RateLimitedError: If every attempt was rate limited
            ProviderError: On any other non-success response
            ProviderResponseError: If the response holds no translation
            PlaceholderIntegrityError: If an interpolation marker went missing
        """
        client = await self._get_client()
        retries_left = retries
        attempts = 0

        while True:
            clean, replacements = replace_interpolations(item.value, self.config.matcher)
            params = self._build_translate_params(clean, source_lang, target_lang)

            attempts += 1
            response = await client.get(f"{self.api_endpoint}/translate", params=params)
            if response.is_success:
                break

            if response.status_code == RATE_LIMIT_STATUS:
                if retries_left > 0:
                    retries_left -= 1
                    logger.warning(
                        f"{self.name} rate limit hit for '{item.key}' "
                        f"(attempt {attempts}, {retries_left} retries left)"
                    )
                    continue
                raise RateLimitedError(
                    response.status_code,
                    response.reason_phrase,
                    response.text,
                    attempts=attempts
                )

            raise ProviderError(response.status_code, response.reason_phrase, response.text)

        translated = reinsert_interpolations(self._extract_text(response), replacements)
        if self.config.decode_escapes:
            translated = decode_escapes(translated)

        return TranslationResult(key=item.key, value=item.value, translated=translated)

    def _extract_text(self, response: httpx.Response) -> str:
        """Extract the first translation from a DeepL response body."""
        try:
            return response.json()["translations"][0]["text"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise ProviderResponseError(
                response.status_code,
                response.reason_phrase,
                response.text,
                context={'reason': f"No translation in response: {e}"}
            ) from e


class DeepLFreeService(DeepLService):
    """DeepL service for API keys on the free plan"""

    name = "DeepL Free"
    default_endpoint = DEEPL_FREE_API_ENDPOINT
