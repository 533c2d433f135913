"""
autotranslate - machine translation of localization strings

Delegates translation of key/value strings to DeepL while keeping template
interpolations intact.
"""
from autotranslate.core.exceptions import (
    TranslationError,
    ConfigurationError,
    ServiceNotInitializedError,
    ProviderError,
    CapabilityFetchError,
    RateLimitedError,
    ProviderResponseError,
    PlaceholderIntegrityError,
)
from autotranslate.core.models import TranslatableItem, TranslationResult, LanguageEntry
from autotranslate.core.matchers import MATCHERS, Matcher, get_matcher
from autotranslate.services import SERVICES, TranslationService, DeepLService, DeepLFreeService, create_service

__version__ = "1.0.0"

__all__ = [
    'TranslationError',
    'ConfigurationError',
    'ServiceNotInitializedError',
    'ProviderError',
    'CapabilityFetchError',
    'RateLimitedError',
    'ProviderResponseError',
    'PlaceholderIntegrityError',
    'TranslatableItem',
    'TranslationResult',
    'LanguageEntry',
    'MATCHERS',
    'Matcher',
    'get_matcher',
    'SERVICES',
    'TranslationService',
    'DeepLService',
    'DeepLFreeService',
    'create_service',
]
