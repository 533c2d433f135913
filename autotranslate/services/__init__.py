"""
Translation service implementations

Services:
    - deepl: DeepL API (paid plan)
    - deepl-free: DeepL API (free plan)
"""
from typing import Dict, Type

from autotranslate.core.exceptions import ConfigurationError
from .base import TranslationService
from .deepl import DeepLService, DeepLFreeService

SERVICES: Dict[str, Type[TranslationService]] = {
    'deepl': DeepLService,
    'deepl-free': DeepLFreeService,
}


def create_service(service_type: str = "deepl", **kwargs) -> TranslationService:
    """Factory function to create translation services"""
    service_class = SERVICES.get(service_type.lower())
    if service_class is None:
        raise ConfigurationError(
            f"Unknown translation service: {service_type}",
            context={'available': ", ".join(sorted(SERVICES))}
        )
    return service_class(**kwargs)


__all__ = [
    'SERVICES',
    'TranslationService',
    'DeepLService',
    'DeepLFreeService',
    'create_service',
]
