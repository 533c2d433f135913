"""
Centralized configuration for the translation services
"""
import os
import logging
from pathlib import Path
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TYPE_CHECKING
from dotenv import load_dotenv

from autotranslate.core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from autotranslate.core.matchers import Matcher

# Setup debug logger for configuration
_config_logger = logging.getLogger('config')

# Load .env file from the current working directory if it exists
_env_file = Path.cwd() / '.env'
if _env_file.exists():
    load_dotenv(_env_file)

DEBUG_MODE = os.getenv('DEBUG_MODE', 'false').lower() == 'true'
if DEBUG_MODE:
    logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    _config_logger.setLevel(logging.DEBUG)

# DeepL endpoints (paid and free plans use different hosts)
DEEPL_API_ENDPOINT = os.getenv('DEEPL_API_ENDPOINT', 'https://api.deepl.com/v2')
DEEPL_FREE_API_ENDPOINT = os.getenv('DEEPL_FREE_API_ENDPOINT', 'https://api-free.deepl.com/v2')
DEEPL_API_KEY = os.getenv('DEEPL_API_KEY', '')

REQUEST_TIMEOUT = float(os.getenv('REQUEST_TIMEOUT', '60'))
MAX_RATE_LIMIT_RETRIES = int(os.getenv('MAX_RATE_LIMIT_RETRIES', '5'))

# "Too Many Requests" - the only status that is retried
RATE_LIMIT_STATUS = 429

# ============================================================================
# INTERPOLATION MARKER CONFIGURATION
# ============================================================================
# Protected fragments are swapped for these markers before a string is sent
# to the provider. The ordinal inside the marker identifies the fragment.

INTERPOLATION_MARKER_PREFIX = '<span translate="no">'
"""Prefix for interpolation markers"""

INTERPOLATION_MARKER_SUFFIX = '</span>'
"""Suffix for interpolation markers"""


def create_marker(index: int) -> str:
    """Create the marker string for the fragment with the given ordinal."""
    return f"{INTERPOLATION_MARKER_PREFIX}{index}{INTERPOLATION_MARKER_SUFFIX}"


def mask_secret(secret: str) -> str:
    """Mask a credential for log output."""
    return '***' + secret[-4:] if secret else '(not set)'


if DEBUG_MODE:
    _config_logger.debug("=" * 60)
    _config_logger.debug("LOADED CONFIGURATION VALUES:")
    _config_logger.debug(f"   DEEPL_API_ENDPOINT: {DEEPL_API_ENDPOINT}")
    _config_logger.debug(f"   DEEPL_FREE_API_ENDPOINT: {DEEPL_FREE_API_ENDPOINT}")
    _config_logger.debug(f"   DEEPL_API_KEY: {mask_secret(DEEPL_API_KEY)}")
    _config_logger.debug(f"   REQUEST_TIMEOUT: {REQUEST_TIMEOUT}")
    _config_logger.debug(f"   MAX_RATE_LIMIT_RETRIES: {MAX_RATE_LIMIT_RETRIES}")
    _config_logger.debug("=" * 60)


class Formality(Enum):
    """Formality register requested from the provider"""
    DEFAULT = "default"
    LESS = "less"
    MORE = "more"

    @classmethod
    def parse(cls, value: Optional[str]) -> 'Formality':
        """Only exactly 'less' and 'more' are recognized, anything else is DEFAULT."""
        if value == cls.LESS.value:
            return cls.LESS
        if value == cls.MORE.value:
            return cls.MORE
        return cls.DEFAULT


@dataclass(frozen=True)
class ProviderConfig:
    """
    Session configuration of a translation service.

    Attributes:
        api_key: Provider credential
        formality: Formality preference sent to languages that support it
        matcher: Interpolation matcher, None protects nothing
        decode_escapes: Decode HTML entities in translated output
    """
    api_key: str
    formality: Formality = Formality.DEFAULT
    matcher: Optional["Matcher"] = None
    decode_escapes: bool = False

    @classmethod
    def parse(cls, config: Optional[str], matcher: Optional["Matcher"] = None,
              decode_escapes: bool = False) -> 'ProviderConfig':
        """
        Parse a service configuration string of the form ``secret[,formality]``.

        Args:
            config: Configuration string, e.g. "abc123:fx,less"
            matcher: Interpolation matcher to protect placeholders with
            decode_escapes: Whether to decode HTML entities in the output

        Returns:
            ProviderConfig instance

        Raises:
            ConfigurationError: If no API key is present

        Example:
            >>> ProviderConfig.parse("secret,more").formality
            <Formality.MORE: 'more'>
        """
        parts = (config or '').split(',')
        api_key = parts[0].strip()
        formality = parts[1] if len(parts) > 1 else None
        if not api_key:
            raise ConfigurationError("Please provide an API key for DeepL.")

        return cls(
            api_key=api_key,
            formality=Formality.parse(formality),
            matcher=matcher,
            decode_escapes=bool(decode_escapes),
        )
