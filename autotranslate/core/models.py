"""
Data structures exchanged with translation services.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class TranslatableItem:
    """A source string identified by its key"""
    key: str
    value: str


@dataclass(frozen=True)
class TranslationResult:
    """Outcome of translating one TranslatableItem"""
    key: str
    value: str  # Original source string, never modified
    translated: str

    def to_dict(self) -> Dict[str, str]:
        return {"key": self.key, "value": self.value, "translated": self.translated}


@dataclass(frozen=True)
class LanguageEntry:
    """One language of the provider's catalog"""
    code: str  # Provider's canonical form, e.g. "EN-US"
    name: str = ""
    supports_formality: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LanguageEntry':
        """Build an entry from a DeepL catalog item ({language, name, supports_formality})."""
        code = data["language"]
        if not isinstance(code, str) or not code:
            raise ValueError(f"Invalid language code: {code!r}")
        return cls(
            code=code,
            name=data.get("name", ""),
            supports_formality=bool(data.get("supports_formality", False)),
        )
