"""
Provider capability registry.

Built once per session from the provider's language catalog and read-only
afterwards. DeepL accepts both "EN-US" and "EN" as target codes but only
advertises "EN-US", so every code is stored both in full and truncated to
its base segment. Lookups are case-insensitive.
"""
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable


def normalize_codes(codes: Iterable[str]) -> FrozenSet[str]:
    """
    Lower-case every code and add its base segment.

    Example:
        >>> sorted(normalize_codes(["EN-US", "DE"]))
        ['de', 'en', 'en-us']
    """
    normalized = set()
    for code in codes:
        lowered = code.lower()
        normalized.add(lowered)
        normalized.add(lowered.split('-', 1)[0])
    return frozenset(normalized)


@dataclass(frozen=True)
class CapabilitySet:
    """Languages the provider can translate to, and which of them support formality"""
    languages: FrozenSet[str] = field(default_factory=frozenset)
    formality_languages: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def from_languages(cls, entries) -> 'CapabilitySet':
        """
        Build the capability set from LanguageEntry objects.

        Args:
            entries: Iterable of LanguageEntry

        Returns:
            CapabilitySet with both lookup sets populated
        """
        entries = list(entries)
        return cls(
            languages=normalize_codes(e.code for e in entries),
            formality_languages=normalize_codes(e.code for e in entries if e.supports_formality),
        )

    def supports_language(self, code: str) -> bool:
        return code.lower() in self.languages

    def supports_formality(self, code: str) -> bool:
        return code.lower() in self.formality_languages
