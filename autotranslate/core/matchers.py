"""
Interpolation protection for strings sent to a machine-translation provider.

Template placeholders ({name}, {{count}}, %s...) must reach the output
untouched. Before translation every placeholder is swapped for a numbered
marker the provider leaves alone; afterwards the markers are swapped back.
Restoration looks for the markers, never for the original fragments, so
the translator is free to move them around in the sentence.
"""
import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from autotranslate.config import INTERPOLATION_MARKER_PREFIX, INTERPOLATION_MARKER_SUFFIX, create_marker
from autotranslate.core.exceptions import ConfigurationError, PlaceholderIntegrityError

logger = logging.getLogger(__name__)

MARKER_RE = re.compile(
    re.escape(INTERPOLATION_MARKER_PREFIX) + r'(\d+)' + re.escape(INTERPOLATION_MARKER_SUFFIX)
)


@dataclass(frozen=True)
class Matcher:
    """
    Describes which fragments of a string are interpolations.

    Attributes:
        name: Registry name (e.g. "icu")
        pattern: Regex matching one interpolation, None matches nothing
    """
    name: str
    pattern: Optional[str] = None

    def find_all(self, text: str) -> List[str]:
        """Return every interpolation in text, left to right."""
        if not self.pattern:
            return []
        return [match.group(0) for match in re.finditer(self.pattern, text)]


@dataclass(frozen=True)
class Replacement:
    """A protected fragment and the marker standing in for it"""
    fragment: str
    marker: str


# ICU MessageFormat arguments, one level of nesting for plural/select bodies
ICU_PATTERN = r'\{(?:[^{}]|\{[^{}]*\})*\}'

# i18next interpolations: {{name}}, {{- unescaped}}, {{value, format}}
I18NEXT_PATTERN = r'\{\{.+?\}\}'

# printf-style directives: %s, %d, %1$s, %(name)s, %.2f, %%
SPRINTF_PATTERN = r'%(?:\d+\$|\([^)]*\))?[-+#0]*\d*(?:\.\d+)?[a-zA-Z%]'

MATCHERS: Dict[str, Matcher] = {
    'none': Matcher('none'),
    'icu': Matcher('icu', ICU_PATTERN),
    'i18next': Matcher('i18next', I18NEXT_PATTERN),
    'sprintf': Matcher('sprintf', SPRINTF_PATTERN),
}


def get_matcher(name: Optional[str]) -> Matcher:
    """
    Look up a built-in matcher by name.

    Args:
        name: One of "none", "icu", "i18next", "sprintf" (None means "none")

    Returns:
        The matching Matcher

    Raises:
        ConfigurationError: If the name is unknown
    """
    key = (name or 'none').strip().lower()
    try:
        return MATCHERS[key]
    except KeyError:
        raise ConfigurationError(
            f"Unknown interpolation matcher '{name}'",
            context={'available': ", ".join(sorted(MATCHERS))}
        ) from None


def _next_free_ordinal(text: str) -> int:
    """First marker ordinal above every marker already present in text."""
    ordinals = [int(match.group(1)) for match in MARKER_RE.finditer(text)]
    return max(ordinals) + 1 if ordinals else 0


def replace_interpolations(text: str, matcher: Optional[Matcher]) -> Tuple[str, List[Replacement]]:
    """
    Replace interpolations with numbered markers.

    Markers are numbered from 0, or from above the highest marker the source
    already contains, so generated markers never collide with literal text.

    Args:
        text: Source string
        matcher: Matcher describing interpolations, None protects nothing

    Returns:
        Tuple of (clean_text, replacements) where replacements are ordered
        by position in the source string

    Example:
        >>> clean, replacements = replace_interpolations("Hi {{name}}", MATCHERS['i18next'])
        >>> clean
        'Hi <span translate="no">0</span>'
        >>> replacements[0].fragment
        '{{name}}'
    """
    if matcher is None or not matcher.pattern:
        return text, []

    first_ordinal = _next_free_ordinal(text)
    replacements: List[Replacement] = []

    def replace_match(match: re.Match) -> str:
        marker = create_marker(first_ordinal + len(replacements))
        replacements.append(Replacement(fragment=match.group(0), marker=marker))
        return marker

    clean = re.sub(matcher.pattern, replace_match, text)

    if replacements:
        logger.debug(f"Protected {len(replacements)} interpolation(s) with matcher '{matcher.name}'")

    return clean, replacements


def reinsert_interpolations(text: str, replacements: List[Replacement]) -> str:
    """
    Put protected fragments back in place of their markers.

    Restoration is a single pass over the markers in text; markers that do
    not belong to replacements are left as they are.

    Args:
        text: Translated text containing markers
        replacements: Replacements returned by replace_interpolations

    Returns:
        Text with the original interpolations restored

    Raises:
        PlaceholderIntegrityError: If a marker is missing from text
    """
    if not replacements:
        return text

    fragments = {r.marker: r.fragment for r in replacements}
    present = {match.group(0) for match in MARKER_RE.finditer(text)}
    missing = [r.marker for r in replacements if r.marker not in present]
    if missing:
        raise PlaceholderIntegrityError(
            f"{len(missing)} of {len(replacements)} interpolation marker(s) missing from translation",
            expected_count=len(replacements),
            missing_markers=missing,
        )

    return MARKER_RE.sub(lambda match: fragments.get(match.group(0), match.group(0)), text)
