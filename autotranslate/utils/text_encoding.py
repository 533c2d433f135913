"""
Decoding of escaped text returned by translation providers.

Providers may hand back markup entities (&amp;, &#39;, &quot;) instead of
the characters that were sent. decode_escapes() turns them back.
"""
import html


def decode_escapes(text: str) -> str:
    """
    Decode HTML entities into the characters they stand for.

    Example:
        >>> decode_escapes("Tom &amp; Jerry&#39;s")
        "Tom & Jerry's"
    """
    if not text or '&' not in text:
        return text
    return html.unescape(text)
