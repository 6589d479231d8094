"""ASCII sanitization for fixed-width BR Code text fields (merchant name and city)."""

from __future__ import annotations

import re
import unicodedata

_DISALLOWED = re.compile(r"[^A-Za-z0-9 ]")


def sanitize(text: str, max_length: int) -> str:
    """Reduce free text to an uppercase ASCII token of at most ``max_length`` chars.

    Accents are decomposed and dropped ("Ñ" -> "N"), anything outside
    ``[A-Za-z0-9 ]`` is removed. Never raises; unusable input gives "".
    """
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    cleaned = _DISALLOWED.sub("", stripped).upper().strip()
    # Truncation can expose an inner space at the cut.
    return cleaned[: max(max_length, 0)].rstrip()


def sanitize_or_default(text: str, max_length: int, default: str) -> str:
    return sanitize(text, max_length) or default
