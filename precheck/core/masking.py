"""Masking of matched secret text for safe display."""

from typing import Optional

QUOTE_CHARS = ('"', "'")


def mask_value(value: str, show_chars: int = 4) -> str:
    """Return a masked version of ``value``.

    Values of ``2 * show_chars`` characters or fewer are fully starred,
    longer ones keep ``show_chars`` characters at each end around ``...``.
    """
    if len(value) <= show_chars * 2:
        return "*" * len(value)
    return f"{value[:show_chars]}...{value[-show_chars:]}"


def extract_quoted_value(text: str) -> Optional[str]:
    """Return the value inside the first quoted segment of ``text``.

    Double quotes are tried before single quotes. Returns None when neither
    kind forms a closed pair.
    """
    for quote in QUOTE_CHARS:
        start = text.find(quote)
        if start == -1:
            continue
        end = text.find(quote, start + 1)
        if end == -1:
            continue
        return text[start + 1:end]
    return None


def mask_secret(matched: str) -> str:
    """Mask a matched substring.

    For quoted assignments such as ``password = "hunter22"`` only the quoted
    value is masked and returned; the key and operator are dropped.
    """
    quoted = extract_quoted_value(matched)
    if quoted is not None:
        return mask_value(quoted)
    return mask_value(matched)
