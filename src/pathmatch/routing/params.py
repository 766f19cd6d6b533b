"""Escaping, normalization, and value decoding for path parameters.

Helpers shared by the parser, the matcher, and ``expand()``.
"""

import logging
import re
from urllib.parse import quote, unquote_to_bytes

from pathmatch.errors import MalformedValue

logger = logging.getLogger("pathmatch.params")

# greedy flag -> capture regex for a parameter token
CAPTURE_PATTERNS: dict[bool, str] = {
    False: r"([^/]+)",
    True: r"(.+)",
}

# A "%" that does not start a two-digit hex escape
_BROKEN_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

# A run of consecutive %XX escapes; one multi-byte character never spans two runs
_ESCAPE_RUN = re.compile(r"(?:%[0-9A-Fa-f]{2})+")


def strip_trailing_slashes(value: str) -> str:
    """Drop any trailing run of ``/`` so ``/a/`` and ``/a`` compare equal."""
    return value.rstrip("/")


def escape_literal(text: str) -> str:
    """Escape *text* for exact matching inside a compiled pattern.

    Every metacharacter is escaped, ``-`` included.
    """
    return re.escape(text)


def _decode_run(m: re.Match[str]) -> str:
    return unquote_to_bytes(m.group()).decode("utf-8")


def decode_value(name: str, raw: str) -> str:
    """Percent-decode a captured value for parameter *name*.

    Only ``%XX`` runs are decoded; every other character, ``+`` included,
    is left as it is. Raises :class:`MalformedValue` for a ``%`` that is
    not followed by two hex digits, or escapes that are not UTF-8.
    """
    if "%" not in raw:
        return raw
    if _BROKEN_ESCAPE.search(raw):
        logger.debug("Broken percent-escape in %r for parameter %r", raw, name)
        raise MalformedValue(name, raw, "incomplete percent-escape")
    try:
        return _ESCAPE_RUN.sub(_decode_run, raw)
    except UnicodeDecodeError as exc:
        logger.debug("Escapes in %r for parameter %r are not UTF-8", raw, name)
        raise MalformedValue(name, raw, "escapes are not valid UTF-8") from exc


def encode_value(value: str, greedy: bool = False) -> str:
    """Percent-encode *value* for substitution into a path.

    Greedy parameters keep ``/`` so each segment stays readable, except
    for a trailing run, which is encoded so trailing-slash stripping
    cannot drop it.
    """
    if not greedy:
        return quote(value, safe="")
    body = value.rstrip("/")
    return quote(body, safe="/") + "%2F" * (len(value) - len(body))
