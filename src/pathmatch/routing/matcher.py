"""Matcher: token sequence + concrete path -> parameter mapping or None.

Each call compiles (or fetches from a bounded cache) one anchored
pattern built from the tokens, runs it once against the path, and pairs
capture groups with parameter tokens by position.
"""

import functools
import logging
import re
from collections.abc import Iterable

from pathmatch._internal.types import PathParams, TokenSequence
from pathmatch.errors import ConfigurationError
from pathmatch.routing.params import (
    CAPTURE_PATTERNS,
    decode_value,
    escape_literal,
    strip_trailing_slashes,
)
from pathmatch.routing.parser import param_names, parse
from pathmatch.routing.tokens import Token

logger = logging.getLogger("pathmatch.matcher")

DEFAULT_CACHE_SIZE = 256

# What may follow a prefix match: a segment boundary or the end
_PREFIX_ANCHOR = r"(?=/|\Z)"
_WHOLE_ANCHOR = r"\Z"


def token_pattern(token: Token) -> str:
    """Regex source for a single token."""
    if token.is_param:
        return CAPTURE_PATTERNS[token.greedy]
    return escape_literal(token.text)


def _build_pattern(tokens: TokenSequence, prefix: bool) -> re.Pattern[str]:
    body = "".join(token_pattern(tok) for tok in tokens)
    source = rf"\A{body}{_PREFIX_ANCHOR if prefix else _WHOLE_ANCHOR}"
    logger.debug("Compiled %d token(s) to %r (prefix=%s)", len(tokens), source, prefix)
    return re.compile(source)


_cached_pattern = functools.lru_cache(maxsize=DEFAULT_CACHE_SIZE)(_build_pattern)


def configure_cache(maxsize: int = DEFAULT_CACHE_SIZE) -> None:
    """Replace the compiled-pattern cache with one holding *maxsize* entries.

    ``0`` disables caching; every call then compiles afresh.
    """
    global _cached_pattern
    if maxsize < 0:
        msg = f"Pattern cache size must be >= 0, got {maxsize}."
        raise ConfigurationError(msg)
    _cached_pattern = functools.lru_cache(maxsize=maxsize)(_build_pattern)


def cache_info():
    """Hit/miss statistics of the compiled-pattern cache."""
    return _cached_pattern.cache_info()


def compile_tokens(tokens: Iterable[Token], prefix: bool = False) -> re.Pattern[str]:
    """Anchored pattern for *tokens*.

    Without *prefix* the pattern must consume the whole path. With
    *prefix* it must stop at a ``/`` or at the end, never mid-segment.
    """
    return _cached_pattern(tuple(tokens), prefix)


def match_tokens(
    tokens: Iterable[Token],
    path: str,
    prefix: bool = False,
    *,
    decode: bool = True,
) -> PathParams | None:
    """Match *path* against a token sequence obtained from :func:`parse`.

    If *prefix* is true, only the beginning of the path has to match,
    ending on a segment boundary.

    Returns ``None`` when the path does not fit. Otherwise returns the
    parameter values, percent-decoded unless *decode* is false (an empty
    dict for a template without parameters).

    Raises ``MalformedValue`` if a captured value cannot be decoded.

    Duplicate parameter names are a caller error; the last one wins.
    """
    tokens = tuple(tokens)
    m = compile_tokens(tokens, prefix).match(strip_trailing_slashes(path))
    if m is None:
        return None

    params: PathParams = {}
    for name, raw in zip(param_names(tokens), m.groups(), strict=True):
        params[name] = decode_value(name, raw) if decode else raw
    return params


def match(
    template: str | Iterable[Token],
    path: str,
    prefix: bool = False,
    *,
    decode: bool = True,
) -> PathParams | None:
    """Match *path* against a template string or a parsed token sequence."""
    tokens = parse(template) if isinstance(template, str) else template
    return match_tokens(tokens, path, prefix, decode=decode)
