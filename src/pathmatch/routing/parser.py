"""Template parser: route template string -> token sequence."""

import re
from collections.abc import Iterable

from pathmatch._internal.types import TokenSequence
from pathmatch.routing.params import strip_trailing_slashes
from pathmatch.routing.tokens import WILDCARD, Token

# A braced parameter (first "}" wins) or a bare wildcard
_PARAM_RE = re.compile(r"\{(.*?)\}|\*")


def parse(template: str) -> TokenSequence:
    """Parse a route template into literal and parameter tokens.

    Trailing slashes are always discarded.

    Examples::

        "/"                -> ()
        "/hello/world"     -> (Token.literal("/hello/world"),)
        "/foo/{fooId}"     -> (Token.literal("/foo/"), Token.parameter("fooId"))
        "/foo/{*rest}"     -> (Token.literal("/foo/"), Token.parameter("rest", greedy=True))
        "/foo/*"           -> (Token.literal("/foo/"), Token.parameter("*", greedy=True))
        "/{name}.{ext}"    -> (Token.literal("/"), Token.parameter("name"),
                               Token.literal("."), Token.parameter("ext"))

    Parameter names are opaque: they are not validated and are only ever
    used as mapping keys.
    """
    template = strip_trailing_slashes(template)
    tokens: list[Token] = []
    idx = 0

    for m in _PARAM_RE.finditer(template):
        literal = template[idx : m.start()]
        if literal:
            tokens.append(Token.literal(literal))
        idx = m.end()

        name = m.group(1)
        if name is None:
            tokens.append(Token.parameter(WILDCARD, greedy=True))
        elif name.startswith("*"):
            tokens.append(Token.parameter(name[1:], greedy=True))
        else:
            tokens.append(Token.parameter(name))

    suffix = template[idx:]
    if suffix:
        tokens.append(Token.literal(suffix))
    return tuple(tokens)


def param_names(tokens: Iterable[Token]) -> list[str]:
    """Parameter names in template order (the order of capture groups)."""
    return [tok.text for tok in tokens if tok.is_param]
