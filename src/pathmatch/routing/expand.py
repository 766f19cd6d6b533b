"""Reverse routing: substitute parameter values back into a template."""

from collections.abc import Iterable, Mapping

from pathmatch.routing.params import encode_value
from pathmatch.routing.parser import parse
from pathmatch.routing.tokens import Token


def expand(template: str | Iterable[Token], params: Mapping[str, str]) -> str:
    """Build a concrete path from a template and parameter values.

    Values are percent-encoded. Non-greedy parameters also encode ``/``
    so they stay inside one segment; greedy parameters keep it.

    Raises ``KeyError`` if a parameter has no value and ``ValueError``
    if a value is empty (parameters always capture at least one char).

    Example::

        expand("/files/{*path}.{ext}", {"path": "a b/c", "ext": "txt"})
        # -> "/files/a%20b/c.txt"
    """
    tokens = parse(template) if isinstance(template, str) else template
    parts: list[str] = []
    for tok in tokens:
        if not tok.is_param:
            parts.append(tok.text)
            continue
        if tok.text not in params:
            msg = f"No value for path parameter {tok.text!r}"
            raise KeyError(msg)
        value = params[tok.text]
        if not value:
            msg = f"Empty value for path parameter {tok.text!r}"
            raise ValueError(msg)
        parts.append(encode_value(value, tok.greedy))
    return "".join(parts)
