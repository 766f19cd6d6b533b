"""pathmatch: route templates parsed into tokens and matched against paths.

Turns ``/foo/{fooId}/bar/{barId}`` into a reusable token sequence and
matches concrete request paths against it, extracting named values.

Basic usage::

    from pathmatch import match, parse

    match("/foo/{fooId}", "/foo/123")            # {"fooId": "123"}
    match("/tags/{*tags}", "/tags/1/2/3")        # {"tags": "1/2/3"}
    match("/hello/world", "/hello/world/123")    # None

    tokens = parse("/{filename}.{ext}")          # parse once, match often
    match(tokens, "/document-v1.0.0.pdf")        # {"filename": "document-v1.0.0", "ext": "pdf"}

Prefix matching must end on a segment boundary::

    match("/foo/bar", "/foo/bar/baz", prefix=True)   # {}
    match("/foo/bar", "/foo/barbaz", prefix=True)    # None
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "MalformedValue",
    "MatchConfig",
    "PathMatchError",
    "PathParams",
    "PathTemplate",
    "Token",
    "TokenKind",
    "compile_tokens",
    "expand",
    "match",
    "match_tokens",
    "parse",
]

# public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "pathmatch.errors",
    "MalformedValue": "pathmatch.errors",
    "MatchConfig": "pathmatch.config",
    "PathMatchError": "pathmatch.errors",
    "PathParams": "pathmatch._internal.types",
    "PathTemplate": "pathmatch.routing.template",
    "Token": "pathmatch.routing.tokens",
    "TokenKind": "pathmatch.routing.tokens",
    "compile_tokens": "pathmatch.routing.matcher",
    "expand": "pathmatch.routing.expand",
    "match": "pathmatch.routing.matcher",
    "match_tokens": "pathmatch.routing.matcher",
    "parse": "pathmatch.routing.parser",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import pathmatch`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module 'pathmatch' has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
