"""PathTemplate: a parsed template kept alongside its match defaults.

Route registries parse each template once at setup time and keep the
``PathTemplate`` next to the handler; compiled patterns are shared
through the matcher's cache.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from pathmatch._internal.types import PathParams, TokenSequence
from pathmatch.config import MatchConfig
from pathmatch.routing.expand import expand
from pathmatch.routing.matcher import match_tokens
from pathmatch.routing.parser import param_names, parse


@dataclass(frozen=True, slots=True)
class PathTemplate:
    """A frozen, parsed route template.

    Usage::

        tpl = PathTemplate.from_string("/users/{id}")
        tpl.match("/users/42")        # {"id": "42"}
        tpl.match("/users")           # None
        tpl.expand(id="42")           # "/users/42"
    """

    template: str
    config: MatchConfig = field(default_factory=MatchConfig)
    # Always parsed from template, never passed in
    tokens: TokenSequence = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tokens", parse(self.template))

    @classmethod
    def from_string(cls, template: str, config: MatchConfig | None = None) -> "PathTemplate":
        return cls(template=template, config=config or MatchConfig())

    def __str__(self) -> str:
        return self.template

    @property
    def param_names(self) -> list[str]:
        return param_names(self.tokens)

    @property
    def is_static(self) -> bool:
        """True when the template has no parameters at all."""
        return not any(tok.is_param for tok in self.tokens)

    def match(self, path: str, prefix: bool | None = None) -> PathParams | None:
        """Match *path*; *prefix* falls back to ``config.prefix``."""
        if prefix is None:
            prefix = self.config.prefix
        return match_tokens(self.tokens, path, prefix, decode=self.config.decode_values)

    def expand(self, params: Mapping[str, str] | None = None, /, **kwargs: str) -> str:
        """Build a path; pass a mapping for names like ``*`` that are not identifiers."""
        values = {**(params or {}), **kwargs}
        return expand(self.tokens, values)
