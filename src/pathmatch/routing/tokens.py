"""Token and TokenKind: the parsed units of a route template."""

from dataclasses import dataclass
from enum import Enum

# Implicit name of a bare ``*`` wildcard
WILDCARD = "*"


class TokenKind(Enum):
    """Whether a token matches fixed text or captures a value."""

    LITERAL = "literal"
    PARAMETER = "parameter"


@dataclass(frozen=True, slots=True)
class Token:
    """A parsed unit of a route template.

    Literal:    ``/foo/``     (kind=LITERAL, text="/foo/")
    Param:      ``{fooId}``   (kind=PARAMETER, text="fooId")
    Greedy:     ``{*tags}``   (kind=PARAMETER, text="tags", greedy=True)
    Wildcard:   ``*``         (kind=PARAMETER, text="*", greedy=True)

    ``greedy`` only means something for parameters: a greedy parameter
    may capture ``/`` and so spans path segments.
    """

    kind: TokenKind
    text: str
    greedy: bool = False

    @classmethod
    def literal(cls, text: str) -> "Token":
        return cls(TokenKind.LITERAL, text)

    @classmethod
    def parameter(cls, name: str, greedy: bool = False) -> "Token":
        return cls(TokenKind.PARAMETER, name, greedy)

    @property
    def is_param(self) -> bool:
        return self.kind is TokenKind.PARAMETER
