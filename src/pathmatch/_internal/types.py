"""Shared type aliases used across pathmatch modules."""

from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from pathmatch.routing.tokens import Token

# Ordered, immutable result of parsing one template
TokenSequence: TypeAlias = "tuple[Token, ...]"

# Parameter name -> decoded value. Empty dict means "matched, no params"
PathParams: TypeAlias = dict[str, str]
