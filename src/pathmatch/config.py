"""Matcher configuration.

MatchConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MatchConfig:
    """Defaults applied by :class:`~pathmatch.routing.template.PathTemplate`.

    Override what you need::

        config = MatchConfig(prefix=True)
    """

    # Match a leading, segment-aligned portion of the path instead of all of it
    prefix: bool = False

    # Percent-decode captured values; False returns the raw captured text
    decode_values: bool = True
