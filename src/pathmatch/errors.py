"""pathmatch exception hierarchy.

Shared across the parser, matcher, and template layers so every module
raises and catches the same types. A path that simply does not fit a
template is not an error: matching returns ``None`` for that case.
"""


class PathMatchError(Exception):
    """Base for all pathmatch-specific errors."""


class ConfigurationError(PathMatchError):
    """Raised when matcher configuration is invalid."""


class MalformedValue(PathMatchError, ValueError):  # noqa: N818
    """A captured parameter value could not be percent-decoded.

    The path had the right shape for the template, but the text captured
    for *name* contains a broken ``%`` escape or escapes that do not form
    valid UTF-8.
    """

    def __init__(self, name: str, value: str, reason: str = "") -> None:
        self.name = name
        self.value = value
        self.reason = reason
        message = f"Malformed value for parameter {name!r}: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
