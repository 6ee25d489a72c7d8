"""Error hierarchy for styleripper."""

from __future__ import annotations


class StyleRipperError(Exception):
    """Base error for everything raised by styleripper."""


class ParseError(StyleRipperError):
    """Raised when a tree provider cannot parse HTML or CSS source."""

    def __init__(self, message: str, identifier: str | None = None) -> None:
        self.identifier = identifier
        if identifier:
            message = f"{identifier}: {message}"
        super().__init__(message)


class InvariantViolation(StyleRipperError):
    """Raised when a class-selector names a classname absent from the known set.

    Dead-rule elimination makes this impossible for well-behaved input, so
    seeing it means the eliminator itself is broken.
    """

    def __init__(self, classname: str) -> None:
        self.classname = classname
        super().__init__(
            f"encountered unused class selector {classname!r} "
            "when it should have been removed"
        )


class ComponentNotFound(StyleRipperError):
    """Raised when a page references a ``<%component%>`` that does not exist."""

    def __init__(self, name: str, path: str) -> None:
        self.name = name
        self.path = path
        super().__init__(f"Component {name!r} not found at {path}")
