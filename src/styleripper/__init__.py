"""Styleripper -- shrinks HTML and CSS by renaming classes and dropping dead rules."""

from styleripper.errors import (
    ComponentNotFound,
    InvariantViolation,
    ParseError,
    StyleRipperError,
)
from styleripper.model.bundle import RipResult, SourceFile
from styleripper.ripper import rip

__version__ = "0.3.0"

__all__ = [
    "__version__",
    "rip",
    "SourceFile",
    "RipResult",
    "StyleRipperError",
    "ParseError",
    "InvariantViolation",
    "ComponentNotFound",
]
