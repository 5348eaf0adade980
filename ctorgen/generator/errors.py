"""Errors raised while generating code.

All of these indicate a broken contract between the descriptor input and
the generator, not bad user input, so they are never recovered from.
"""

from typing import Any

from .types import describe


class GeneratorError(RuntimeError):
    """Base class for generation failures."""


class UnsupportedFieldKind(GeneratorError):
    """Raised when a field's kind is outside scalar/enum/message/map."""

    def __init__(self, field: Any, kind: Any = None):
        self.field = field
        self.kind = kind
        super().__init__(f"Unsupported kind {kind!r} for {describe(field)}")


class MissingOneofGroup(GeneratorError):
    """Raised when field metadata and descriptor disagree about a oneof."""

    def __init__(self, oneof: Any):
        self.oneof = oneof
        super().__init__(f"No field metadata declares membership in {describe(oneof)}")


class FieldMetaNotFound(GeneratorError):
    """Raised when a field number has no counterpart on the other side."""

    def __init__(self, message: Any, number: int):
        self.message = message
        self.number = number
        super().__init__(f"Field {number} not found in {describe(message)}")


class SymbolError(GeneratorError):
    """Raised on duplicate symbol registration or lookup of unknown symbols."""
