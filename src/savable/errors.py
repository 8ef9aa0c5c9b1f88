"""Exception types raised by the store and the document codec.

I/O failures are not wrapped: an ``OSError`` from reading or writing the
counter file or an entity file propagates unchanged.
"""

from __future__ import annotations


class SavableError(Exception):
    """Base class for all savable errors."""


class MalformedDocumentError(SavableError, ValueError):
    """A stored document cannot be parsed."""


class UnknownTypeError(MalformedDocumentError):
    """The type named in a document header is not registered."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Unknown type in document header: {type_name!r}")
        self.type_name = type_name


class TypeNotInstantiableError(SavableError, TypeError):
    """A savable type has no zero-argument constructor."""


class CorruptSequenceError(SavableError, ValueError):
    """The sequence file does not hold a single integer."""
