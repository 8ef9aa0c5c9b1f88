"""Scalar field converters and the registry that picks one per field.

A field with no matching converter is treated as a nested composite by the
writer and reader.
"""

from __future__ import annotations

import numbers
from typing import Any

from savable.codec.base import FieldConverter
from savable.codec.fields import FieldDescriptor
from savable.errors import MalformedDocumentError

NULL = "null"

_SCALAR_TYPES = (bool, int, float, complex, str)


def render_value(value: Any) -> str:
    return NULL if value is None else str(value)


class ScalarFieldConverter:
    """Handles str, bool and every numeric type (including Decimal, Fraction)."""

    def can_convert(self, field: FieldDescriptor) -> bool:
        tp = field.type
        if not isinstance(tp, type):
            return False
        return tp in _SCALAR_TYPES or issubclass(tp, numbers.Number)

    def to_line(self, source: Any, field: FieldDescriptor) -> str:
        if not self.can_convert(field):
            raise ValueError(f"I can't convert this field: {field.name}")
        text = render_value(field.get(source))
        if "\n" in text or "\r" in text:
            raise ValueError(f"Field {field.name!r}: line breaks cannot be stored")
        return f"{field.name}: {text}"

    def from_text(self, field: FieldDescriptor, text: str) -> Any:
        if text == NULL:
            return None
        tp = field.type
        if tp is str:
            return text
        if tp is bool:
            lowered = text.lower()
            if lowered in ("true", "false"):
                return lowered == "true"
            raise MalformedDocumentError(f"Field {field.name!r}: not a boolean: {text!r}")
        try:
            return tp(text)
        except (ValueError, ArithmeticError) as e:
            raise MalformedDocumentError(
                f"Field {field.name!r}: cannot read {text!r} as {tp.__name__}"
            ) from e


class ConverterRegistry:
    """Ordered converters; the first one that accepts a field wins."""

    def __init__(self, converters: list[FieldConverter] | None = None) -> None:
        self._converters: list[FieldConverter] = (
            list(converters) if converters is not None else [ScalarFieldConverter()]
        )

    def register(self, converter: FieldConverter) -> None:
        self._converters.append(converter)

    def resolve(self, field: FieldDescriptor) -> FieldConverter | None:
        for converter in self._converters:
            if converter.can_convert(field):
                return converter
        return None

    def is_scalar(self, field: FieldDescriptor) -> bool:
        return self.resolve(field) is not None
