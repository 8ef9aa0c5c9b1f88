"""Encoder: object graph -> indentation-structured document."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from savable.codec.converters import NULL, ConverterRegistry
from savable.codec.fields import declared_fields
from savable.codec.indent import INDENT, indented
from savable.codec.registry import type_name
from savable.entity import SavableObject

logger = logging.getLogger(__name__)


class YAMLObjectWriter:
    """Walks declared fields, emitting scalar lines or nested blocks."""

    def __init__(self, converters: ConverterRegistry | None = None, indent: int = INDENT) -> None:
        self._converters = converters or ConverterRegistry()
        self._indent = indent

    def to_lines(self, obj: Any) -> list[str]:
        lines = [f"{type_name(type(obj))}:"]
        lines.extend(self._body_lines(obj, 0))
        return lines

    def serialize(self, obj: Any) -> str:
        return "\n".join(self.to_lines(obj))

    def save_to(self, path: Path, obj: Any) -> None:
        """Write the document for ``obj`` to ``path``, replacing any previous content."""
        text = self.serialize(obj)
        try:
            Path(path).write_text(text, encoding="utf-8")
        except OSError:
            logger.error("Write to %s failed; the file may be truncated", path)
            raise

    def _body_lines(self, obj: Any, indent_count: int) -> list[str]:
        lines: list[str] = []
        field_indent = indent_count + 1
        if isinstance(obj, SavableObject):
            obj_id = NULL if obj.id is None else obj.id
            lines.append(self._line(f"id: {obj_id}", field_indent))
        for field in declared_fields(type(obj)):
            converter = self._converters.resolve(field)
            if converter is not None:
                lines.append(self._line(converter.to_line(obj, field), field_indent))
                continue
            value = field.get(obj)
            if value is None:
                lines.append(self._line(f"{field.name}: {NULL}", field_indent))
                continue
            lines.append(self._line(f"{field.name}:", field_indent))
            lines.extend(self._body_lines(value, field_indent))
        return lines

    def _line(self, text: str, level: int) -> str:
        return indented(text, level, self._indent)
