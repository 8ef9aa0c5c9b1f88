"""Decoder: indentation-structured document -> object graph.

Each nested block is decoded as a document of its own: the block's lines
get a synthetic header naming the field's declared type, one level deeper
than the enclosing document's header.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from savable.codec.converters import NULL, ConverterRegistry
from savable.codec.fields import FieldDescriptor, fields_by_name
from savable.codec.indent import INDENT, indent_level, indented, trim_last_char
from savable.codec.registry import TypeRegistry, default_registry, type_name
from savable.entity import is_entity
from savable.errors import MalformedDocumentError, TypeNotInstantiableError

logger = logging.getLogger(__name__)


class YAMLObjectReader:
    """Rebuilds objects from documents written by YAMLObjectWriter."""

    def __init__(
        self,
        registry: TypeRegistry | None = None,
        converters: ConverterRegistry | None = None,
        indent: int = INDENT,
        typed_scalars: bool = True,
    ) -> None:
        self._registry = registry or default_registry
        self._converters = converters or ConverterRegistry()
        self._indent = indent
        self._typed_scalars = typed_scalars

    def read_from(self, path: Path) -> Any:
        return self.loads(Path(path).read_text(encoding="utf-8"))

    def loads(self, text: str) -> Any:
        return self.deserialize(text.splitlines())

    def deserialize(self, lines: Iterable[str]) -> Any:
        """Decode a document given as lines. Blank lines are ignored."""
        doc = [line for line in lines if line.strip()]
        if not doc:
            raise MalformedDocumentError("Empty document")
        return self._read_object(doc)

    def _read_object(self, lines: list[str]) -> Any:
        header = lines[0].rstrip()
        if not header.endswith(":"):
            raise MalformedDocumentError(f"Expected a type header, got {header.strip()!r}")
        cls = self._registry.resolve(trim_last_char(header).strip())
        instance = self._instantiate(cls)
        start = 1
        if is_entity(cls):
            instance.id = self._read_id(lines)
            start = 2
        self._read_fields(lines, start, instance, fields_by_name(cls))
        return instance

    @staticmethod
    def _instantiate(cls: type) -> Any:
        try:
            return cls()
        except TypeError as e:
            raise TypeNotInstantiableError(
                f"{type_name(cls)} must have a constructor without parameters"
            ) from e

    @staticmethod
    def _read_id(lines: list[str]) -> int | None:
        if len(lines) < 2:
            raise MalformedDocumentError("Missing id line")
        name, sep, value = lines[1].strip().partition(":")
        if name.strip() != "id" or not sep:
            raise MalformedDocumentError(f"Expected 'id: <integer>', got {lines[1].strip()!r}")
        value = value.strip()
        if value == NULL:
            return None
        try:
            return int(value)
        except ValueError as e:
            raise MalformedDocumentError(f"Invalid id: {value!r}") from e

    def _read_fields(
        self,
        lines: list[str],
        start: int,
        instance: Any,
        fields: dict[str, FieldDescriptor],
    ) -> None:
        root_level = indent_level(lines[0], self._indent)
        pos = start
        while pos < len(lines):
            line = lines[pos]
            name, sep, value = line.lstrip().partition(":")
            if not sep:
                raise MalformedDocumentError(f"Expected 'name: value', got {line.strip()!r}")
            field = fields.get(name.strip())

            is_header = value.strip() == ""
            end = pos + 1
            if is_header:
                level = indent_level(line, self._indent)
                while end < len(lines) and indent_level(lines[end], self._indent) > level:
                    end += 1

            if field is None:
                logger.debug("Ignoring unknown field %r on %s", name.strip(), type(instance).__name__)
            elif is_header and not self._converters.is_scalar(field):
                field.set(instance, self._read_nested(field, lines[pos + 1 : end], root_level))
            else:
                field.set(instance, self._read_scalar(field, value.strip()))
            pos = end

    def _read_nested(self, field: FieldDescriptor, block: list[str], root_level: int) -> Any:
        if not isinstance(field.type, type):
            raise MalformedDocumentError(f"Field {field.name!r} has no concrete declared type")
        header = indented(f"{type_name(field.type)}:", root_level + 1, self._indent)
        return self._read_object([header, *block])

    def _read_scalar(self, field: FieldDescriptor, text: str) -> Any:
        converter = self._converters.resolve(field)
        if converter is None:
            if text == NULL:
                return None
            raise MalformedDocumentError(f"Field {field.name!r} expects a nested block")
        if not self._typed_scalars:
            return text
        return converter.from_text(field, text)
