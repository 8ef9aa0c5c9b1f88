"""Resolve stored type names back to classes.

Resolution is closed: only registered classes, and composite field types
reachable from them, can be named in a document. Module paths found in a
document are never imported.
"""

from __future__ import annotations

import logging

from savable.codec.converters import ConverterRegistry
from savable.codec.fields import declared_fields
from savable.errors import UnknownTypeError

logger = logging.getLogger(__name__)


def type_name(cls: type) -> str:
    """Fully-qualified name written to document headers."""
    return f"{cls.__module__}.{cls.__qualname__}"


class TypeRegistry:
    """Maps fully-qualified type names to classes."""

    def __init__(self, converters: ConverterRegistry | None = None) -> None:
        self._types: dict[str, type] = {}
        self._converters = converters or ConverterRegistry()

    def register(self, cls: type) -> type:
        """Register ``cls``. Returns it, so this works as a class decorator."""
        self._types[type_name(cls)] = cls
        return cls

    def __contains__(self, name: str) -> bool:
        return name in self._types

    def resolve(self, name: str) -> type:
        cls = self._types.get(name)
        if cls is None:
            self._register_reachable()
            cls = self._types.get(name)
        if cls is None:
            raise UnknownTypeError(name)
        return cls

    def _register_reachable(self) -> None:
        """Register composite field types of everything registered so far."""
        pending = list(self._types.values())
        visited: set[type] = set()
        while pending:
            cls = pending.pop()
            if cls in visited:
                continue
            visited.add(cls)
            try:
                fields = declared_fields(cls)
            except NameError as e:
                logger.debug("Skipping %s: unresolved annotation (%s)", type_name(cls), e)
                continue
            for field in fields:
                if isinstance(field.type, type) and not self._converters.is_scalar(field):
                    self._types.setdefault(type_name(field.type), field.type)
                    pending.append(field.type)


default_registry = TypeRegistry()
register = default_registry.register
