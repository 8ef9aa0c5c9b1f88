"""Field introspection over class annotations.

A type's fields are its annotated attributes in declaration order, base
classes first. ``SavableObject`` itself contributes nothing: the id is
written and read separately from ordinary fields.
"""

from __future__ import annotations

import inspect
import types
import typing
from dataclasses import dataclass
from typing import Any, ClassVar, Union

from savable.entity import SavableObject


@dataclass(frozen=True)
class FieldDescriptor:
    """One declared field: its name and (Optional-unwrapped) type."""

    name: str
    type: Any

    def get(self, instance: Any) -> Any:
        return getattr(instance, self.name)

    def set(self, instance: Any, value: Any) -> None:
        setattr(instance, self.name, value)


def _unwrap_optional(tp: Any) -> Any:
    """``X | None`` and ``Optional[X]`` become ``X``; other unions are kept."""
    origin = typing.get_origin(tp)
    if origin is Union or origin is types.UnionType:
        args = [a for a in typing.get_args(tp) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


def _is_classvar(tp: Any) -> bool:
    return tp is ClassVar or typing.get_origin(tp) is ClassVar


def declared_fields(cls: type) -> list[FieldDescriptor]:
    """Return the field descriptors of ``cls`` in declaration order."""
    hints = typing.get_type_hints(cls)
    seen: set[str] = set()
    result: list[FieldDescriptor] = []
    for klass in reversed(cls.__mro__):
        if klass is object or klass is SavableObject:
            continue
        for name in inspect.get_annotations(klass):
            if name in seen:
                continue
            tp = hints.get(name, Any)
            if _is_classvar(tp):
                continue
            seen.add(name)
            result.append(FieldDescriptor(name, _unwrap_optional(tp)))
    return result


def fields_by_name(cls: type) -> dict[str, FieldDescriptor]:
    return {f.name: f for f in declared_fields(cls)}
