"""Codec protocols shared by the writer, reader and store."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from savable.codec.fields import FieldDescriptor
    from savable.entity import SavableObject


@runtime_checkable
class FieldConverter(Protocol):
    """Renders a single field as a scalar ``name: value`` line."""

    def can_convert(self, field: FieldDescriptor) -> bool:
        """Return True if the field's declared type is handled here."""
        ...

    def to_line(self, source: Any, field: FieldDescriptor) -> str:
        """Render ``field`` of ``source``. Raises ValueError if not convertible."""
        ...

    def from_text(self, field: FieldDescriptor, text: str) -> Any:
        """Turn a stored value back into the field's declared type."""
        ...


@runtime_checkable
class ObjectWriter(Protocol):
    """Serializes an object graph and writes it to a file."""

    def save_to(self, path: Path, obj: Any) -> None: ...


@runtime_checkable
class ObjectReader(Protocol):
    """Reads a file back into an object graph."""

    def read_from(self, path: Path) -> Any: ...


@runtime_checkable
class IdHolder(Protocol):
    """Resolves the id an entity should be saved under."""

    def resolve_id(self, obj: SavableObject) -> int: ...
