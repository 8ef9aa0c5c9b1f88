"""The savable entity family."""

from __future__ import annotations


class SavableObject:
    """Base for objects persisted one-per-file and identified by an integer id.

    ``id`` stays ``None`` until the object is first saved. Subclasses need a
    zero-argument constructor and register themselves for name resolution
    on definition.
    """

    id: int | None = None

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        from savable.codec.registry import default_registry

        default_registry.register(cls)


def is_entity(cls: type) -> bool:
    """True if ``cls`` belongs to the SavableObject family."""
    return isinstance(cls, type) and issubclass(cls, SavableObject)
