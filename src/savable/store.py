"""Entity store: save, find and delete SavableObjects, one file per id.

Layout:
    SavableObject/
    ├── saved_object.seq      # last issued id
    ├── 1.yaml                # one document per saved entity
    └── 2.yaml

A file's existence is the only record that an entity id exists. Nothing is
locked: the store assumes a single writing process.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TypeVar

from savable.codec.base import IdHolder, ObjectReader, ObjectWriter
from savable.codec.converters import ConverterRegistry
from savable.codec.reader import YAMLObjectReader
from savable.codec.writer import YAMLObjectWriter
from savable.config import StoreConfig
from savable.entity import SavableObject
from savable.sequence import FileIdHolder, LockedIdHolder

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=SavableObject)


class EntityStore:
    """Persists SavableObjects under ``config.folder``."""

    def __init__(
        self,
        config: StoreConfig | None = None,
        *,
        reader: ObjectReader | None = None,
        writer: ObjectWriter | None = None,
        id_holder: IdHolder | None = None,
    ) -> None:
        self.config = config or StoreConfig()
        converters = ConverterRegistry()
        self._reader = reader or YAMLObjectReader(
            converters=converters,
            indent=self.config.indent,
            typed_scalars=self.config.typed_scalars,
        )
        self._writer = writer or YAMLObjectWriter(converters=converters, indent=self.config.indent)
        if id_holder is None:
            id_holder = FileIdHolder(self.config.seq_path, self.config.seq_step)
            if self.config.thread_safe:
                id_holder = LockedIdHolder(id_holder)
        self._id_holder = id_holder
        self.ensure_directory()

    @property
    def folder(self) -> Path:
        return self.config.folder

    def ensure_directory(self) -> None:
        """Create the storage folder if missing. Idempotent."""
        if not self.folder.is_dir():
            self.folder.mkdir(parents=True, exist_ok=True)
            logger.info("Folder: %s was created", self.folder)

    def path_for(self, entity_id: int) -> Path:
        return self.folder / f"{entity_id}{self.config.extension}"

    def exists(self, entity_id: int) -> bool:
        return self.path_for(entity_id).is_file()

    def save(self, entity: SavableObject) -> None:
        """Assign an id if needed and write the entity's document."""
        entity_id = self._id_holder.resolve_id(entity)
        entity.id = entity_id
        self._writer.save_to(self.path_for(entity_id), entity)
        logger.debug("Saved %s as id %d", type(entity).__name__, entity_id)

    def delete(self, entity: SavableObject) -> bool:
        """Remove the entity's file and clear its id.

        Failures are reported as warnings and leave the id in place.
        """
        if entity.id is None:
            logger.warning("detected attempt to delete unsaved object")
            return False
        path = self.path_for(entity.id)
        try:
            path.unlink()
        except OSError as e:
            logger.warning("entity %d was not deleted: %s", entity.id, e)
            return False
        logger.debug("Deleted id %d", entity.id)
        entity.id = None
        return True

    def find_by_id(self, entity_id: int, expected_type: type[T] | None = None) -> T | None:
        """Load the entity stored under ``entity_id``, or None if there is none."""
        if entity_id is None:
            raise ValueError("Id must be non null")
        path = self.path_for(entity_id)
        if not path.exists():
            return None
        obj = self._reader.read_from(path)
        if not isinstance(obj, SavableObject):
            raise TypeError(f"{path} does not hold a SavableObject: {type(obj).__name__}")
        if expected_type is not None and not isinstance(obj, expected_type):
            raise TypeError(
                f"Entity {entity_id} is a {type(obj).__name__}, not {expected_type.__name__}"
            )
        return obj
