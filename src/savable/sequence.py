"""Identifier sequencing backed by a single counter file."""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from savable.codec.base import IdHolder
from savable.entity import SavableObject
from savable.errors import CorruptSequenceError

logger = logging.getLogger(__name__)


class FileIdHolder:
    """Hands out ids from a persisted monotonic counter.

    The counter file holds the last issued id as a bare decimal integer.
    Not safe for concurrent callers; wrap in LockedIdHolder for threads.
    """

    def __init__(self, seq_path: Path, step: int = 1) -> None:
        self.seq_path = Path(seq_path)
        self.step = step

    def resolve_id(self, obj: SavableObject) -> int:
        if obj.id is not None:
            return obj.id
        if self.seq_path.exists():
            new_id = self._read_last() + self.step
        else:
            new_id = 1
        self._write(new_id)
        logger.debug("Allocated id %d", new_id)
        return new_id

    def last_id(self) -> int | None:
        """Last issued id, or None if nothing was ever allocated."""
        if not self.seq_path.exists():
            return None
        return self._read_last()

    def _read_last(self) -> int:
        text = self.seq_path.read_text(encoding="utf-8").strip()
        try:
            return int(text)
        except ValueError as e:
            raise CorruptSequenceError(
                f"Sequence file {self.seq_path} does not hold an integer: {text!r}"
            ) from e

    def _write(self, value: int) -> None:
        self.seq_path.write_text(str(value), encoding="utf-8")


class LockedIdHolder:
    """Serializes id resolution across threads of one process."""

    def __init__(self, inner: IdHolder) -> None:
        self._inner = inner
        self._lock = threading.Lock()

    def resolve_id(self, obj: SavableObject) -> int:
        with self._lock:
            return self._inner.resolve_id(obj)
