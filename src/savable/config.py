"""Configuration loading from environment variables and savable.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

_DEFAULT_FOLDER = Path("SavableObject")
_CONFIG_FILENAME = "savable.toml"
_TRUTHY = ("1", "true", "yes", "on")


@dataclass
class StoreConfig:
    """Where and how entities are stored."""

    folder: Path = _DEFAULT_FOLDER
    extension: str = ".yaml"
    indent: int = 2
    seq_filename: str = "saved_object.seq"
    seq_step: int = 1
    typed_scalars: bool = True
    thread_safe: bool = False
    log_level: str = "INFO"

    @property
    def seq_path(self) -> Path:
        return self.folder / self.seq_filename


def _as_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY


def load_config(config_path: Path | None = None) -> StoreConfig:
    """Load configuration from environment variables and optional savable.toml.

    Priority: environment variables > savable.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        candidate = Path.cwd() / _CONFIG_FILENAME
        if candidate.exists():
            file_data = tomllib.loads(candidate.read_text())

    store_data = file_data.get("store", {})

    return StoreConfig(
        folder=Path(os.getenv("SAVABLE_DIR", store_data.get("folder", str(_DEFAULT_FOLDER)))),
        extension=store_data.get("extension", ".yaml"),
        indent=int(store_data.get("indent", 2)),
        seq_filename=store_data.get("seq_filename", "saved_object.seq"),
        seq_step=int(store_data.get("seq_step", 1)),
        typed_scalars=_as_bool(
            os.getenv("SAVABLE_TYPED_SCALARS", store_data.get("typed_scalars", True))
        ),
        thread_safe=_as_bool(
            os.getenv("SAVABLE_THREAD_SAFE", store_data.get("thread_safe", False))
        ),
        log_level=os.getenv("SAVABLE_LOG_LEVEL", file_data.get("log_level", "INFO")),
    )
