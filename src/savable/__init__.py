"""savable: a file-per-entity object store.

Objects are written as indentation-structured YAML-like documents, one
file per id, and read back by id with their nested fields rebuilt from
class annotations.
"""

from savable.codec.registry import register
from savable.config import StoreConfig, load_config
from savable.entity import SavableObject
from savable.store import EntityStore

__all__ = ["EntityStore", "SavableObject", "StoreConfig", "load_config", "register"]
