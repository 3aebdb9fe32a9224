from .key_value_store import InMemoryKeyValueStore, SqlAlchemyKeyValueStore
from .selection_repository import SelectionRepository

__all__ = ["InMemoryKeyValueStore", "SelectionRepository", "SqlAlchemyKeyValueStore"]
