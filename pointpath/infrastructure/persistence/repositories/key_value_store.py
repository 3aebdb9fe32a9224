"""Key-value stores backing persisted selections and snapshots."""

import structlog
from sqlalchemy.orm import Session

from pointpath.infrastructure.persistence.models import KeyValueRecord

logger = structlog.get_logger(__name__)


class SqlAlchemyKeyValueStore:
    """Key-value store over the ``key_value_records`` table."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def get(self, key: str) -> str | None:
        """
        Fetch the value stored under a key.

        Args:
            key: Record key

        Returns:
            Stored string, or None if the key was never written
        """
        record = self.db.get(KeyValueRecord, key)
        return record.value if record else None

    def set(self, key: str, value: str) -> None:
        """Overwrite the value stored under a key (last write wins)."""
        record = self.db.get(KeyValueRecord, key)
        if record is None:
            self.db.add(KeyValueRecord(key=key, value=value))
        else:
            record.value = value
        self.db.commit()
        logger.debug("stored_record", key=key, size=len(value))

    def delete(self, key: str) -> None:
        """Remove a key; missing keys are ignored."""
        record = self.db.get(KeyValueRecord, key)
        if record is None:
            return
        self.db.delete(record)
        self.db.commit()
        logger.debug("deleted_record", key=key)


class InMemoryKeyValueStore:
    """Process-local key-value store."""

    def __init__(self, records: dict[str, str] | None = None) -> None:
        self._records: dict[str, str] = dict(records or {})

    def get(self, key: str) -> str | None:
        return self._records.get(key)

    def set(self, key: str, value: str) -> None:
        self._records[key] = value

    def delete(self, key: str) -> None:
        self._records.pop(key, None)
