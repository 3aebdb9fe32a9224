"""Database models."""

from datetime import datetime

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from pointpath.database import Base


class KeyValueRecord(Base):
    """A single string record, overwritten wholesale on every write."""

    __tablename__ = "key_value_records"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        """String representation of KeyValueRecord."""
        return f"<KeyValueRecord(key='{self.key}', value='{self.value[:50]}...')>"
