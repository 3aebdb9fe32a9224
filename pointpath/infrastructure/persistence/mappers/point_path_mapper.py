"""Mapper for stored record string ↔ PointPath conversion."""

from pydantic import ValidationError as PydanticValidationError

from pointpath.domain.common.value_objects.point_path import PointPath
from pointpath.exceptions import PathRecordParseError
from pointpath.infrastructure.persistence.schemas.point_path_schemas import PointPathRecord


class PointPathMapper:
    """Mapper for stored record string ↔ PointPath conversion."""

    def to_domain(self, record: str) -> PointPath:
        """Convert a stored JSON record to a PointPath."""
        try:
            schema = PointPathRecord.model_validate_json(record)
        except PydanticValidationError as exc:
            reason = "; ".join(error["msg"] for error in exc.errors())
            raise PathRecordParseError(record, reason) from exc
        return PointPath(block_index=schema.block_index, char_offset=schema.char_offset)

    def to_record(self, path: PointPath) -> str:
        """Convert a PointPath to its stored JSON record."""
        schema = PointPathRecord(block_index=path.block_index, char_offset=path.char_offset)
        return schema.model_dump_json(by_alias=True)
