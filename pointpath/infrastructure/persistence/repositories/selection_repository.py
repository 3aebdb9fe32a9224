"""Repository for the persisted anchor, focus and snapshot records."""

from pointpath.application.editor.protocols.key_value_store import KeyValueStoreProtocol
from pointpath.domain.common.value_objects.point_path import SelectionPath
from pointpath.infrastructure.persistence.mappers.point_path_mapper import PointPathMapper


class SelectionRepository:
    """Stores exactly three records, each overwritten wholesale."""

    def __init__(self, store: KeyValueStoreProtocol, key_prefix: str = "editor") -> None:
        self.store = store
        self.mapper = PointPathMapper()
        self.anchor_key = f"{key_prefix}:anchor"
        self.focus_key = f"{key_prefix}:focus"
        self.snapshot_key = f"{key_prefix}:snapshot"

    def find_selection(self) -> SelectionPath | None:
        """
        Load the saved selection.

        Returns:
            SelectionPath, or None unless both anchor and focus were saved

        Raises:
            PathRecordParseError: If a stored record is malformed
        """
        anchor_record = self.store.get(self.anchor_key)
        focus_record = self.store.get(self.focus_key)
        if anchor_record is None or focus_record is None:
            return None
        return SelectionPath(
            anchor=self.mapper.to_domain(anchor_record),
            focus=self.mapper.to_domain(focus_record),
        )

    def save_selection(self, selection_path: SelectionPath) -> None:
        self.store.set(self.anchor_key, self.mapper.to_record(selection_path.anchor))
        self.store.set(self.focus_key, self.mapper.to_record(selection_path.focus))

    def clear_selection(self) -> None:
        self.store.delete(self.anchor_key)
        self.store.delete(self.focus_key)

    def find_snapshot(self) -> str | None:
        return self.store.get(self.snapshot_key)

    def save_snapshot(self, snapshot: str) -> None:
        self.store.set(self.snapshot_key, snapshot)
