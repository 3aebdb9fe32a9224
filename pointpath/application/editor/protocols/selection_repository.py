"""Protocol for persisted selection and snapshot records."""

from typing import Protocol

from pointpath.domain.common.value_objects.point_path import SelectionPath


class SelectionRepositoryProtocol(Protocol):
    """Interface for the anchor, focus and snapshot records."""

    def find_selection(self) -> SelectionPath | None: ...

    def save_selection(self, selection_path: SelectionPath) -> None: ...

    def clear_selection(self) -> None: ...

    def find_snapshot(self) -> str | None: ...

    def save_snapshot(self, snapshot: str) -> None: ...
