from .highlight_sentence_use_case import HighlightSentenceUseCase
from .restore_editor_state_use_case import RestoredEditorState, RestoreEditorStateUseCase
from .restore_selection_use_case import RestoredSelection, RestoreError, RestoreSelectionUseCase
from .save_editor_state_use_case import SavedEditorState, SaveEditorStateUseCase

__all__ = [
    "HighlightSentenceUseCase",
    "RestoreEditorStateUseCase",
    "RestoreError",
    "RestoreSelectionUseCase",
    "RestoredEditorState",
    "RestoredSelection",
    "SaveEditorStateUseCase",
    "SavedEditorState",
]
