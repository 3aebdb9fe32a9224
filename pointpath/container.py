from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from pointpath.application.editor.use_cases.highlight_sentence_use_case import (
    HighlightSentenceUseCase,
)
from pointpath.application.editor.use_cases.restore_editor_state_use_case import (
    RestoreEditorStateUseCase,
)
from pointpath.application.editor.use_cases.restore_selection_use_case import (
    RestoreSelectionUseCase,
)
from pointpath.application.editor.use_cases.save_editor_state_use_case import (
    SaveEditorStateUseCase,
)
from pointpath.config import get_settings
from pointpath.domain.document.services.flattening_policy import get_policy
from pointpath.domain.document.services.point_path_decoder import PointPathDecoder
from pointpath.domain.document.services.point_path_encoder import PointPathEncoder
from pointpath.domain.document.services.sentence_matcher import SentenceMatcher
from pointpath.infrastructure.document.services.json_snapshot_service import (
    JsonDocumentSnapshotService,
)
from pointpath.infrastructure.document.services.lxml_document_loader import LxmlDocumentLoader
from pointpath.infrastructure.persistence.repositories.key_value_store import (
    SqlAlchemyKeyValueStore,
)
from pointpath.infrastructure.persistence.repositories.selection_repository import (
    SelectionRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Singleton(get_settings)

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Stores
    key_value_store = providers.Factory(SqlAlchemyKeyValueStore, db=db)

    # Repositories
    selection_repository = providers.Factory(
        SelectionRepository,
        store=key_value_store,
        key_prefix=settings.provided.STORAGE_KEY_PREFIX,
    )

    # Infrastructure services
    snapshot_service = providers.Singleton(JsonDocumentSnapshotService)
    document_loader = providers.Singleton(LxmlDocumentLoader)

    # Domain services (pure domain logic, no storage)
    encoder = providers.Singleton(PointPathEncoder)
    decoder = providers.Singleton(PointPathDecoder)
    sentence_matcher = providers.Singleton(SentenceMatcher)
    search_policy = providers.Singleton(get_policy, settings.provided.SEARCH_FLATTENING_POLICY)

    # Use cases
    save_editor_state_use_case = providers.Factory(
        SaveEditorStateUseCase,
        selection_repository=selection_repository,
        snapshot_service=snapshot_service,
        encoder=encoder,
    )
    restore_selection_use_case = providers.Factory(
        RestoreSelectionUseCase,
        selection_repository=selection_repository,
        decoder=decoder,
    )
    restore_editor_state_use_case = providers.Factory(
        RestoreEditorStateUseCase,
        selection_repository=selection_repository,
        snapshot_service=snapshot_service,
        restore_selection_use_case=restore_selection_use_case,
    )
    highlight_sentence_use_case = providers.Factory(
        HighlightSentenceUseCase,
        decoder=decoder,
        matcher=sentence_matcher,
        policy=search_policy,
        default_sentence=settings.provided.HIGHLIGHT_SENTENCE,
    )


container = Container()
