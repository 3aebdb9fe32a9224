"""Guards for the edit-transaction / persistence boundary."""

from pointpath.domain.common.exceptions import TransactionError
from pointpath.domain.document.nodes import DocumentTree


def ensure_outside_transaction(tree: DocumentTree) -> None:
    """Persistence reads and writes must not be issued from inside a transaction."""
    if tree.in_current_transaction:
        raise TransactionError("Persistence cannot be issued from inside an edit transaction")
