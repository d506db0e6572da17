"""Common interface for document persistence backends.

`DocumentStore` implements keyword search on top of `get_all_documents`, so
backends only provide CRUD. `create_document_store` picks the backend named
in configuration.
"""
import logging
from typing import Any, Dict, List, Optional

from configuration import DOCUMENT_STORE, SEARCH_TOP_K
from services.ranking import SimilarityRanker
from utils.errors import handle_errors

logger = logging.getLogger(__name__)

Document = Dict[str, Any]


class DocumentStore:
    backend = "base"

    def __init__(self, ranker: Optional[SimilarityRanker] = None):
        self.ranker = ranker or SimilarityRanker(top_k=SEARCH_TOP_K)

    def setup(self) -> "DocumentStore":
        return self

    def add_document(self, document: Document) -> str:
        raise NotImplementedError

    def get_all_documents(self) -> List[Document]:
        """All documents, newest first."""
        raise NotImplementedError

    def get_document(self, document_id: str) -> Optional[Document]:
        raise NotImplementedError

    def delete_document(self, document_id: str) -> bool:
        raise NotImplementedError

    def count(self) -> int:
        return len(self.get_all_documents())

    @handle_errors("Document search")
    def search(self, query: str, limit: int = SEARCH_TOP_K) -> List[Document]:
        documents = self.get_all_documents()
        if not documents:
            return []

        by_id = {doc["id"]: doc for doc in documents}
        ranked = self.ranker.rank(
            query,
            ((doc["id"], doc.get("content") or "") for doc in documents),
            top_k=limit,
        )
        logger.info(f"Search matched {len(ranked)} of {len(documents)} documents")
        return [{**by_id[document_id], "similarity": score} for document_id, score in ranked]


def create_document_store(backend: str = DOCUMENT_STORE) -> DocumentStore:
    """Build and set up the configured store."""
    if backend == "supabase":
        from stores.supabase_store import SupabaseDocumentStore
        store = SupabaseDocumentStore.from_env()
    elif backend == "json":
        from stores.json_store import JSONDocumentStore
        store = JSONDocumentStore()
    else:
        raise ValueError(f"Unknown document store backend: {backend!r}")

    logger.info(f"Using {store.backend} document store")
    return store.setup()
