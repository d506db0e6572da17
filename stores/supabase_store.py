"""Supabase-backed document store.

Documents live in the `documents` table of a hosted Postgres database and
are accessed through the supabase client (PostgREST). Errors from the
database are logged and propagated to the caller.
"""
import logging
from typing import List, Optional

from postgrest.exceptions import APIError
from supabase import Client, create_client

from configuration import DOCUMENTS_TABLE, SUPABASE_SERVICE_ROLE_KEY, SUPABASE_URL
from stores.document_store import Document, DocumentStore
from utils.errors import StoreConfigurationError, handle_errors

logger = logging.getLogger(__name__)

COLUMNS = ("id", "filename", "content", "summary", "uploaded_at")

# Postgres error for values that do not parse as the column type (ids are uuid)
INVALID_TEXT_REPRESENTATION = "22P02"


def _rows(res) -> List[Document]:
    return (res.data if hasattr(res, "data") else None) or []


class SupabaseDocumentStore(DocumentStore):
    backend = "supabase"

    def __init__(self, client: Client, table: str = DOCUMENTS_TABLE, ranker=None):
        super().__init__(ranker)
        self.client = client
        self.table = table

    @classmethod
    def from_env(cls, url: Optional[str] = SUPABASE_URL, key: Optional[str] = SUPABASE_SERVICE_ROLE_KEY) -> "SupabaseDocumentStore":
        if not url or not key:
            raise StoreConfigurationError(
                "Missing Supabase configuration. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        return cls(create_client(url, key))

    def setup(self) -> "SupabaseDocumentStore":
        """Ask the database to create the documents table if needed."""
        try:
            self.client.rpc("create_documents_table").execute()
        except APIError as e:
            if "already exists" not in (e.message or ""):
                logger.error(f"Error creating documents table: {e.message}")
        return self

    @handle_errors("Supabase insert")
    def add_document(self, document: Document) -> str:
        payload = {column: document.get(column) for column in COLUMNS}
        payload["content_embedding"] = None
        self.client.table(self.table).insert(payload).execute()
        return document["id"]

    @handle_errors("Supabase read")
    def get_all_documents(self) -> List[Document]:
        res = (
            self.client.table(self.table)
            .select("*")
            .order("uploaded_at", desc=True)
            .execute()
        )
        return _rows(res)

    @handle_errors("Supabase read")
    def get_document(self, document_id: str) -> Optional[Document]:
        try:
            rows = _rows(self.client.table(self.table).select("*").eq("id", document_id).execute())
        except APIError as e:
            if e.code == INVALID_TEXT_REPRESENTATION:
                return None
            raise
        return rows[0] if rows else None

    @handle_errors("Supabase delete")
    def delete_document(self, document_id: str) -> bool:
        # PostgREST returns the deleted rows, so an empty list means no match
        try:
            res = self.client.table(self.table).delete().eq("id", document_id).execute()
        except APIError as e:
            if e.code == INVALID_TEXT_REPRESENTATION:
                logger.info(f"Rejected malformed document id {document_id!r}")
                return False
            raise
        return bool(_rows(res))

    @handle_errors("Supabase count")
    def count(self) -> int:
        res = self.client.table(self.table).select("id", count="exact").execute()
        if getattr(res, "count", None) is not None:
            return res.count
        return len(_rows(res))
