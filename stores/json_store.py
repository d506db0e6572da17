"""Local JSON-file document store.

Keeps every document in a single JSON object keyed by id and rewrites the
file on each change. Meant for development and tests, not concurrent use.
"""
import json
from pathlib import Path
from typing import Dict, List, Optional

from configuration import DOCUMENTS_FILE
from stores.document_store import Document, DocumentStore
from utils.errors import handle_errors


class JSONDocumentStore(DocumentStore):
    backend = "json"

    def __init__(self, filepath: Optional[Path] = None, ranker=None):
        super().__init__(ranker)
        self.filepath = Path(filepath or DOCUMENTS_FILE)
        self.data: Dict[str, Document] = {}

    def setup(self) -> "JSONDocumentStore":
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self.load()
        return self

    @handle_errors("JSON load")
    def load(self) -> None:
        if self.filepath.exists():
            with open(self.filepath, 'r', encoding='utf-8') as f:
                self.data = json.load(f)

    @handle_errors("JSON save")
    def save(self) -> None:
        with open(self.filepath, 'w', encoding='utf-8') as f:
            json.dump(self.data, f, indent=2)

    def add_document(self, document: Document) -> str:
        self.data[document["id"]] = dict(document)
        self.save()
        return document["id"]

    def get_all_documents(self) -> List[Document]:
        return sorted(self.data.values(), key=lambda doc: doc.get("uploaded_at") or "", reverse=True)

    def get_document(self, document_id: str) -> Optional[Document]:
        return self.data.get(document_id)

    def delete_document(self, document_id: str) -> bool:
        if document_id in self.data:
            del self.data[document_id]
            self.save()
            return True
        return False

    def count(self) -> int:
        return len(self.data)
