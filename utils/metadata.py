"""Helpers for constructing canonical document records."""
import uuid
from datetime import datetime, timezone


def build_document_record(filename: str, content: str, summary: str) -> dict:
    return {
        "id": str(uuid.uuid4()),
        "filename": filename,
        "content": content,
        "summary": summary,
        "uploaded_at": datetime.now(timezone.utc).isoformat(),
    }


def preview(content: str, length: int) -> str:
    return content[:length] + "..."
