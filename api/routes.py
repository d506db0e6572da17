"""FastAPI router and endpoint implementations for DocumentQA.

Exposes health, upload, ask, document listing/deletion and model status
endpoints under `/api`. The document store is created lazily on first use
and injected with `Depends` so tests can swap in their own.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from configuration import SEARCH_TOP_K, SOURCE_PREVIEW_CHARS
from schemas.documents import AskRequest, AskResponse, DocumentList, DocumentUploadResponse, Source
from services.documents import DocumentProcessor
from services.llm import answer_question, generate_summary, model_status
from stores.document_store import DocumentStore, create_document_store
from utils.errors import EmptyDocumentError
from utils.files import upload_path, validate_file
from utils.http import http_response
from utils.metadata import build_document_record, preview


logger = logging.getLogger(__name__)

NO_RELEVANT_DOCUMENTS = "I couldn't find relevant information in the uploaded documents to answer your question."

document_processor = DocumentProcessor()
_document_store: Optional[DocumentStore] = None


def get_document_store() -> DocumentStore:
    global _document_store
    if _document_store is None:
        _document_store = create_document_store()
    return _document_store


router = APIRouter(prefix="/api")


@router.get("/health")
async def health_check(store: DocumentStore = Depends(get_document_store)):
    return {
        "status": "OK",
        "message": "Server is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "document_store": store.backend,
    }


@router.post("/upload", response_model=DocumentUploadResponse)
async def upload_document(
    document: Optional[UploadFile] = File(None),
    store: DocumentStore = Depends(get_document_store),
):
    if document is None or not document.filename:
        raise HTTPException(400, "No file uploaded")

    content = await document.read()
    validate_file(document.filename, len(content))
    logger.info(f"Processing file: {document.filename}")

    file_path = upload_path(document.filename)
    try:
        with open(file_path, 'wb') as f:
            f.write(content)

        try:
            text = document_processor.load_document(file_path, document.filename)
        except EmptyDocumentError:
            text = ""
        if not text.strip():
            raise HTTPException(400, "Could not extract text from document")

        summary = generate_summary(text)
        chunks = document_processor.split_text(text)
        record = build_document_record(document.filename, text, summary)
        document_id = store.add_document(record)
        logger.info(f"Stored {document.filename} as {document_id} ({len(chunks)} chunks)")

        return DocumentUploadResponse(
            success=True,
            document_id=document_id,
            filename=document.filename,
            summary=summary,
            chunks=len(chunks),
            message="Document processed successfully",
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error processing document {document.filename}: {e}")
        raise HTTPException(500, f"Error processing document: {str(e)}")
    finally:
        if file_path.exists():
            file_path.unlink()


@router.post("/ask", response_model=AskResponse)
async def ask_question(query: AskRequest, store: DocumentStore = Depends(get_document_store)):
    question = (query.question or "").strip()
    if not question:
        raise HTTPException(400, "Question is required")

    try:
        if store.count() == 0:
            raise HTTPException(400, "No documents uploaded yet")

        relevant_docs = store.search(question, limit=SEARCH_TOP_K)
        if not relevant_docs:
            return AskResponse(answer=NO_RELEVANT_DOCUMENTS, sources=[])

        context = "\n\n".join(doc["content"] for doc in relevant_docs)
        answer = answer_question(question, context)

        return AskResponse(
            answer=answer,
            sources=[
                Source(
                    id=doc["id"],
                    filename=doc["filename"],
                    content=preview(doc["content"], SOURCE_PREVIEW_CHARS),
                    similarity=doc["similarity"],
                )
                for doc in relevant_docs
            ],
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error answering question: {e}")
        raise HTTPException(500, f"Error answering question: {str(e)}")


@router.get("/documents", response_model=DocumentList)
async def list_documents(store: DocumentStore = Depends(get_document_store)):
    try:
        return DocumentList(documents=store.get_all_documents())
    except Exception as e:
        logger.error(f"Error fetching documents: {e}")
        raise HTTPException(500, f"Error fetching documents: {str(e)}")


@router.delete("/documents/{document_id}")
async def delete_document(document_id: str, store: DocumentStore = Depends(get_document_store)):
    try:
        deleted = store.delete_document(document_id)
    except Exception as e:
        logger.error(f"Error deleting document {document_id}: {e}")
        raise HTTPException(500, f"Error deleting document: {str(e)}")

    if not deleted:
        raise HTTPException(404, f"Document '{document_id}' not found")
    logger.info(f"Deleted document {document_id}")
    return http_response(200, "Document deleted successfully")


@router.get("/model")
async def get_model_status():
    return model_status()
