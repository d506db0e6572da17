"""Pydantic request/response schemas used by the API endpoints."""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict


class AskRequest(BaseModel):
    question: str = ""


class Source(BaseModel):
    id: str
    filename: str
    content: str
    similarity: float


class AskResponse(BaseModel):
    answer: str
    sources: List[Source] = []


class DocumentUploadResponse(BaseModel):
    success: bool
    document_id: str
    filename: str
    summary: str
    chunks: int
    message: str


class DocumentInfo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    filename: str
    content: str
    summary: Optional[str] = None
    uploaded_at: str


class DocumentList(BaseModel):
    documents: List[DocumentInfo]
