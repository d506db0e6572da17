"""Document text extraction and chunking for supported file types.

`DocumentProcessor` pulls plain text out of uploads with LangChain loaders
and splits it into overlapping chunks that snap to sentence boundaries.
"""
import logging
import re
from pathlib import Path
from typing import List, Optional

from langchain_community.document_loaders import Docx2txtLoader, PyMuPDFLoader, TextLoader

from configuration import CHUNK_OVERLAP, CHUNK_SIZE
from utils.errors import EmptyDocumentError

logger = logging.getLogger(__name__)

# Fraction of a window a sentence boundary must clear before we snap to it
BOUNDARY_RATIO = 0.7


def clean_text(text: str) -> str:
    if not text:
        return ''
    return re.sub(r'\s+', ' ', text).strip()


def split_into_chunks(text: str, chunk_size: int = 1000, overlap: int = 200) -> List[str]:
    """Split text into windows of chunk_size characters with overlap.

    A window that stops short of the end is pulled back to the last '.' or
    newline inside it, as long as that boundary lies past 70% of the window.
    """
    if not text or len(text) <= chunk_size:
        return [text]
    if overlap < 0 or overlap >= chunk_size * BOUNDARY_RATIO:
        raise ValueError(f"Overlap must be between 0 and {chunk_size * BOUNDARY_RATIO:.0f}, got {overlap}")

    chunks = []
    start = 0
    while start < len(text):
        end = start + chunk_size

        if end < len(text):
            last_period = text.rfind('.', 0, end + 1)
            last_newline = text.rfind('\n', 0, end + 1)
            break_point = max(last_period, last_newline)
            if break_point > start + chunk_size * BOUNDARY_RATIO:
                end = break_point + 1

        chunk = text[start:end].strip()
        if chunk:
            chunks.append(chunk)
        if end >= len(text):
            break
        start = end - overlap

    return chunks


class DocumentProcessor:
    LOADERS = {
        '.pdf': PyMuPDFLoader,
        '.docx': Docx2txtLoader,
        '.doc': Docx2txtLoader,
        '.txt': TextLoader,
        '.md': TextLoader,
    }
    KINDS = {
        '.pdf': "PDF",
        '.docx': "Word document",
        '.doc': "Word document",
        '.txt': "text file",
        '.md': "text file",
    }

    def __init__(self, chunk_size: int = CHUNK_SIZE, chunk_overlap: int = CHUNK_OVERLAP):
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap

    def _loader_for(self, file_path: Path):
        loader_cls = self.LOADERS[file_path.suffix.lower()]
        if loader_cls is TextLoader:
            return loader_cls(str(file_path), encoding="utf-8")
        return loader_cls(str(file_path))

    def load_document(self, file_path: Path, filename: Optional[str] = None) -> str:
        """Extract the trimmed text of a document, raising ValueError on failure.

        `filename` is the name shown in error messages; the on-disk path
        only goes to the log.
        """
        file_path = Path(file_path)
        suffix = file_path.suffix.lower()
        if suffix not in self.LOADERS:
            raise ValueError(f"Unsupported file type: {suffix}")
        kind = self.KINDS[suffix]
        name = filename or file_path.name

        try:
            pages = self._loader_for(file_path).load()
        except Exception as e:
            logger.error(f"Error processing {kind} {file_path}: {e}")
            raise ValueError(f"Failed to process {kind}: could not read '{name}'") from e

        text = "\n\n".join(page.page_content for page in pages).strip()
        if not text:
            raise EmptyDocumentError(f"No text content found in {kind}")
        return text

    def split_text(self, text: str) -> List[str]:
        return split_into_chunks(text, self.chunk_size, self.chunk_overlap)
