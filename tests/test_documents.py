import zipfile

import pymupdf
import pytest
from langchain_community.document_loaders import Docx2txtLoader, PyMuPDFLoader, TextLoader

from services.documents import DocumentProcessor, clean_text, split_into_chunks
from utils.errors import EmptyDocumentError


def test_short_text_is_single_chunk():
    assert split_into_chunks("short text", 1000, 200) == ["short text"]
    assert split_into_chunks("", 1000, 200) == [""]


def test_fixed_windows_without_boundaries():
    text = "a" * 2500

    chunks = split_into_chunks(text, 1000, 200)

    assert [len(c) for c in chunks] == [1000, 1000, 900]
    assert chunks[0][-200:] == chunks[1][:200]


def test_window_snaps_to_sentence_boundary():
    text = "x" * 799 + "." + "y" * 700

    chunks = split_into_chunks(text, 1000, 200)

    assert len(chunks) == 2
    assert chunks[0] == "x" * 799 + "."
    assert chunks[1] == text[600:]


def test_boundary_too_early_is_ignored():
    text = "x" * 100 + "." + "y" * 1399

    chunks = split_into_chunks(text, 1000, 200)

    assert len(chunks[0]) == 1000


def test_newline_counts_as_boundary():
    text = "x" * 850 + "\n" + "y" * 649

    chunks = split_into_chunks(text, 1000, 200)

    assert chunks[0] == "x" * 850


def test_overlap_too_large():
    with pytest.raises(ValueError):
        split_into_chunks("a" * 2000, 1000, 800)


def test_clean_text():
    assert clean_text("  a \n\n  b\tc ") == "a b c"
    assert clean_text(None) == ""


def test_load_text_document(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("  Hello world.\n", encoding="utf-8")

    assert DocumentProcessor().load_document(path) == "Hello world."


def test_load_markdown_document(tmp_path):
    path = tmp_path / "README.md"
    path.write_text("# Title\n\nBody text.", encoding="utf-8")

    assert DocumentProcessor().load_document(path) == "# Title\n\nBody text."


def test_load_empty_document(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("   ", encoding="utf-8")

    with pytest.raises(EmptyDocumentError):
        DocumentProcessor().load_document(path)


def test_unsupported_extension(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("a,b", encoding="utf-8")

    with pytest.raises(ValueError, match="Unsupported file type: .csv"):
        DocumentProcessor().load_document(path)


def test_split_text_uses_configured_sizes():
    processor = DocumentProcessor(chunk_size=100, chunk_overlap=10)
    assert len(processor.split_text("z" * 250)) == 3


DOCX_XML = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">'
    '<w:body><w:p><w:r><w:t>Hello from a Word document.</w:t></w:r></w:p></w:body>'
    '</w:document>'
)


def test_loaders_dispatch_by_extension():
    loaders = DocumentProcessor.LOADERS
    assert loaders['.pdf'] is PyMuPDFLoader
    assert loaders['.docx'] is Docx2txtLoader
    assert loaders['.doc'] is Docx2txtLoader
    assert loaders['.txt'] is TextLoader
    assert loaders['.md'] is TextLoader


def test_load_pdf_document(tmp_path):
    path = tmp_path / "report.pdf"
    pdf = pymupdf.open()
    page = pdf.new_page()
    page.insert_text((72, 72), "Hello from a PDF")
    pdf.save(str(path))
    pdf.close()

    assert DocumentProcessor().load_document(path) == "Hello from a PDF"


def test_load_docx_document(tmp_path):
    path = tmp_path / "letter.docx"
    with zipfile.ZipFile(path, "w") as archive:
        archive.writestr("word/document.xml", DOCX_XML)

    assert DocumentProcessor().load_document(path) == "Hello from a Word document."


def test_corrupt_pdf_error_names_upload_not_path(tmp_path):
    path = tmp_path / "0f3c-bad.pdf"
    path.write_bytes(b"this is not a pdf")

    with pytest.raises(ValueError) as excinfo:
        DocumentProcessor().load_document(path, "bad.pdf")

    message = str(excinfo.value)
    assert message == "Failed to process PDF: could not read 'bad.pdf'"
    assert str(tmp_path) not in message
    assert not isinstance(excinfo.value, EmptyDocumentError)
