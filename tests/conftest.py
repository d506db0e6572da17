import pytest
from fastapi.testclient import TestClient

import api.routes as routes
from api.main import app
from api.routes import get_document_store
from stores.json_store import JSONDocumentStore
from utils import files


@pytest.fixture
def store(tmp_path):
    return JSONDocumentStore(tmp_path / "documents.json").setup()


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    directory = tmp_path / "uploads"
    monkeypatch.setattr(routes, "upload_path", lambda filename: files.upload_path(filename, directory))
    return directory


@pytest.fixture
def client(store, upload_dir):
    app.dependency_overrides[get_document_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_document(doc_id, content, uploaded_at="2024-01-01T00:00:00+00:00", filename=None):
    return {
        "id": doc_id,
        "filename": filename or f"{doc_id}.txt",
        "content": content,
        "summary": "",
        "uploaded_at": uploaded_at,
    }
