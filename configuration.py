"""Configuration settings for the DocumentQA backend.

Values come from the environment (a local `.env` file is honoured) so the
same code runs against Supabase in deployment and a JSON file locally.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))

# Supabase (hosted Postgres)
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY")
DOCUMENTS_TABLE = "documents"

# Which store backs the documents: "supabase" or "json"
DOCUMENT_STORE = os.getenv("DOCUMENT_STORE", "supabase" if SUPABASE_URL else "json").lower()

# Local storage
DATA_DIR = Path(os.getenv("DATA_DIR", "document_data"))
DOCUMENTS_FILE = DATA_DIR / "documents.json"
UPLOAD_DIR = Path(os.getenv("UPLOAD_DIR", "uploads"))

# Upload rules
ALLOWED_EXTENSIONS = {'.pdf', '.docx', '.doc', '.txt', '.md'}
MAX_FILE_SIZE_MB = int(os.getenv("MAX_FILE_SIZE_MB", "10"))
MAX_FILE_SIZE_BYTES = MAX_FILE_SIZE_MB * 1024 * 1024

# Text processing
CHUNK_SIZE = int(os.getenv("CHUNK_SIZE", "1000"))
CHUNK_OVERLAP = int(os.getenv("CHUNK_OVERLAP", "200"))
SEARCH_TOP_K = int(os.getenv("SEARCH_TOP_K", "3"))
SUMMARY_SENTENCES = int(os.getenv("SUMMARY_SENTENCES", "3"))
SOURCE_PREVIEW_CHARS = 200
