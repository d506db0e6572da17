"""Main FastAPI application for DocumentQA."""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.routes import get_document_store, router
from configuration import HOST, PORT
from utils.http import error_response

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Prepare the document store before serving requests"""
    logger.info("🚀 Starting DocumentQA server...")
    store = get_document_store()
    logger.info(f"Document store ready ({store.backend})")
    logger.info(f"Health check: http://localhost:{PORT}/api/health")
    yield
    logger.info("🔻 Shutting down...")


app = FastAPI(
    title="DocumentQA API",
    description="Document upload, summarization and keyword question answering",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {exc}")
    return error_response(500, "Internal server error", str(exc))


app.include_router(router)

if __name__ == "__main__":
    uvicorn.run("api.main:app", host=HOST, port=PORT, log_level="info")
