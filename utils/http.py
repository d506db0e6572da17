"""HTTP utility helpers for consistent responses.

`http_response` standardizes success payloads; `error_response` builds the
JSON body used by the catch-all exception handler.
"""
from typing import Dict, Any

from fastapi.responses import JSONResponse


def http_response(status_code: int, message: str, **extra_data) -> Dict[str, Any]:
    return {"status": "success" if status_code < 400 else "error", "message": message, **extra_data}


def error_response(status_code: int, error: str, details: str = None) -> JSONResponse:
    content = {"error": error}
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)
