"""Start FastAPI backend server"""
import uvicorn

from configuration import HOST, PORT

if __name__ == "__main__":
    uvicorn.run(
        "api.main:app",
        host=HOST,
        port=PORT,
        log_level="info"
    )
