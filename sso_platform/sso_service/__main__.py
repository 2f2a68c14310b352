import uvicorn

from .config import settings
from .main import app

if __name__ == "__main__":
    # uvicorn handles SIGINT/SIGTERM and runs the lifespan shutdown
    uvicorn.run(
        app,
        host=settings.RPC_HOST,
        port=settings.RPC_PORT,
        log_level="debug" if settings.ENV != "prod" else "info",
    )
