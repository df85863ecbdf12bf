# hamshark/main.py
from fastapi import FastAPI
import uvicorn

from hamshark.api import api_router
from hamshark.api.routers import health
from hamshark.utils.logging import get_logger
from hamshark.utils.settings import REPOSITORY_BACKEND

logger = get_logger(__name__)


def create_app() -> FastAPI:
    if REPOSITORY_BACKEND == "sql":
        from hamshark.data.seed import init_db

        init_db()
    logger.info(f"Starting HamShark API with {REPOSITORY_BACKEND} repositories")

    app = FastAPI(
        title="HamShark Storefront API",
        version="1.0.0",
    )

    # Include routers
    app.include_router(health.router)
    app.include_router(api_router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
