from typing import Optional
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from settings import Settings, get_settings
from core.progression_engine import ProgressionEngine
from api import admin, auth, node

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: 建立活動視窗、謎題目錄、session 表與憑證表
        app.state.settings = settings
        app.state.engine = ProgressionEngine.from_settings(settings)
        yield
        # Shutdown: session 只存在記憶體中，process 結束即丟棄
        logger.info("[SHUTDOWN] TwinLock stopped, in-memory sessions discarded.")

    app = FastAPI(
        title="Twin Lock API",
        description="Backend API for the two-node timed escape room event",
        version="1.0.0",
        lifespan=lifespan
    )

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(auth.router)
    app.include_router(node.router)
    app.include_router(admin.router)

    @app.get("/")
    def root():
        return {"message": "Twin Lock API", "status": "ok"}

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
