import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from loguru import logger
from starlette.middleware.cors import CORSMiddleware

from common.errors import register_exception_handlers
from db import Database
from routers import server_router, auth_router, profile_router, post_router, support_router, admin_router
from routers import socket_router, dashboard_router
from services.auth_service import AuthService
from services.socket_hub import SocketHub
from settings import Settings, settings as default_settings
from utils.logging import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    database: Database = app.state.database
    settings: Settings = app.state.settings

    # 운영 환경에서 JWT_SECRET 이 없으면 기동 거부
    settings.ensure_jwt_secret()

    # 연결 실패는 로그만 남기고 기동은 계속
    database.authenticate()
    database.sync()
    logger.info("Server running on http://localhost:{}/", app.state.settings.SERVER_PORT)

    yield
    database.dispose()


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL, settings.LOG_JSON)

    app = FastAPI(lifespan=lifespan)

    # Initialize dependencies
    app.state.settings = settings
    app.state.database = database or Database.from_settings(settings)
    app.state.auth_service = AuthService(settings)
    app.state.socket_hub = SocketHub()
    app.state.started_at = time.time()

    register_exception_handlers(app)

    # CORS 는 개발 환경에서만
    if settings.is_development:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Include routers
    app.include_router(server_router.router, prefix="/api/server", tags=["Server API"])
    app.include_router(auth_router.router, prefix="/api/auth", tags=["Auth API"])
    app.include_router(profile_router.router, prefix="/api/profile", tags=["Profile API"])
    app.include_router(post_router.router, prefix="/api/posts", tags=["Posts API"])
    app.include_router(support_router.router, prefix="/api/support", tags=["Support API"])
    app.include_router(admin_router.router, prefix="/api/admin", tags=["Admin API"])
    app.include_router(socket_router.router, tags=["Socket"])
    app.include_router(dashboard_router.router, tags=["Dashboard"])

    @app.get("/")
    def health_check():
        return {"status": "ok"}

    return app


app = create_app()
