"""
TuneBridge Backend Main Application
FastAPI 앱 및 startup/shutdown 이벤트
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import get_settings, Settings
from .core.engine import RecommendationEngine
from .core.sources import SourceRegistry, build_registry
from .api import routes_health, routes_songs, routes_recommend
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, registry: Optional[SourceRegistry] = None) -> FastAPI:
    """
    앱 생성

    Args:
        settings: 설정 (없으면 환경변수에서 로드)
        registry: 미리 구성한 소스 레지스트리 (없으면 설정의 SOURCES로 생성)
    """
    config = settings or get_settings()
    setup_logging(config.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """앱 라이프사이클 관리"""
        # Startup
        logger.info("=" * 60)
        logger.info(f"{config.SERVICE_NAME} Starting...")
        logger.info("=" * 60)

        app.state.config = config
        logger.info(f"Version: {config.VERSION}")
        logger.info(f"Demo Mode: {config.DEMO_MODE}")
        logger.info(f"Sources: {config.source_names}")

        try:
            app.state.registry = registry if registry is not None else build_registry(config)
            app.state.engine = RecommendationEngine.from_settings(app.state.registry, config)
        except Exception as e:
            logger.error(f"Engine initialization failed: {e}")
            app.state.registry = None
            app.state.engine = None

        logger.info("=" * 60)
        logger.info(f"{config.SERVICE_NAME} Ready!")
        logger.info("=" * 60)

        yield

        # Shutdown
        logger.info(f"{config.SERVICE_NAME} Shutting down...")

    app = FastAPI(
        title=config.SERVICE_NAME,
        description="교차 플랫폼 유사 곡 추천 API",
        version=config.VERSION,
        lifespan=lifespan
    )

    # CORS 설정
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 라우터 등록
    app.include_router(routes_health.router, prefix="/api")
    app.include_router(routes_songs.router, prefix="/api")
    app.include_router(routes_recommend.router, prefix="/api")

    @app.get("/")
    async def root():
        """루트 엔드포인트"""
        return {
            "service": config.SERVICE_NAME,
            "version": config.VERSION,
            "docs": "/docs"
        }

    return app


app = create_app()
