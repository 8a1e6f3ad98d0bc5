"""
Главный модуль FastAPI приложения Storefront Catalog Helpers API.

Содержит создание приложения, middleware и подключение роутеров.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.api.v1.routers import api_router
from storefront.core.logging import setup_logging

logger = logging.getLogger(__name__)

SERVICE_NAME = "Storefront Catalog Helpers API"
SERVICE_VERSION = "1.0.0"


def create_app() -> FastAPI:
    """
    Создает и настраивает экземпляр FastAPI приложения.

    Returns:
        FastAPI: Приложение с подключенными роутерами
    """
    setup_logging()

    application = FastAPI(
        title=SERVICE_NAME,
        description="Slug, хлебные крошки, миниатюры и поисковые запросы каталога",
        version=SERVICE_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Настройка CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # TODO: сузить в продакшене до доменов витрины
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.get("/healthz")
    def healthz():
        """
        Health check endpoint для мониторинга состояния приложения.

        Returns:
            dict: Статус приложения
        """
        return {"status": "ok", "service": SERVICE_NAME, "version": SERVICE_VERSION}

    # Подключение API роутеров
    application.include_router(api_router, prefix="/api/v1")

    logger.info(f"{SERVICE_NAME} {SERVICE_VERSION} initialized")
    return application


app = create_app()
