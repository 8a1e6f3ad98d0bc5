"""
Основной роутер API v1.

Подключает все endpoint'ы приложения.
"""

from fastapi import APIRouter

from storefront.api.v1.endpoints import catalog

# Создание основного роутера API v1
api_router = APIRouter()

api_router.include_router(catalog.router, prefix="/catalog", tags=["catalog"])
