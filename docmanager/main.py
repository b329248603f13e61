import logging
from typing import Optional

from fastapi import FastAPI

from docmanager.api.router import api_router
from docmanager.core.config import Settings, get_settings
from docmanager.core.logging import configure_logging
from docmanager.db.repositories.document_repository import DocumentRepository

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Создание приложения с собственным хранилищем документов"""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_title,
        description="Хранилище документов в памяти с поиском",
        version="1.0.0"
    )

    # Одно хранилище на приложение, роутеры получают его через Depends
    app.state.document_repository = DocumentRepository(id_start=settings.id_start)

    app.include_router(api_router)

    logger.info(f"{settings.app_title} started, first id {settings.id_start}")
    return app
