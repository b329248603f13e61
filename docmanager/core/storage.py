from fastapi import Request

from docmanager.db.repositories.document_repository import DocumentRepository


# Функция для dependency injection в FastAPI
def get_repository(request: Request) -> DocumentRepository:
    return request.app.state.document_repository
