from fastapi import APIRouter, Depends

from docmanager.api.http.documents import router as documents_router
from docmanager.core.storage import get_repository
from docmanager.db.repositories.document_repository import DocumentRepository
from docmanager.domains.documents.schemas import HealthResponse
from docmanager.domains.documents.services import DocumentService

api_router = APIRouter()
api_router.include_router(documents_router)


@api_router.get("/health", response_model=HealthResponse, tags=["health"])
def health(repository: DocumentRepository = Depends(get_repository)):
    """Проверка состояния сервиса и количества документов"""
    document_service = DocumentService(repository)
    return HealthResponse(status="ok", documents=document_service.count_documents())
