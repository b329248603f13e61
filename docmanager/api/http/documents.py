from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from docmanager.core.storage import get_repository
from docmanager.db.repositories.document_repository import DocumentRepository
from docmanager.domains.documents.entities import Document
from docmanager.domains.documents.schemas import (
    AuthorSchema, DocumentSave, DocumentResponse, DocumentSearchRequest
)
from docmanager.domains.documents.services import DocumentService

router = APIRouter(prefix="/documents", tags=["documents"])


def _to_response(document: Document) -> DocumentResponse:
    return DocumentResponse(
        id=document.id,
        title=document.title,
        content=document.content,
        author=AuthorSchema.model_validate(document.author) if document.author else None,
        created=document.created
    )


@router.post("/", response_model=DocumentResponse)
def save_document(
    document_data: DocumentSave,
    repository: DocumentRepository = Depends(get_repository)
):
    """Создание нового документа или замена существующего по id"""
    document_service = DocumentService(repository)
    document = document_service.save_document(document_data)
    return _to_response(document)


@router.get("/", response_model=List[DocumentResponse])
def list_documents(repository: DocumentRepository = Depends(get_repository)):
    """Получение всех документов в порядке сохранения"""
    document_service = DocumentService(repository)
    return [_to_response(doc) for doc in document_service.list_documents()]


@router.post("/search", response_model=List[DocumentResponse])
def search_documents(
    search_request: DocumentSearchRequest,
    repository: DocumentRepository = Depends(get_repository)
):
    """Поиск документов"""
    document_service = DocumentService(repository)
    documents = document_service.search_documents(search_request)
    return [_to_response(doc) for doc in documents]


@router.get("/{document_id}", response_model=DocumentResponse)
def get_document(
    document_id: str,
    repository: DocumentRepository = Depends(get_repository)
):
    """Получение документа по идентификатору"""
    document_service = DocumentService(repository)

    document = document_service.get_document(document_id)

    if not document:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Document not found"
        )

    return _to_response(document)
