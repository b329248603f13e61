from docmanager.domains.documents.entities import Author, Document, SearchRequest
from docmanager.domains.documents.matcher import matches
from docmanager.domains.documents.schemas import (
    AuthorSchema, DocumentSave, DocumentResponse, DocumentSearchRequest,
    HealthResponse
)
from docmanager.domains.documents.services import DocumentService

__all__ = [
    "Author", "Document", "SearchRequest",
    "matches",
    "AuthorSchema", "DocumentSave", "DocumentResponse", "DocumentSearchRequest",
    "HealthResponse",
    "DocumentService"
]
