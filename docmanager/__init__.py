from docmanager.db.repositories.document_repository import DocumentRepository
from docmanager.domains.documents.entities import Author, Document, SearchRequest

__all__ = ["DocumentRepository", "Author", "Document", "SearchRequest"]
