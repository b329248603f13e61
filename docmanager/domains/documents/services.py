import logging
from typing import Optional, List, TYPE_CHECKING

from docmanager.domains.documents.entities import Author, Document, SearchRequest
from docmanager.domains.documents.schemas import DocumentSave, DocumentSearchRequest

if TYPE_CHECKING:
    from docmanager.db.repositories.document_repository import DocumentRepository

logger = logging.getLogger(__name__)


class DocumentService:
    """Сервис для работы с документами"""

    def __init__(self, repository: "DocumentRepository"):
        self.document_repository = repository

    def save_document(self, document_data: DocumentSave) -> Document:
        """Создание нового документа или замена существующего"""
        author = None
        if document_data.author is not None:
            author = Author(id=document_data.author.id, name=document_data.author.name)

        document = Document(
            id=document_data.id,
            title=document_data.title,
            content=document_data.content,
            author=author,
            created=document_data.created,
        )
        is_new = not document.is_persisted()

        saved = self.document_repository.save(document)

        if is_new:
            logger.info(f"Created document {saved.id}")
        else:
            logger.info(f"Saved document {saved.id}")
        return saved

    def get_document(self, document_id: str) -> Optional[Document]:
        """Получение документа по идентификатору"""
        return self.document_repository.find_by_id(document_id)

    def list_documents(self) -> List[Document]:
        """Получение всех документов в порядке сохранения"""
        return self.document_repository.list_all()

    def search_documents(self, search_request: DocumentSearchRequest) -> List[Document]:
        """Поиск документов"""
        request = SearchRequest(
            title_prefixes=search_request.title_prefixes,
            contains_contents=search_request.contains_contents,
            author_ids=search_request.author_ids,
            created_from=search_request.created_from,
            created_to=search_request.created_to,
        )
        documents = self.document_repository.search(request)
        logger.info(f"Search matched {len(documents)} of {self.document_repository.count()} documents")
        return documents

    def count_documents(self) -> int:
        """Количество документов в хранилище"""
        return self.document_repository.count()
