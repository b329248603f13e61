import logging
import threading
from typing import Optional, List

from docmanager.domains.documents.entities import Document, SearchRequest
from docmanager.domains.documents.matcher import matches

logger = logging.getLogger(__name__)


class DocumentRepository:
    """Репозиторий для хранения документов в памяти"""

    def __init__(self, id_start: int = 1):
        self._documents: List[Document] = []
        self._next_id = id_start
        # save целиком выполняется под блокировкой, чтение берет снимок списка
        self._lock = threading.Lock()

    def save(self, document: Document) -> Document:
        """Создание или полная замена документа по идентификатору"""
        with self._lock:
            if not document.id:
                document.id = str(self._next_id)
                self._next_id += 1
                logger.debug(f"Assigned id {document.id} to new document")
            else:
                before = len(self._documents)
                self._documents = [doc for doc in self._documents if doc.id != document.id]
                if len(self._documents) < before:
                    logger.debug(f"Replacing document {document.id}")
            self._documents.append(document)
        return document

    def find_by_id(self, document_id: str) -> Optional[Document]:
        """Получение документа по идентификатору"""
        if not document_id:
            return None
        return next((doc for doc in self._snapshot() if doc.id == document_id), None)

    def search(self, request: Optional[SearchRequest] = None) -> List[Document]:
        """Поиск документов в порядке сохранения"""
        return [doc for doc in self._snapshot() if matches(doc, request)]

    def list_all(self) -> List[Document]:
        return self._snapshot()

    def count(self) -> int:
        with self._lock:
            return len(self._documents)

    def _snapshot(self) -> List[Document]:
        with self._lock:
            return list(self._documents)
