from docmanager.domains.documents.schemas import AuthorSchema, DocumentSave, DocumentSearchRequest
from docmanager.domains.documents.services import DocumentService


class TestDocumentService:

    def test_save_and_count(self, repository):
        service = DocumentService(repository)
        assert service.count_documents() == 0

        saved = service.save_document(DocumentSave(title="Alpha", author=AuthorSchema(id="a1")))
        service.save_document(DocumentSave(id=saved.id, title="Alpha v2"))

        assert service.count_documents() == 1
        assert [doc.title for doc in service.list_documents()] == ["Alpha v2"]

    def test_search_with_naive_bounds(self, populated_repository):
        service = DocumentService(populated_repository)
        results = service.search_documents(DocumentSearchRequest(created_from="2024-01-01T00:00:00"))
        assert [doc.id for doc in results] == ["1", "2"]
