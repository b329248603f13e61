from typing import Callable, List, Optional

from docmanager.domains.documents.entities import Document, SearchRequest, to_utc


def title_matches(document: Document, request: SearchRequest) -> bool:
    """Заголовок начинается хотя бы с одного из префиксов"""
    if not request.has_title_prefixes():
        return True
    if document.title is None:
        return False
    return any(document.title.startswith(prefix) for prefix in request.title_prefixes)


def content_matches(document: Document, request: SearchRequest) -> bool:
    """Содержимое содержит хотя бы одну из подстрок"""
    if not request.has_contains_contents():
        return True
    if document.content is None:
        return False
    return any(part in document.content for part in request.contains_contents)


def author_matches(document: Document, request: SearchRequest) -> bool:
    """Автор документа входит в список"""
    if not request.has_author_ids():
        return True
    author_id = document.author_id
    if author_id is None:
        return False
    return author_id in request.author_ids


def created_after_from(document: Document, request: SearchRequest) -> bool:
    # нижняя граница включительно, сравнение в UTC
    if request.created_from is None:
        return True
    if document.created is None:
        return False
    return to_utc(document.created) >= to_utc(request.created_from)


def created_before_to(document: Document, request: SearchRequest) -> bool:
    # верхняя граница включительно, сравнение в UTC
    if request.created_to is None:
        return True
    if document.created is None:
        return False
    return to_utc(document.created) <= to_utc(request.created_to)


PREDICATES: List[Callable[[Document, SearchRequest], bool]] = [
    title_matches,
    content_matches,
    author_matches,
    created_after_from,
    created_before_to,
]


def matches(document: Document, request: Optional[SearchRequest]) -> bool:
    """Проверка документа на соответствие всем активным критериям запроса"""
    if request is None or request.is_empty():
        return True
    return all(predicate(document, request) for predicate in PREDICATES)
