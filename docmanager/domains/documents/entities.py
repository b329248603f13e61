from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, List


def to_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Приведение момента времени к UTC (naive значения считаются UTC)"""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass
class Author:
    """Автор документа, хранится внутри документа"""
    id: str
    name: str = ""


@dataclass
class Document:
    """Сущность документа домена Documents"""
    id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[Author] = None
    created: Optional[datetime] = None

    @property
    def author_id(self) -> Optional[str]:
        return self.author.id if self.author else None

    def is_persisted(self) -> bool:
        """Есть ли у документа идентификатор"""
        return bool(self.id)


@dataclass
class SearchRequest:
    """Критерии поиска документов, любое поле может быть пустым"""
    title_prefixes: Optional[List[str]] = field(default=None)
    contains_contents: Optional[List[str]] = field(default=None)
    author_ids: Optional[List[str]] = field(default=None)
    created_from: Optional[datetime] = None
    created_to: Optional[datetime] = None

    def has_title_prefixes(self) -> bool:
        return bool(self.title_prefixes)

    def has_contains_contents(self) -> bool:
        return bool(self.contains_contents)

    def has_author_ids(self) -> bool:
        return bool(self.author_ids)

    def is_empty(self) -> bool:
        """Запрос без ограничений совпадает с любым документом"""
        return not (
            self.has_title_prefixes()
            or self.has_contains_contents()
            or self.has_author_ids()
            or self.created_from is not None
            or self.created_to is not None
        )
