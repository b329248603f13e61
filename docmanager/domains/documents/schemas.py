from pydantic import BaseModel, ConfigDict
from typing import Optional, List
from datetime import datetime


class AuthorSchema(BaseModel):
    """Схема автора документа"""
    id: str
    name: str = ""

    model_config = ConfigDict(from_attributes=True)


class DocumentSave(BaseModel):
    """Схема для создания или замены документа"""
    id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[AuthorSchema] = None
    created: Optional[datetime] = None


class DocumentResponse(BaseModel):
    """Схема для ответа с данными документа"""
    id: str
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[AuthorSchema] = None
    created: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class DocumentSearchRequest(BaseModel):
    """Схема для поиска документов, каждое поле может отсутствовать"""
    title_prefixes: Optional[List[str]] = None
    contains_contents: Optional[List[str]] = None
    author_ids: Optional[List[str]] = None
    created_from: Optional[datetime] = None
    created_to: Optional[datetime] = None


class HealthResponse(BaseModel):
    status: str
    documents: int
