from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

# Field names follow the JSON contract of the portal frontend (camelCase)

class ContentItemModel(BaseModel):
    name: str
    path: str = Field(..., description="Root-relative, forward-slash path")
    isDirectory: bool
    type: str
    size: int
    lastModified: str = Field(..., description="ISO-8601 modification time")
    order: Optional[int] = None
    title: Optional[str] = None
    tags: Optional[List[str]] = None
    metadata: Dict[str, Any] = {}
    metadataError: Optional[str] = None

class StructureResponse(BaseModel):
    path: str
    items: List[ContentItemModel]
    count: int

class RelatedDocumentModel(BaseModel):
    path: str
    title: str
    commonTags: List[str]
    commonTagsCount: int
    relevance: int = Field(..., ge=1)

class RelatedResponse(BaseModel):
    related: List[RelatedDocumentModel]
    fromCache: bool

class FirstDocumentResponse(BaseModel):
    path: Optional[str] = None
    directory: Optional[str] = None

class HeadingModel(BaseModel):
    text: str
    level: int
    id: str

class DocumentResponse(BaseModel):
    """Rendered markdown document"""
    html: str
    metadata: Dict[str, Any]
    headings: List[HeadingModel] = []
    path: str
    name: str

class HealthResponse(BaseModel):
    status: str
    content_dir: str
    cache_entries: int
