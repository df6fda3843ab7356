"""Domain models for content discovery"""
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import PurePosixPath
from typing import Optional, List, Dict, Any

_SEPARATORS = re.compile(r'[-_]')
_WORD_START = re.compile(r'\b\w')


def title_from_filename(name: str, strip_extension: bool = True) -> str:
    """Derive a display title from a file or directory name

    'getting-started.md' -> 'Getting Started'
    """
    stem = PurePosixPath(name).stem if strip_extension else name
    spaced = _SEPARATORS.sub(' ', stem)
    return _WORD_START.sub(lambda m: m.group(0).upper(), spaced)


@dataclass
class ContentItem:
    """Represents one entry of a directory listing"""
    name: str
    path: str
    is_directory: bool
    size: int
    last_modified: datetime
    order: Optional[int] = None
    title: Optional[str] = None
    tags: Optional[List[str]] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    metadata_error: Optional[str] = None

    @property
    def type(self) -> str:
        return 'directory' if self.is_directory else 'file'

    @property
    def has_order(self) -> bool:
        return self.order is not None

    @staticmethod
    def timestamp(mtime: float) -> datetime:
        """Convert a stat mtime to an aware UTC datetime"""
        return datetime.fromtimestamp(mtime, tz=timezone.utc)

    def to_dict(self) -> dict:
        """Convert to the JSON shape consumed by the portal frontend"""
        return {
            'name': self.name,
            'path': self.path,
            'isDirectory': self.is_directory,
            'type': self.type,
            'size': self.size,
            'lastModified': self.last_modified.isoformat(),
            'order': self.order,
            'title': self.title,
            'tags': self.tags,
            'metadata': self.metadata,
            'metadataError': self.metadata_error,
        }


@dataclass(frozen=True)
class RelatedDocument:
    """A document sharing at least one tag with the target document"""
    path: str
    title: str
    common_tags: tuple

    @property
    def common_tags_count(self) -> int:
        return len(self.common_tags)

    @property
    def relevance(self) -> int:
        """Relevance is the number of shared tags"""
        return len(self.common_tags)

    def to_dict(self) -> dict:
        return {
            'path': self.path,
            'title': self.title,
            'commonTags': list(self.common_tags),
            'commonTagsCount': self.common_tags_count,
            'relevance': self.relevance,
        }
