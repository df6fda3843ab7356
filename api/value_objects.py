"""
Value objects for the content API.

Principles:
- Immutable data structures
- Named instead of primitive types (no Primitive Obsession)
- Small, focused classes with single responsibility
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple, List, Dict, Any

@dataclass(frozen=True)
class ResolvedPath:
    """A client path after confinement to the content root.

    relative is the canonical forward-slash form ('' for the root),
    absolute is the filesystem location it maps to.
    """
    relative: str
    absolute: Path

    @property
    def is_root(self) -> bool:
        return self.relative == ""

    def child(self, name: str) -> 'ResolvedPath':
        """Return the resolved path of a direct child entry"""
        relative = f"{self.relative}/{name}" if self.relative else name
        return ResolvedPath(relative=relative, absolute=self.absolute / name)

@dataclass(frozen=True)
class DocumentMetadata:
    """Normalized view over a front matter or sidecar mapping.

    raw keeps the parsed mapping untouched for clients that want more
    than title/order/tags. error describes values that were present but
    could not be interpreted.
    """
    title: Optional[str] = None
    order: Optional[int] = None
    tags: Optional[Tuple[str, ...]] = None
    raw: Dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None

    @classmethod
    def empty(cls) -> 'DocumentMetadata':
        return cls()

@dataclass(frozen=True)
class CacheEntry:
    """One cached ranking. ttl and timestamp share the cache clock's unit (seconds)."""
    data: Tuple
    timestamp: float
    ttl: float

    def is_expired(self, now: float) -> bool:
        """Expired once strictly more than ttl has elapsed"""
        return now - self.timestamp > self.ttl

@dataclass(frozen=True)
class RelatedResult:
    """Result of a related documents lookup.

    Replaces the {related, fromCache} dict returned by older handlers.
    """
    related: List
    from_cache: bool = False
