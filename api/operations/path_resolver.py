"""Path resolver - confines client paths to the content root

Following Sandi Metz principles:
- Single Responsibility: Only turns raw client paths into safe paths
- Confinement: traversal segments are rejected before any I/O, symlinks
  are followed only for the final containment check
"""
import os
from pathlib import Path
from typing import List, Optional

from errors import InvalidPathError
from value_objects import ResolvedPath


class PathResolver:
    """Resolves client-supplied paths against the content root"""

    def __init__(self, content_root: Path):
        self.content_root = Path(os.path.abspath(content_root))

    def resolve(self, raw_path: Optional[str]) -> ResolvedPath:
        """Normalize raw_path and confine it to the content root

        Separators are unified to '/', empty and '.' segments dropped.
        Any '..' segment is rejected outright rather than collapsed.

        Raises:
            InvalidPathError: On traversal segments, NUL bytes, or a result
                outside the content root
        """
        segments = self._segments(raw_path or "")
        relative = "/".join(segments)
        absolute = self.content_root.joinpath(*segments)
        self._ensure_confined(absolute, raw_path)
        return ResolvedPath(relative=relative, absolute=absolute)

    def root(self) -> ResolvedPath:
        """The content root itself"""
        return ResolvedPath(relative="", absolute=self.content_root)

    def _segments(self, raw_path: str) -> List[str]:
        """Split into clean segments, rejecting traversal"""
        if "\x00" in raw_path:
            raise InvalidPathError("Invalid path", details="Path contains NUL bytes")

        segments = []
        for segment in raw_path.replace("\\", "/").split("/"):
            if segment in ("", "."):
                continue
            if segment == "..":
                raise InvalidPathError("Invalid path", details="Path traversal not allowed")
            segments.append(segment)
        return segments

    def contains(self, path: Path) -> bool:
        """Check that path, with symlinks followed, lies inside the content root

        Component-wise, so '/content2' is not inside '/content'.
        """
        real_root = os.path.realpath(self.content_root)
        real_path = os.path.realpath(path)
        return os.path.commonpath([real_root, real_path]) == real_root

    def _ensure_confined(self, absolute: Path, raw_path: Optional[str]):
        if not self.contains(absolute):
            raise InvalidPathError(
                "Invalid path",
                details=f"Path escapes the content root: {raw_path}"
            )
