import locale
import logging
import os
from pathlib import Path
from typing import Iterator, Sequence

from operations.file_filter import FileFilterPolicy

logger = logging.getLogger(__name__)


class DocumentWalker:
    """Walks the content tree depth-first, yielding document paths

    Uses an explicit work-stack instead of recursion so deep trees cannot
    exhaust the interpreter stack. Discovery order matches a recursive
    pre-order walk: within a directory, entries are visited in name order
    and a sub-directory's documents come before its later siblings.
    Symbolic links are never followed, so link cycles cannot be walked.

    Yields root-relative, forward-slash paths.
    """

    def __init__(self, base_path: Path, extensions: Sequence[str],
                 filter_policy: FileFilterPolicy):
        self.base_path = Path(base_path)
        self.extensions = {ext.lower() for ext in extensions}
        self.filter_policy = filter_policy

    def walk(self) -> Iterator[str]:
        """Yield supported documents"""
        if not self.base_path.is_dir():
            return
        # (relative path, is_directory); the root is read eagerly so its
        # errors propagate, unreadable sub-directories are skipped
        stack = [(rel, is_dir) for rel, is_dir in reversed(self._children(""))]
        while stack:
            relative, is_directory = stack.pop()
            if not is_directory:
                yield relative
                continue
            try:
                children = self._children(relative)
            except OSError as e:
                logger.warning(f"Skipping unreadable directory {relative}: {e}")
                continue
            stack.extend(reversed(children))

    def _children(self, relative: str):
        """Sorted (path, is_directory) pairs of the walkable entries"""
        directory = self.base_path / relative if relative else self.base_path
        children = []
        with os.scandir(directory) as entries:
            for entry in entries:
                child = f"{relative}/{entry.name}" if relative else entry.name
                if entry.is_dir(follow_symlinks=False):
                    if self.filter_policy.should_include_directory(entry.name):
                        children.append((child, True))
                elif entry.is_file(follow_symlinks=False) and self._is_document(entry.name):
                    children.append((child, False))
        children.sort(key=lambda pair: locale.strxfrm(pair[0].rsplit("/", 1)[-1]))
        return children

    def _is_document(self, name: str) -> bool:
        """Check if file is a supported document"""
        if name.startswith('.'):
            return False
        return self.filter_policy.extension_of(name) in self.extensions
