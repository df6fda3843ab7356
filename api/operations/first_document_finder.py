import asyncio
import logging
import os
from typing import Optional, Sequence

from operations.content_tree_builder import ContentTreeBuilder
from operations.path_resolver import PathResolver

logger = logging.getLogger(__name__)


class FirstDocumentFinder:
    """Finds the document the portal opens by default

    Walks ContentTreeBuilder listings depth-first, so "first" follows the
    same ordering as the navigation tree the frontend renders. Directories
    reached twice through symlinks are descended only once.
    """

    def __init__(self, tree_builder: ContentTreeBuilder, resolver: PathResolver,
                 document_extensions: Sequence[str] = ('.md',)):
        self.tree_builder = tree_builder
        self.resolver = resolver
        self.document_extensions = {ext.lower() for ext in document_extensions}

    async def find(self, directory: str = "") -> Optional[str]:
        """Return the root-relative path of the first document, or None

        Raises:
            InvalidPathError, NotFoundError, NotDirectoryError: For a bad
                starting directory
        """
        seen = {await self._real_path(directory)}
        stack = list(reversed(await self.tree_builder.list(directory)))
        while stack:
            item = stack.pop()
            if item.is_directory:
                real_path = await self._real_path(item.path)
                if real_path in seen:
                    logger.debug(f"Already visited {item.path}, skipping")
                    continue
                seen.add(real_path)
                stack.extend(reversed(await self.tree_builder.list(item.path)))
            elif self._is_document(item.name):
                logger.info(f"First document found: {item.path}")
                return item.path

        logger.info(f"No documents found under '{directory or '/'}'")
        return None

    async def _real_path(self, path: str) -> str:
        resolved = await asyncio.to_thread(self.resolver.resolve, path)
        return await asyncio.to_thread(os.path.realpath, resolved.absolute)

    def _is_document(self, name: str) -> bool:
        return any(name.lower().endswith(ext) for ext in self.document_extensions)
