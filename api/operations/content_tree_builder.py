"""Content tree builder - ordered listing of one directory

Builds the navigation tree of the documentation portal one level at a time.
Each entry gets its order and title from the richest source available:
front matter for documents, the sidecar metadata file for directories,
and the entry name as a last resort.
"""
import asyncio
import locale
import logging
import os
from typing import List, Sequence

from domain_models import ContentItem, title_from_filename
from errors import MetadataParseError, NotDirectoryError, NotFoundError
from metadata import FrontmatterParser, SidecarMetadataReader
from operations.file_filter import FileFilterPolicy
from operations.path_resolver import PathResolver
from value_objects import DocumentMetadata, ResolvedPath

logger = logging.getLogger(__name__)


class ContentTreeBuilder:
    """Lists the immediate children of a content directory

    Sorting: items with an explicit numeric order come first, ascending,
    ties broken by name; items without order follow, sorted by name.
    Directories and files are treated alike.
    """

    def __init__(self, resolver: PathResolver, filter_policy: FileFilterPolicy,
                 frontmatter_parser: FrontmatterParser, sidecar_reader: SidecarMetadataReader,
                 document_extensions: Sequence[str] = ('.md',)):
        self.resolver = resolver
        self.filter_policy = filter_policy
        self.frontmatter_parser = frontmatter_parser
        self.sidecar_reader = sidecar_reader
        self.document_extensions = {ext.lower() for ext in document_extensions}

    async def list(self, directory_path: str) -> List[ContentItem]:
        """List and sort the entries of directory_path

        Raises:
            InvalidPathError: If the path escapes the content root
            NotFoundError: If the directory does not exist
            NotDirectoryError: If the path is a file
        """
        directory = await asyncio.to_thread(self.resolver.resolve, directory_path)
        await asyncio.to_thread(self._ensure_directory, directory)

        names = await asyncio.to_thread(self._visible_entries, directory)
        logger.debug(f"Found {len(names)} visible entries in '{directory.relative or '/'}'")

        items = await asyncio.gather(
            *(asyncio.to_thread(self._build_item, directory.child(name)) for name in names)
        )
        return self.sort([item for item in items if item is not None])

    @staticmethod
    def sort(items: List[ContentItem]) -> List[ContentItem]:
        """Explicit order first (ascending), then the rest alphabetically"""
        ordered = [item for item in items if item.has_order]
        unordered = [item for item in items if not item.has_order]
        ordered.sort(key=lambda item: (item.order, locale.strxfrm(item.name)))
        unordered.sort(key=lambda item: locale.strxfrm(item.name))
        return ordered + unordered

    def _ensure_directory(self, directory: ResolvedPath):
        path = directory.absolute
        if not path.exists():
            raise NotFoundError(
                "Directory not found",
                details=f"No such directory: {'/' if directory.is_root else directory.relative}"
            )
        if not path.is_dir():
            raise NotDirectoryError("Path is not a directory", details=directory.relative)

    def _visible_entries(self, directory: ResolvedPath) -> List[str]:
        """Names of entries that pass the filter policy"""
        names = []
        with os.scandir(directory.absolute) as entries:
            for entry in entries:
                if self._is_visible(entry) and self._is_confined(entry):
                    names.append(entry.name)
        return names

    def _is_confined(self, entry: os.DirEntry) -> bool:
        """Links leading out of the content root are not listed"""
        if not entry.is_symlink() or self.resolver.contains(entry.path):
            return True
        logger.warning(f"Skipping symlink outside the content root: {entry.path}")
        return False

    def _is_visible(self, entry: os.DirEntry) -> bool:
        if entry.is_dir():
            return self.filter_policy.should_include_directory(entry.name)
        if entry.is_file():
            return self.filter_policy.should_include_file(entry.name)
        return False

    def _build_item(self, entry: ResolvedPath):
        """Stat an entry and attach its metadata

        Returns None if the entry vanished or cannot be stat'ed.
        """
        try:
            stats = entry.absolute.stat()
        except FileNotFoundError:
            logger.debug(f"Entry disappeared while listing: {entry.relative}")
            return None
        except OSError as e:
            logger.warning(f"Skipping unreadable entry {entry.relative}: {e}")
            return None

        is_directory = entry.absolute.is_dir()
        name = entry.absolute.name
        item = ContentItem(
            name=name,
            path=entry.relative,
            is_directory=is_directory,
            size=stats.st_size,
            last_modified=ContentItem.timestamp(stats.st_mtime),
            title=title_from_filename(name, strip_extension=not is_directory),
        )
        self._apply_metadata(item, entry)
        return item

    def _apply_metadata(self, item: ContentItem, entry: ResolvedPath):
        """Merge metadata into item; failures are recorded, never raised"""
        try:
            metadata = self._read_metadata(item, entry)
        except (MetadataParseError, OSError) as e:
            self._record_failure(item, str(e))
            return

        if metadata.error:
            self._record_failure(item, metadata.error)
        item.order = metadata.order
        item.title = metadata.title or item.title
        item.tags = list(metadata.tags) if metadata.tags is not None else None
        item.metadata = metadata.raw

    def _read_metadata(self, item: ContentItem, entry: ResolvedPath) -> DocumentMetadata:
        if item.is_directory:
            return self.sidecar_reader.read(entry.absolute)
        if self.filter_policy.extension_of(item.name) in self.document_extensions:
            return self.frontmatter_parser.read(entry.absolute)
        return DocumentMetadata.empty()

    @staticmethod
    def _record_failure(item: ContentItem, message: str):
        logger.warning(f"Metadata for '{item.path}' could not be read: {message}")
        item.metadata_error = message
