"""Relevance engine - tag based "related documents" ranking"""
import asyncio
import logging
import re
from pathlib import PurePosixPath
from typing import List, Optional, Sequence

from domain_models import RelatedDocument, title_from_filename
from errors import MetadataParseError, MissingPathError, NotFoundError
from metadata import FrontmatterParser
from operations.document_walker import DocumentWalker
from operations.path_resolver import PathResolver
from related_cache import RelatedCache
from value_objects import RelatedResult, ResolvedPath

logger = logging.getLogger(__name__)


class RelevanceEngine:
    """Ranks documents by the number of tags they share with a target

    Scans the whole content tree on a cache miss. The full ranking is
    cached so a later request with a larger limit is still a cache hit.
    """

    def __init__(self, resolver: PathResolver, walker: DocumentWalker,
                 frontmatter_parser: FrontmatterParser, cache: Optional[RelatedCache] = None,
                 default_extension: str = '.md'):
        self.resolver = resolver
        self.walker = walker
        self.parser = frontmatter_parser
        self.cache = cache
        self.default_extension = default_extension.lower()
        self._extension_pattern = re.compile(re.escape(self.default_extension) + r'$', re.IGNORECASE)

    async def find_related(self, document_path: str, limit: int = 5,
                           skip_cache: bool = False) -> RelatedResult:
        """Find documents related to document_path

        Raises:
            MissingPathError: If document_path is empty
            InvalidPathError: If document_path escapes the content root
            NotFoundError: If the document does not exist
        """
        target = await asyncio.to_thread(self._resolve_target, document_path)
        limit = max(limit, 0)
        logger.debug(f"Related lookup for {target.relative}, limit: {limit}, skipCache: {skip_cache}")

        if self.cache is not None and not skip_cache:
            cached = self.cache.get(target.relative)
            if cached is not None:
                logger.debug(f"Cache hit for {target.relative}")
                return RelatedResult(related=cached[:limit], from_cache=True)

        if not await asyncio.to_thread(target.absolute.is_file):
            raise NotFoundError(
                "Document not found",
                details=f"The document at path '{target.relative}' does not exist"
            )

        ranking = await self._rank(target)
        logger.debug(f"Found {len(ranking)} related documents for {target.relative}")

        if self.cache is not None:
            self.cache.set(target.relative, ranking)
        return RelatedResult(related=ranking[:limit], from_cache=False)

    def normalize(self, document_path: str) -> str:
        """Unify separators, trim slashes, ensure the document extension"""
        normalized = document_path.replace("\\", "/").strip("/")
        if not normalized.lower().endswith(self.default_extension):
            normalized = f"{normalized}{self.default_extension}"
        return normalized

    def _resolve_target(self, document_path: str) -> ResolvedPath:
        if not document_path or not document_path.strip():
            raise MissingPathError("Missing document path", details="The path parameter is required")
        return self.resolver.resolve(self.normalize(document_path.strip()))

    async def _rank(self, target: ResolvedPath) -> List[RelatedDocument]:
        target_tags = await asyncio.to_thread(self._target_tags, target)
        if not target_tags:
            logger.debug(f"{target.relative} has no tags, relevance is undefined")
            return []

        candidates = await asyncio.to_thread(lambda: list(self.walker.walk()))
        target_key = self._identity(target.relative)

        related = []
        for candidate in candidates:
            if self._identity(candidate) == target_key:
                continue
            document = await asyncio.to_thread(self._score, candidate, target_tags)
            if document is not None:
                related.append(document)

        # stable: equal relevance keeps discovery order
        related.sort(key=lambda doc: doc.relevance, reverse=True)
        return related

    def _target_tags(self, target: ResolvedPath) -> Sequence[str]:
        try:
            metadata = self.parser.read(target.absolute)
        except (MetadataParseError, OSError) as e:
            logger.warning(f"Error reading metadata of {target.relative}: {e}")
            return ()
        return metadata.tags or ()

    def _score(self, candidate: str, target_tags: Sequence[str]) -> Optional[RelatedDocument]:
        """Score one candidate; read errors skip the candidate"""
        try:
            metadata = self.parser.read(self.resolver.root().absolute / candidate)
        except (MetadataParseError, OSError) as e:
            logger.warning(f"Error processing file {candidate}: {e}")
            return None

        if not metadata.tags:
            return None

        wanted = set(target_tags)
        common = tuple(tag for tag in metadata.tags if tag in wanted)
        if not common:
            return None

        return RelatedDocument(
            path=self._strip_extension(candidate),
            title=metadata.title or title_from_filename(PurePosixPath(candidate).name),
            common_tags=common,
        )

    def _strip_extension(self, path: str) -> str:
        return self._extension_pattern.sub('', path)

    def _identity(self, path: str) -> str:
        """Comparable form of a document path"""
        return self._strip_extension(path.replace("\\", "/").strip("/"))
