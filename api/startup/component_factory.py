"""Component factory for creating application objects"""

from config import Config
from metadata import FrontmatterParser, MetadataNormalizer, SidecarMetadataReader
from operations.content_tree_builder import ContentTreeBuilder
from operations.document_renderer import DocumentRenderer
from operations.document_walker import DocumentWalker
from operations.file_filter import FileFilterPolicy
from operations.first_document_finder import FirstDocumentFinder
from operations.path_resolver import PathResolver
from operations.relevance_engine import RelevanceEngine
from related_cache import RelatedCache


class ComponentFactory:
    """Creates application components

    Design principles:
    - Single responsibility: object creation
    - Small methods (< 5 lines each)
    - Dependency injection pattern
    """

    def __init__(self, config: Config):
        self.config = config
        self.normalizer = MetadataNormalizer()

    def create_resolver(self) -> PathResolver:
        return PathResolver(self.config.paths.content_dir)

    def create_filter_policy(self) -> FileFilterPolicy:
        content = self.config.content
        return FileFilterPolicy(content.extensions, content.ignored_directories,
                                content.sidecar_filenames)

    def create_frontmatter_parser(self) -> FrontmatterParser:
        return FrontmatterParser(self.normalizer)

    def create_sidecar_reader(self) -> SidecarMetadataReader:
        return SidecarMetadataReader(self.config.content.sidecar_filenames, self.normalizer)

    def create_tree_builder(self, resolver, filter_policy) -> ContentTreeBuilder:
        return ContentTreeBuilder(
            resolver,
            filter_policy,
            self.create_frontmatter_parser(),
            self.create_sidecar_reader(),
            self.config.content.document_extensions
        )

    def create_walker(self, filter_policy) -> DocumentWalker:
        return DocumentWalker(self.config.paths.content_dir,
                              self.config.content.document_extensions, filter_policy)

    def create_related_cache(self):
        """Create related documents cache if enabled"""
        if not self.config.cache.enabled:
            return None
        return RelatedCache(self.config.cache.ttl_seconds, self.config.cache.sweep_threshold)

    def create_relevance_engine(self, resolver, walker, cache) -> RelevanceEngine:
        return RelevanceEngine(
            resolver,
            walker,
            self.create_frontmatter_parser(),
            cache,
            self.config.content.default_document_extension
        )

    def create_renderer(self, resolver, filter_policy) -> DocumentRenderer:
        return DocumentRenderer(resolver, filter_policy, self.create_frontmatter_parser(),
                                self.config.content.document_extensions)

    def create_first_document_finder(self, tree_builder, resolver) -> FirstDocumentFinder:
        return FirstDocumentFinder(tree_builder, resolver, self.config.content.document_extensions)
