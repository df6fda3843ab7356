from config import Config
from related_cache import RelatedCache


class ContentServices:
    """Content discovery services

    Everything that reads the content tree.
    """

    def __init__(self):
        self.tree_builder = None
        self.walker = None
        self.renderer = None
        self.first_document_finder = None


class RelatedServices:
    """Related documents services

    Separated from ContentServices to maintain SRP: these own mutable state.
    """

    def __init__(self):
        self.engine = None
        self.cache = None


class AppState:
    """Application state container

    Composes focused service holders instead of holding every service
    directly. Routes reach services through the delegation methods below
    (wrapped as FastAPI dependencies in routes.deps) rather than through
    module-level globals.
    """

    def __init__(self, config: Config):
        self.config = config
        self.content = ContentServices()
        self.related = RelatedServices()

    # === Service Access Delegation (for route handlers) ===

    def get_tree_builder(self):
        """Get content tree builder"""
        return self.content.tree_builder

    def get_renderer(self):
        """Get document renderer"""
        return self.content.renderer

    def get_first_document_finder(self):
        """Get first document finder"""
        return self.content.first_document_finder

    def get_relevance_engine(self):
        """Get relevance engine"""
        return self.related.engine

    def get_related_cache(self) -> RelatedCache:
        """Get related documents cache (None when caching is disabled)"""
        return self.related.cache

    # === State Access Delegation ===

    def cache_size(self) -> int:
        """Number of cached rankings"""
        cache = self.related.cache
        return len(cache) if cache is not None else 0

    def content_dir(self) -> str:
        return str(self.config.paths.content_dir)

    # === Lifecycle ===

    def close_all_resources(self):
        """Release services at shutdown"""
        if self.related.cache is not None:
            self.related.cache.dispose()
