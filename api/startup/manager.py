"""Startup manager - orchestrates application initialization.

Wiring (build) is kept apart from validation (initialize) so the app can
be constructed, and tested, without touching the filesystem.
"""
import logging

from app_state import AppState
from startup.component_factory import ComponentFactory
from startup.config_validator import ConfigValidator

logger = logging.getLogger(__name__)


class StartupManager:
    """Manages application startup.

    - build: create services and place them on AppState
    - initialize: validate configuration before serving requests
    - shutdown: release services
    """

    def __init__(self, app_state: AppState):
        self.state = app_state
        self.factory = ComponentFactory(app_state.config)

    def build(self) -> AppState:
        """Create every service and compose them on the app state"""
        resolver = self.factory.create_resolver()
        filter_policy = self.factory.create_filter_policy()
        tree_builder = self.factory.create_tree_builder(resolver, filter_policy)
        cache = self.factory.create_related_cache()

        content = self.state.content
        content.tree_builder = tree_builder
        content.walker = self.factory.create_walker(filter_policy)
        content.renderer = self.factory.create_renderer(resolver, filter_policy)
        content.first_document_finder = self.factory.create_first_document_finder(
            tree_builder, resolver
        )

        self.state.related.cache = cache
        self.state.related.engine = self.factory.create_relevance_engine(
            resolver, content.walker, cache
        )
        return self.state

    async def initialize(self):
        """Validate configuration before serving requests"""
        ConfigValidator(self.state.config).validate()
        logger.info(f"Using content directory: {self.state.content_dir()}")
        cache_config = self.state.config.cache
        if cache_config.enabled:
            logger.info(f"Related cache enabled, TTL: {cache_config.ttl_seconds}s")
        else:
            logger.info("Related cache disabled")

    async def shutdown(self):
        """Release services"""
        self.state.close_all_resources()
