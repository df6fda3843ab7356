"""
Environment configuration loader.

Logic for reading environment variables lives with the data source
(environment) rather than in the Config dataclasses.
"""
import os
from pathlib import Path
from typing import Tuple

from config import (
    Config, PathConfig, ContentConfig, CacheConfig, ServerConfig, LoggingConfig
)

class EnvironmentConfigLoader:
    """Loads configuration from environment variables.

    Single Responsibility: Environment access logic.
    """

    def load(self) -> Config:
        """Create Config from environment variables"""
        server = self._load_server_config()
        return Config(
            paths=self._load_path_config(),
            content=self._load_content_config(),
            cache=self._load_cache_config(),
            server=server,
            logging=self._load_logging_config(server.is_production),
        )

    def _load_path_config(self) -> PathConfig:
        """Load content directory from environment"""
        raw = self._get_optional("CONTENT_DIR", str(PathConfig.content_dir))
        return PathConfig(content_dir=Path(PathConfig.from_cygwin(raw)))

    def _load_content_config(self) -> ContentConfig:
        """Load content file settings from environment"""
        defaults = ContentConfig()
        # An empty variable keeps the default extension
        document_extension = (self._get_extensions(
            "DEFAULT_DOCUMENT_EXTENSION", (defaults.default_document_extension,)
        ) or (defaults.default_document_extension,))[0]
        extensions = self._get_extensions("CONTENT_EXTENSIONS", defaults.extensions)
        if document_extension not in extensions:
            extensions = extensions + (document_extension,)
        return ContentConfig(
            extensions=extensions,
            document_extensions=(document_extension,),
            default_document_extension=document_extension,
        )

    def _load_cache_config(self) -> CacheConfig:
        """Load related documents cache configuration from environment"""
        return CacheConfig(
            enabled=self._get_bool("RELATED_CACHE_ENABLED", True),
            ttl_seconds=self._get_float("RELATED_CACHE_TTL_SECONDS", 300.0),
            sweep_threshold=self._get_int("RELATED_CACHE_SWEEP_THRESHOLD", 100)
        )

    def _load_server_config(self) -> ServerConfig:
        """Load HTTP server configuration from environment"""
        defaults = ServerConfig()
        return ServerConfig(
            host=self._get_optional("HOST", defaults.host),
            port=self._get_int("PORT", defaults.port),
            cors_origins=self._get_list("CORS_ORIGINS", defaults.cors_origins),
            environment=self._get_optional("APP_ENV", defaults.environment)
        )

    def _load_logging_config(self, production: bool) -> LoggingConfig:
        """Load logging configuration; production logs at INFO by default"""
        log_file = os.getenv("LOG_FILE")
        return LoggingConfig(
            level=self._get_optional("LOG_LEVEL", "INFO" if production else "DEBUG").upper(),
            file=Path(log_file) if log_file else None
        )

    def _get_optional(self, key: str, default: str) -> str:
        """Get optional string environment variable"""
        return os.getenv(key, default)

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable"""
        value = os.getenv(key, str(default).lower())
        return value.lower() == "true"

    def _get_int(self, key: str, default: int) -> int:
        """Get integer environment variable"""
        value = os.getenv(key, str(default))
        return int(value)

    def _get_float(self, key: str, default: float) -> float:
        """Get float environment variable"""
        value = os.getenv(key, str(default))
        return float(value)

    def _get_list(self, key: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
        """Get comma-separated environment variable"""
        value = os.getenv(key)
        if value is None:
            return default
        return tuple(item.strip() for item in value.split(",") if item.strip())

    def _get_extensions(self, key: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
        """Get comma-separated extension list, normalized to '.ext' lower-case"""
        items = self._get_list(key, default)
        return tuple(
            (item if item.startswith('.') else f".{item}").lower() for item in items
        )
