"""
Configuration constants for the content API
"""
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional, Tuple

# Directory names never shown in listings or scanned for documents
IGNORED_DIRECTORIES = (
    'node_modules',
    '.git',
    '.github',
    '.vscode',
    'dist',
    'build',
    'public',
    'assets',
    'images',
    'styles',
)

@dataclass
class PathConfig:
    """File path configuration"""
    content_dir: Path = Path("/content")

    @staticmethod
    def from_cygwin(raw: str) -> str:
        """Convert /cygdrive/c/docs style paths to c:/docs

        Paths that are not Cygwin mounts are returned unchanged.
        """
        if not raw.startswith('/cygdrive/'):
            return raw
        parts = [p for p in raw.split('/') if p]
        if len(parts) < 3:
            return raw
        drive = parts[1][0].upper()
        return f"{drive}:/" + "/".join(parts[2:])

@dataclass
class ContentConfig:
    """Which files make up the documentation tree"""
    extensions: Tuple[str, ...] = ('.md', '.html')
    document_extensions: Tuple[str, ...] = ('.md',)
    default_document_extension: str = '.md'
    ignored_directories: Tuple[str, ...] = IGNORED_DIRECTORIES
    sidecar_filenames: Tuple[str, ...] = ('_meta.yml', '_meta.yaml', '.meta')

@dataclass
class CacheConfig:
    """Related documents cache configuration"""
    enabled: bool = True
    ttl_seconds: float = 300.0
    sweep_threshold: int = 100

@dataclass
class ServerConfig:
    """HTTP server configuration"""
    host: str = "0.0.0.0"
    port: int = 7070
    cors_origins: Tuple[str, ...] = ('http://localhost:4200', 'http://localhost:8080')
    environment: str = "development"

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "DEBUG"
    file: Optional[Path] = None
    max_bytes: int = 10 * 1024 * 1024
    backup_count: int = 5

@dataclass
class Config:
    """Main configuration container"""
    paths: PathConfig = field(default_factory=PathConfig)
    content: ContentConfig = field(default_factory=ContentConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> 'Config':
        """Create config from environment - delegates to EnvironmentConfigLoader"""
        from environment_config_loader import EnvironmentConfigLoader
        return EnvironmentConfigLoader().load()

# Default instance
default_config = Config.from_env()
