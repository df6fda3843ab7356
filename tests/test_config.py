"""
Unit tests for config module
"""
from pathlib import Path
from unittest.mock import patch

import pytest

from config import (
    CacheConfig,
    Config,
    ContentConfig,
    IGNORED_DIRECTORIES,
    LoggingConfig,
    PathConfig,
    ServerConfig,
)
from environment_config_loader import EnvironmentConfigLoader


class TestDefaults:
    """Tests for dataclass defaults"""

    def test_path_default(self):
        assert PathConfig().content_dir == Path("/content")

    def test_content_defaults(self):
        config = ContentConfig()
        assert config.extensions == ('.md', '.html')
        assert config.default_document_extension == '.md'
        assert 'node_modules' in config.ignored_directories
        assert config.ignored_directories == IGNORED_DIRECTORIES

    def test_cache_defaults(self):
        config = CacheConfig()
        assert config.enabled is True
        assert config.ttl_seconds == 300
        assert config.sweep_threshold == 100

    def test_server_defaults(self):
        config = ServerConfig()
        assert config.port == 7070
        assert config.cors_origins == ('http://localhost:4200', 'http://localhost:8080')
        assert config.is_production is False

    def test_production_flag(self):
        assert ServerConfig(environment="Production").is_production is True

    def test_logging_defaults(self):
        config = LoggingConfig()
        assert config.level == "DEBUG"
        assert config.file is None
        assert config.max_bytes == 10 * 1024 * 1024
        assert config.backup_count == 5

    def test_config_instances_independent(self):
        """default_factory gives each Config its own sections"""
        first, second = Config(), Config()
        first.cache.enabled = False
        assert second.cache.enabled is True


class TestCygwinPaths:

    def test_cygdrive_converted(self):
        assert PathConfig.from_cygwin("/cygdrive/c/docs/content") == "C:/docs/content"

    def test_regular_path_unchanged(self):
        assert PathConfig.from_cygwin("/srv/content") == "/srv/content"

    def test_bare_drive_unchanged(self):
        assert PathConfig.from_cygwin("/cygdrive/c") == "/cygdrive/c"


class TestEnvironmentConfigLoader:
    """Tests for loading configuration from environment variables"""

    def test_defaults_without_environment(self):
        with patch.dict('os.environ', {}, clear=True):
            config = EnvironmentConfigLoader().load()

        assert config.paths.content_dir == Path("/content")
        assert config.server.port == 7070
        assert config.cache.enabled is True
        assert config.logging.level == "DEBUG"

    def test_content_dir_from_env(self):
        with patch.dict('os.environ', {'CONTENT_DIR': '/srv/docs'}, clear=True):
            config = EnvironmentConfigLoader().load()

        assert config.paths.content_dir == Path("/srv/docs")

    def test_content_dir_cygwin(self):
        with patch.dict('os.environ', {'CONTENT_DIR': '/cygdrive/d/docs'}, clear=True):
            config = EnvironmentConfigLoader().load()

        assert config.paths.content_dir == Path("D:/docs")

    def test_extensions_normalized(self):
        env = {'CONTENT_EXTENSIONS': 'MD, txt,.Html'}
        with patch.dict('os.environ', env, clear=True):
            config = EnvironmentConfigLoader().load()

        assert config.content.extensions == ('.md', '.txt', '.html')

    def test_default_extension_always_listable(self):
        env = {'CONTENT_EXTENSIONS': '.html', 'DEFAULT_DOCUMENT_EXTENSION': 'markdown'}
        with patch.dict('os.environ', env, clear=True):
            config = EnvironmentConfigLoader().load()

        assert config.content.default_document_extension == '.markdown'
        assert config.content.document_extensions == ('.markdown',)
        assert config.content.extensions == ('.html', '.markdown')

    def test_empty_default_extension_keeps_default(self):
        with patch.dict('os.environ', {'DEFAULT_DOCUMENT_EXTENSION': ''}, clear=True):
            config = EnvironmentConfigLoader().load()

        assert config.content.default_document_extension == '.md'
        assert config.content.document_extensions == ('.md',)

    def test_cache_settings(self):
        env = {
            'RELATED_CACHE_ENABLED': 'false',
            'RELATED_CACHE_TTL_SECONDS': '30',
            'RELATED_CACHE_SWEEP_THRESHOLD': '10',
        }
        with patch.dict('os.environ', env, clear=True):
            config = EnvironmentConfigLoader().load()

        assert config.cache.enabled is False
        assert config.cache.ttl_seconds == 30.0
        assert config.cache.sweep_threshold == 10

    def test_server_settings(self):
        env = {
            'HOST': '127.0.0.1',
            'PORT': '9000',
            'CORS_ORIGINS': 'https://docs.example.com, http://localhost:3000',
        }
        with patch.dict('os.environ', env, clear=True):
            config = EnvironmentConfigLoader().load()

        assert config.server.host == '127.0.0.1'
        assert config.server.port == 9000
        assert config.server.cors_origins == ('https://docs.example.com', 'http://localhost:3000')

    def test_production_logs_at_info(self):
        with patch.dict('os.environ', {'APP_ENV': 'production'}, clear=True):
            config = EnvironmentConfigLoader().load()

        assert config.server.is_production is True
        assert config.logging.level == "INFO"

    def test_explicit_log_level_and_file(self):
        env = {'LOG_LEVEL': 'warning', 'LOG_FILE': '/var/log/docs/api.log'}
        with patch.dict('os.environ', env, clear=True):
            config = EnvironmentConfigLoader().load()

        assert config.logging.level == "WARNING"
        assert config.logging.file == Path('/var/log/docs/api.log')

    def test_invalid_port_raises(self):
        with patch.dict('os.environ', {'PORT': 'eighty'}, clear=True):
            with pytest.raises(ValueError):
                EnvironmentConfigLoader().load()
