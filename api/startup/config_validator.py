"""
Configuration validator for startup checks.

Validates configuration settings early to provide clear error messages
before the application attempts to serve from an invalid content directory.
"""
import os
from typing import List


class ConfigValidationError(Exception):
    """Configuration validation failed"""
    pass


class ConfigValidator:
    """Validates configuration settings on startup"""

    def __init__(self, config):
        self.config = config
        self.errors: List[str] = []

    def validate(self) -> None:
        """Validate all configuration settings

        Raises:
            ConfigValidationError: If validation fails
        """
        self._validate_content_dir()
        self._validate_extensions()
        self._validate_cache()

        if self.errors:
            error_msg = "Configuration validation failed:\n" + "\n".join(
                f"  - {error}" for error in self.errors
            )
            raise ConfigValidationError(error_msg)

    def _validate_content_dir(self) -> None:
        """Validate content directory path"""
        content_dir = self.config.paths.content_dir

        if not content_dir.exists():
            self.errors.append(
                f"Content directory does not exist: {content_dir}\n"
                f"    Create it with: mkdir -p {content_dir}\n"
                f"    Or pass --content-dir / set CONTENT_DIR"
            )
            return

        if not content_dir.is_dir():
            self.errors.append(
                f"Content path is not a directory: {content_dir}\n"
                f"    Update CONTENT_DIR to point to a directory"
            )
            return

        if not os.access(content_dir, os.R_OK | os.X_OK):
            self.errors.append(
                f"Content directory is not readable: {content_dir}\n"
                f"    Fix with: chmod +rx {content_dir}"
            )

    def _validate_extensions(self) -> None:
        """The default document extension must be listable"""
        content = self.config.content
        if content.default_document_extension not in content.extensions:
            self.errors.append(
                f"Default document extension {content.default_document_extension} "
                f"is not in CONTENT_EXTENSIONS ({', '.join(content.extensions)})"
            )

    def _validate_cache(self) -> None:
        cache = self.config.cache
        if cache.ttl_seconds < 0:
            self.errors.append(f"RELATED_CACHE_TTL_SECONDS must not be negative: {cache.ttl_seconds}")
        if cache.sweep_threshold < 0:
            self.errors.append(
                f"RELATED_CACHE_SWEEP_THRESHOLD must not be negative: {cache.sweep_threshold}"
            )
