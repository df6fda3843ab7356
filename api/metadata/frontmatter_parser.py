"""Frontmatter parser

Single Responsibility: Parse YAML frontmatter from markdown documents.
"""

import logging
import re
from pathlib import Path
from typing import Any, Dict

import yaml

from errors import MetadataParseError
from metadata.normalizer import MetadataNormalizer, split_key_value_lines
from value_objects import DocumentMetadata

logger = logging.getLogger(__name__)


class FrontmatterParser:
    """Parse YAML frontmatter from markdown files

    Handles frontmatter blocks (--- ... ---) at the start of a document.
    PyYAML is tried first; when the block is not valid YAML (common with
    unquoted titles such as 'title: Setup: Linux') the lenient
    'key: value' line parser is used instead.
    """

    def __init__(self, normalizer: MetadataNormalizer = None):
        """Initialize parser with frontmatter regex"""
        self.frontmatter_pattern = re.compile(
            r'\A---[ \t]*\r?\n(.*?)^---[ \t]*\r?$\n?', re.DOTALL | re.MULTILINE
        )
        self.normalizer = normalizer or MetadataNormalizer()

    def extract_frontmatter(self, content: str) -> Dict[str, Any]:
        """Extract the frontmatter mapping from content

        Returns:
            Dict of frontmatter data, empty if no block is present

        Raises:
            MetadataParseError: If the block is not a key/value mapping
        """
        match = self.frontmatter_pattern.match(content.lstrip('\ufeff'))
        if not match:
            return {}

        block = match.group(1)
        try:
            data = yaml.safe_load(block)
        except yaml.YAMLError as e:
            logger.debug(f"Frontmatter is not valid YAML, using line parser: {e}")
            data, _ = split_key_value_lines(block)
            return data

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise MetadataParseError("Frontmatter is not a key/value mapping")
        return data

    def remove_frontmatter(self, content: str) -> str:
        """Remove frontmatter from content"""
        return self.frontmatter_pattern.sub('', content.lstrip('\ufeff'), count=1)

    def parse(self, content: str) -> DocumentMetadata:
        """Extract and normalize frontmatter"""
        return self.normalizer.normalize(self.extract_frontmatter(content))

    def read(self, path: Path) -> DocumentMetadata:
        """Read a document from disk and parse its frontmatter

        Raises:
            MetadataParseError: If the file is not UTF-8 text or the block
                is not a mapping
            OSError: If the file cannot be read
        """
        try:
            content = path.read_text(encoding='utf-8')
        except UnicodeDecodeError as e:
            raise MetadataParseError(f"{path.name} is not UTF-8 text", details=str(e))
        return self.parse(content)
