"""Sidecar metadata reader

Directories carry no front matter, so their ordering and title live in a
small file inside the directory ('_meta.yml' by default). The file may be
YAML or plain 'key: value' lines.
"""
import logging
from pathlib import Path
from typing import Optional, Sequence

import yaml

from errors import MetadataParseError
from metadata.normalizer import MetadataNormalizer, split_key_value_lines
from value_objects import DocumentMetadata

logger = logging.getLogger(__name__)


class SidecarMetadataReader:
    """Reads per-directory sidecar metadata files"""

    def __init__(self, filenames: Sequence[str], normalizer: MetadataNormalizer = None):
        self.filenames = tuple(filenames)
        self.normalizer = normalizer or MetadataNormalizer()

    def find(self, directory: Path) -> Optional[Path]:
        """Return the first existing sidecar file in directory"""
        for filename in self.filenames:
            candidate = directory / filename
            if candidate.is_file():
                return candidate
        return None

    def read(self, directory: Path) -> DocumentMetadata:
        """Read sidecar metadata for a directory

        Returns empty metadata when the directory has no sidecar file.

        Raises:
            MetadataParseError: If the sidecar exists but is not a mapping
            OSError: If the sidecar cannot be read
        """
        sidecar = self.find(directory)
        if sidecar is None:
            return DocumentMetadata.empty()

        try:
            text = sidecar.read_text(encoding='utf-8')
        except UnicodeDecodeError as e:
            raise MetadataParseError(f"{sidecar.name} is not UTF-8 text", details=str(e))
        return self.normalizer.normalize(self.parse(text, sidecar.name))

    def parse(self, text: str, source: str = 'sidecar'):
        """Parse sidecar text into a mapping"""
        if not text.strip():
            return {}

        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError:
            data = None

        if isinstance(data, dict):
            return data

        logger.debug(f"{source} is not a YAML mapping, using line parser")
        data, skipped = split_key_value_lines(text)
        if not data:
            raise MetadataParseError(f"{source} contains no key: value pairs")
        if skipped:
            logger.debug(f"{source}: ignored {skipped} malformed lines")
        return data
