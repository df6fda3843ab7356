"""Metadata normalizer - turns raw front matter mappings into DocumentMetadata

Single Responsibility: interpret the recognized keys (title, order, tags).
Parsing the text into a mapping is the job of the parsers.
"""
from typing import Any, Dict, List, Optional, Tuple

from errors import MetadataParseError
from value_objects import DocumentMetadata


class MetadataNormalizer:
    """Normalize recognized metadata keys

    Invalid values never raise out of normalize(): the field falls back to
    its default and the problem is reported on DocumentMetadata.error.
    """

    def normalize(self, raw: Dict[str, Any]) -> DocumentMetadata:
        """Build DocumentMetadata from a parsed mapping"""
        raw = raw or {}
        problems = []

        order = None
        try:
            order = self.parse_order(raw.get('order'))
        except MetadataParseError as e:
            problems.append(e.message)

        tags = None
        try:
            tags = self.normalize_tags(raw.get('tags'))
        except MetadataParseError as e:
            problems.append(e.message)

        return DocumentMetadata(
            title=self.normalize_title(raw.get('title')),
            order=order,
            tags=tuple(tags) if tags is not None else None,
            raw={str(key): value for key, value in raw.items()},
            error="; ".join(problems) or None,
        )

    @staticmethod
    def normalize_title(value: Any) -> Optional[str]:
        if value is None:
            return None
        title = str(value).strip()
        return title or None

    @staticmethod
    def parse_order(value: Any) -> Optional[int]:
        """Parse an explicit order value

        Accepts ints, integral floats and numeric strings.
        """
        if value is None:
            return None
        if isinstance(value, bool):
            raise MetadataParseError(f"Invalid order value: {value!r}")
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            return MetadataNormalizer._parse_order_string(value)
        raise MetadataParseError(f"Invalid order value: {value!r}")

    @staticmethod
    def _parse_order_string(value: str) -> int:
        text = value.strip().strip('"\'')
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            raise MetadataParseError(f"Invalid order value: {value!r}")
        if not number.is_integer():
            raise MetadataParseError(f"Invalid order value: {value!r}")
        return int(number)

    @staticmethod
    def normalize_tags(value: Any) -> Optional[List[str]]:
        """Normalize tags to a de-duplicated list of strings

        A comma-separated string is split; a single scalar becomes a
        one-element list.
        """
        if value is None:
            return None
        if isinstance(value, str):
            items = value.split(',')
        elif isinstance(value, (list, tuple, set)):
            items = value
        elif isinstance(value, dict):
            raise MetadataParseError("Tags must be a list or a comma-separated string")
        else:
            items = [value]
        return _dedupe(str(item).strip() for item in items if item is not None)


def _dedupe(values) -> List[str]:
    seen = set()
    result = []
    for value in values:
        if value and value not in seen:
            seen.add(value)
            result.append(value)
    return result


def split_key_value_lines(text: str) -> Tuple[Dict[str, Any], int]:
    """Lenient 'key: value' line parser

    Handles the subset of YAML that hand-written front matter usually
    contains, including inline lists ('tags: [a, b]'). Returns the mapping
    and the number of non-blank lines that could not be parsed.
    """
    data = {}
    skipped = 0
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith('#'):
            continue
        if ':' not in stripped:
            skipped += 1
            continue
        key, _, value = stripped.partition(':')
        key = key.strip()
        if not key:
            skipped += 1
            continue
        data[key] = _parse_scalar_or_list(value.strip())
    return data, skipped


def _parse_scalar_or_list(value: str):
    if value.startswith('[') and value.endswith(']'):
        return [_unquote(item.strip()) for item in value[1:-1].split(',') if item.strip()]
    return _unquote(value)


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1]
    return value
