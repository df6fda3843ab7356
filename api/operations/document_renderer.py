"""Document renderer - serves a single content file to the portal

Markdown is converted with the markdown library; headings come from its
toc extension so the frontend can build an in-page outline. Rendering
fidelity is deliberately basic: the frontend restyles the HTML.
"""
import asyncio
import logging
import re
import unicodedata
from pathlib import PurePosixPath
from typing import Dict, List, Sequence

import markdown

from domain_models import title_from_filename
from errors import MetadataParseError, NotFoundError
from metadata import FrontmatterParser
from operations.file_filter import FileFilterPolicy
from operations.path_resolver import PathResolver
from value_objects import ResolvedPath

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = ['fenced_code', 'tables', 'toc']
MAX_HEADING_ID_LENGTH = 50

_FOLDED = {'ß': 'ss', 'æ': 'ae', 'œ': 'oe', 'ø': 'o', 'Æ': 'AE', 'Œ': 'OE', 'Ø': 'O'}


def heading_id(text: str, separator: str = '-') -> str:
    """URL-friendly heading id, matching the ids the portal frontend generates"""
    folded = ''.join(_FOLDED.get(ch, ch) for ch in text)
    folded = unicodedata.normalize('NFKD', folded)
    folded = ''.join(ch for ch in folded if not unicodedata.combining(ch))

    slug = folded.lower()
    slug = re.sub(r'[^\w\s-]', separator, slug, flags=re.ASCII)
    slug = re.sub(r'\s+', separator, slug)
    slug = re.sub(r'-+', separator, slug)
    slug = slug.strip(separator)[:MAX_HEADING_ID_LENGTH].rstrip(separator)
    return slug or 'section'


class DocumentRenderer:
    """Reads one content file and shapes it for the frontend"""

    def __init__(self, resolver: PathResolver, filter_policy: FileFilterPolicy,
                 frontmatter_parser: FrontmatterParser, document_extensions: Sequence[str] = ('.md',)):
        self.resolver = resolver
        self.filter_policy = filter_policy
        self.parser = frontmatter_parser
        self.document_extensions = {ext.lower() for ext in document_extensions}

    async def render(self, content_path: str) -> Dict:
        """Render a document, or return raw content for other allowed files

        Raises:
            InvalidPathError: If the path escapes the content root
            NotFoundError: If there is no visible file at the path
        """
        resolved = await asyncio.to_thread(self.resolver.resolve, content_path)
        return await asyncio.to_thread(self._render, resolved)

    def _render(self, resolved: ResolvedPath) -> Dict:
        name = PurePosixPath(resolved.relative).name
        if not (self.filter_policy.should_include_file(name) and resolved.absolute.is_file()):
            raise NotFoundError("Not Found", details="The requested content was not found")

        content = resolved.absolute.read_text(encoding='utf-8')
        if self.filter_policy.extension_of(name) not in self.document_extensions:
            return {'content': content, 'type': 'file', 'path': resolved.relative}
        return self._render_document(resolved, name, content)

    def _render_document(self, resolved: ResolvedPath, name: str, content: str) -> Dict:
        metadata = self._metadata(resolved, name, content)
        converter = markdown.Markdown(
            extensions=MARKDOWN_EXTENSIONS,
            extension_configs={'toc': {'slugify': heading_id}},
        )
        html = converter.convert(self.parser.remove_frontmatter(content))
        return {
            'html': html,
            'metadata': metadata,
            'headings': self._flatten(converter.toc_tokens),
            'path': resolved.relative,
            'name': PurePosixPath(name).stem,
        }

    def _metadata(self, resolved: ResolvedPath, name: str, content: str) -> Dict:
        """Front matter merged over filename defaults; parse errors keep the defaults"""
        metadata = {'title': title_from_filename(name), 'tags': []}
        try:
            parsed = self.parser.parse(content)
        except MetadataParseError as e:
            logger.warning(f"Frontmatter of {resolved.relative} ignored: {e}")
            return metadata

        metadata.update(parsed.raw)
        metadata['title'] = parsed.title or metadata['title']
        metadata['tags'] = list(parsed.tags or ())
        return metadata

    @classmethod
    def _flatten(cls, tokens: List[Dict]) -> List[Dict]:
        headings = []
        for token in tokens:
            headings.append({'text': token['name'], 'level': token['level'], 'id': token['id']})
            headings.extend(cls._flatten(token.get('children', [])))
        return headings
