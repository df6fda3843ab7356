"""Content routes: single documents and the default document."""
import logging
from pathlib import PurePosixPath

from fastapi import APIRouter, Depends, Response

from config import ServerConfig
from errors import ContentError, InvalidPathError, NotFoundError
from models import FirstDocumentResponse
from operations.content_tree_builder import ContentTreeBuilder
from operations.document_renderer import DocumentRenderer
from operations.first_document_finder import FirstDocumentFinder
from routes.deps import (
    NO_CACHE_HEADERS, error_response, get_first_document_finder, get_renderer,
    get_server_config, get_tree_builder
)
from routes.structure import structure_payload

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/content")
@router.get("/api/content/{content_path:path}")
async def get_content(
    content_path: str = "",
    renderer: DocumentRenderer = Depends(get_renderer),
    builder: ContentTreeBuilder = Depends(get_tree_builder),
    server: ServerConfig = Depends(get_server_config),
):
    """
    Serve a file, or a directory listing when the path has no extension

    Markdown documents come back rendered with their metadata and headings.
    """
    content_path = content_path.strip()
    if not PurePosixPath(content_path).suffix:
        return await structure_payload(builder, content_path, server)

    try:
        return await renderer.render(content_path)
    except InvalidPathError as e:
        logger.warning(f"Security warning: attempted path traversal: {content_path}")
        return error_response(400, {'error': e.message, 'details': e.details}, server)
    except NotFoundError:
        return error_response(404, {
            'error': 'Not Found',
            'message': 'The requested content was not found',
            'path': content_path
        }, server)
    except Exception as e:
        logger.exception(f"Error handling content request for '{content_path}'")
        return error_response(500, {'error': 'Internal Server Error', 'message': str(e)},
                              server, error=e)


@router.get("/api/first-document", response_model=FirstDocumentResponse)
async def get_first_document(
    response: Response,
    directory: str = "",
    finder: FirstDocumentFinder = Depends(get_first_document_finder),
    server: ServerConfig = Depends(get_server_config),
):
    """Find the first document in navigation order"""
    response.headers.update(NO_CACHE_HEADERS)
    try:
        path = await finder.find(directory)
    except ContentError as e:
        logger.warning(f"First document lookup in '{directory}': {e.message}")
        return error_response(e.status_code, {
            'error': e.message,
            'path': None,
            'details': e.details
        }, server)
    except Exception as e:
        logger.exception("Unexpected error finding first document")
        return error_response(500, {
            'error': 'Failed to find first document',
            'details': str(e)
        }, server, error=e)

    return FirstDocumentResponse(path=path, directory=directory or None)
