"""Related documents routes."""
import logging

from fastapi import APIRouter, Depends, Query

from config import ServerConfig
from errors import InvalidPathError, MissingPathError, NotFoundError
from models import RelatedDocumentModel, RelatedResponse
from operations.relevance_engine import RelevanceEngine
from routes.deps import error_response, get_relevance_engine, get_server_config

logger = logging.getLogger(__name__)

router = APIRouter()

DEFAULT_LIMIT = 5


def parse_limit(raw: str) -> int:
    """Lenient limit parsing: garbage falls back to the default, negatives to 0"""
    try:
        return max(int(raw), 0)
    except (TypeError, ValueError):
        return DEFAULT_LIMIT


@router.get("/api/related", response_model=RelatedResponse)
async def get_related_documents(
    path: str = "",
    limit: str = str(DEFAULT_LIMIT),
    skip_cache: str = Query("false", alias="skipCache"),
    engine: RelevanceEngine = Depends(get_relevance_engine),
    server: ServerConfig = Depends(get_server_config),
):
    """
    Find documents sharing tags with the document at path

    Args:
        path: Document path relative to the content root (extension optional)
        limit: Maximum number of related documents
        skip_cache: 'true' forces a rescan of the content tree

    Returns:
        RelatedResponse ranked by number of shared tags
    """
    try:
        result = await engine.find_related(path, parse_limit(limit), skip_cache == "true")
    except (MissingPathError, InvalidPathError, NotFoundError) as e:
        logger.warning(f"Related documents for '{path}': {e.message}")
        return error_response(e.status_code, {
            'error': e.message,
            'details': e.details,
            'related': []
        }, server)
    except Exception as e:
        logger.exception("Unexpected error in related documents")
        return error_response(500, {
            'error': 'Failed to get related documents',
            'details': str(e),
            'related': []
        }, server, error=e)

    return RelatedResponse(
        related=[RelatedDocumentModel(**doc.to_dict()) for doc in result.related],
        fromCache=result.from_cache
    )
