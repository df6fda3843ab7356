"""Directory structure routes."""
import logging

from fastapi import APIRouter, Depends, Response

from config import ServerConfig
from errors import InvalidPathError, NotDirectoryError, NotFoundError
from models import ContentItemModel, StructureResponse
from operations.content_tree_builder import ContentTreeBuilder
from routes.deps import NO_CACHE_HEADERS, error_response, get_server_config, get_tree_builder

logger = logging.getLogger(__name__)

router = APIRouter()


async def structure_payload(builder: ContentTreeBuilder, dir_path: str, server: ServerConfig):
    """List dir_path, returning the payload or a JSON error response

    Shared with the content route, which serves directories the same way.
    """
    try:
        items = await builder.list(dir_path)
    except InvalidPathError as e:
        logger.warning(f"Security warning: attempted path traversal: {dir_path}")
        return error_response(400, {'error': e.message, 'details': e.details}, server)
    except NotFoundError as e:
        logger.warning(f"Directory not found: {dir_path}")
        return error_response(404, {'error': 'Directory not found', 'path': dir_path,
                                    'details': e.details}, server)
    except NotDirectoryError:
        logger.warning(f"Path is not a directory: {dir_path}")
        return error_response(400, {'error': 'Path is not a directory', 'path': dir_path}, server)
    except Exception as e:
        logger.exception(f"Error handling content structure for '{dir_path}'")
        return error_response(500, {'error': 'Internal Server Error', 'message': str(e)},
                              server, error=e)

    logger.debug(f"Returning {len(items)} items for '{dir_path or '/'}'")
    return StructureResponse(
        path=dir_path or '/',
        items=[ContentItemModel(**item.to_dict()) for item in items],
        count=len(items)
    )


@router.get("/api/structure", response_model=StructureResponse)
@router.get("/api/structure/{dir_path:path}", response_model=StructureResponse)
async def get_structure(
    response: Response,
    dir_path: str = "",
    builder: ContentTreeBuilder = Depends(get_tree_builder),
    server: ServerConfig = Depends(get_server_config),
):
    """
    List a content directory

    Items with an explicit order come first, then the rest alphabetically.
    """
    response.headers.update(NO_CACHE_HEADERS)
    return await structure_payload(builder, dir_path, server)
