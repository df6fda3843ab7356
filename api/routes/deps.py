"""Route dependencies and helpers

Provides clean access to application state without Law of Demeter violations.
Routes declare the services they need with Depends(), so tests can swap
any of them through app.dependency_overrides.
"""
import traceback

from fastapi import Request
from fastapi.responses import JSONResponse

from app_state import AppState
from config import ServerConfig

NO_CACHE_HEADERS = {
    'Cache-Control': 'no-cache, no-store, must-revalidate',
    'Pragma': 'no-cache',
    'Expires': '0',
}


def get_app_state(request: Request) -> AppState:
    """Get AppState from request

    Encapsulates the request.app.state.app_state chain.
    """
    return request.app.state.app_state


def get_tree_builder(request: Request):
    return get_app_state(request).get_tree_builder()


def get_relevance_engine(request: Request):
    return get_app_state(request).get_relevance_engine()


def get_renderer(request: Request):
    return get_app_state(request).get_renderer()


def get_first_document_finder(request: Request):
    return get_app_state(request).get_first_document_finder()


def get_server_config(request: Request) -> ServerConfig:
    return get_app_state(request).config.server


def error_response(status_code: int, body: dict, server: ServerConfig,
                   error: Exception = None, headers: dict = None) -> JSONResponse:
    """JSON error response; stack traces only outside production"""
    if error is not None and status_code >= 500 and not server.is_production:
        body = {
            **body,
            'stack': "".join(traceback.format_exception(type(error), error, error.__traceback__)),
        }
    return JSONResponse(status_code=status_code, content=body, headers=headers)
