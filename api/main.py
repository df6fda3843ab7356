import argparse
import dataclasses
import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app_state import AppState
from config import Config, PathConfig, default_config
from logging_config import configure_logging
from startup.config_validator import ConfigValidationError, ConfigValidator
from startup.manager import StartupManager
from routes.health import router as health_router
from routes.structure import router as structure_router
from routes.content import router as content_router
from routes.related import router as related_router

logger = logging.getLogger(__name__)


def create_app(config: Optional[Config] = None) -> FastAPI:
    """Build the FastAPI application around a fully wired AppState"""
    config = config or default_config
    manager = StartupManager(AppState(config))
    state = manager.build()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan"""
        await manager.initialize()
        yield
        await manager.shutdown()

    app = FastAPI(
        title="Documentation Portal Content API",
        description="Read-only access to a tree of markdown documentation",
        version="1.0.0",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.server.cors_origins),
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    # Store state in app for route access
    app.state.app_state = state

    app.include_router(health_router)
    app.include_router(structure_router)
    app.include_router(content_router)
    app.include_router(related_router)
    return app


app = create_app()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Documentation portal content API")
    parser.add_argument("--content-dir", help="Content directory (overrides CONTENT_DIR)")
    parser.add_argument("--port", type=int, help="Port to listen on (overrides PORT)")
    parser.add_argument("--host", help="Interface to bind (overrides HOST)")
    parser.add_argument("--log-level", help="Log level (overrides LOG_LEVEL)")
    return parser.parse_args(argv)


def apply_args(config: Config, args: argparse.Namespace) -> Config:
    """Command line flags take precedence over the environment"""
    paths, server, log = config.paths, config.server, config.logging
    if args.content_dir:
        paths = dataclasses.replace(paths, content_dir=Path(PathConfig.from_cygwin(args.content_dir)))
    if args.port is not None:
        server = dataclasses.replace(server, port=args.port)
    if args.host:
        server = dataclasses.replace(server, host=args.host)
    if args.log_level:
        log = dataclasses.replace(log, level=args.log_level.upper())
    return dataclasses.replace(config, paths=paths, server=server, logging=log)


def main(argv: Optional[List[str]] = None) -> int:
    import uvicorn

    config = apply_args(Config.from_env(), parse_args(argv))
    configure_logging(config.logging)

    try:
        ConfigValidator(config).validate()
    except ConfigValidationError as e:
        logger.error(str(e))
        return 1

    logger.info(f"Starting content API on {config.server.host}:{config.server.port}")
    uvicorn.run(create_app(config), host=config.server.host, port=config.server.port,
                log_config=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
