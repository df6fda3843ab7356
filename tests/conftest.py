"""
Pytest configuration and shared fixtures

Common fixtures used across multiple test files are defined here.
Per Kent Beck TDD: Good fixtures reduce test setup duplication.
"""
import sys
from pathlib import Path

import pytest

# Add api directory to path for imports
# Detect if running in Docker (./api:/app mount) vs host (./api exists)
api_path = Path(__file__).parent.parent / "api"
if not api_path.exists():
    # Running in Docker where api contents are at /app directly
    api_path = Path(__file__).parent.parent
sys.path.insert(0, str(api_path))


def write(path: Path, text: str) -> Path:
    """Write text to path, creating parent directories"""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


# =============================================================================
# Content Tree Fixtures
# =============================================================================

@pytest.fixture
def content_dir(tmp_path):
    """Small documentation tree shared by operation and route tests.

    Layout:
        intro.md            order 1, tags python/api
        guide/_meta.yml     order 2, title "User Guide"
        guide/setup.md      order 1, tags python/install
        guide/advanced.md   order 2, tags api/python
        reference/cli.md    tags cli
        notes.md            no front matter
        page.html
        .hidden.md, image.png, node_modules/pkg.md (never listed)
    """
    root = tmp_path / "content"
    write(root / "intro.md",
          "---\ntitle: Introduction\norder: 1\ntags: [python, api]\n---\n# Welcome\n\nHello.\n")
    write(root / "guide" / "_meta.yml", "title: User Guide\norder: 2\n")
    write(root / "guide" / "setup.md",
          "---\ntitle: Setup\norder: 1\ntags: [python, install]\n---\n# Setup\n")
    write(root / "guide" / "advanced.md",
          "---\ntitle: Advanced Usage\norder: 2\ntags: [api, python]\n---\n# Advanced\n")
    write(root / "reference" / "cli.md", "---\ntags: cli\n---\n# CLI\n")
    write(root / "notes.md", "# Notes\n\nNo front matter here.\n")
    write(root / "page.html", "<p>static page</p>\n")
    write(root / ".hidden.md", "---\ntags: [python]\n---\n")
    write(root / "image.png", "not really a png")
    write(root / "node_modules" / "pkg.md", "---\ntags: [python]\n---\n")
    return root


@pytest.fixture
def config(content_dir):
    """Default configuration pointed at the content_dir fixture"""
    from config import Config, PathConfig
    return Config(paths=PathConfig(content_dir=content_dir))


@pytest.fixture
def app_state(config):
    """Fully wired AppState"""
    from app_state import AppState
    from startup.manager import StartupManager
    return StartupManager(AppState(config)).build()


@pytest.fixture
def app(config):
    """Application built around the content_dir fixture"""
    from main import create_app
    return create_app(config)


@pytest.fixture
def client(app):
    """Test client with lifespan (startup validation) running"""
    from fastapi.testclient import TestClient
    with TestClient(app) as test_client:
        yield test_client
