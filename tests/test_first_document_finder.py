"""Tests for FirstDocumentFinder"""
import pytest

from errors import InvalidPathError, NotFoundError
from startup.component_factory import ComponentFactory


@pytest.fixture
def finder(config):
    factory = ComponentFactory(config)
    resolver = factory.create_resolver()
    builder = factory.create_tree_builder(resolver, factory.create_filter_policy())
    return factory.create_first_document_finder(builder, resolver)


@pytest.mark.asyncio
async def test_first_document_at_root(finder):
    assert await finder.find() == "intro.md"


@pytest.mark.asyncio
async def test_first_document_in_subdirectory(finder):
    """Explicit order inside the directory decides"""
    assert await finder.find("guide") == "guide/setup.md"


@pytest.mark.asyncio
async def test_unordered_directory(finder):
    assert await finder.find("reference") == "reference/cli.md"


@pytest.mark.asyncio
async def test_descends_before_later_siblings(finder, content_dir):
    """A directory ordered first wins over documents after it"""
    (content_dir / "intro.md").unlink()

    assert await finder.find() == "guide/setup.md"


@pytest.mark.asyncio
async def test_html_is_not_a_document(finder, content_dir):
    (content_dir / "static").mkdir()
    (content_dir / "static" / "a.html").write_text("<p>a</p>")

    assert await finder.find("static") is None


@pytest.mark.asyncio
async def test_empty_directory(finder, content_dir):
    (content_dir / "empty").mkdir()

    assert await finder.find("empty") is None


@pytest.mark.asyncio
async def test_missing_directory(finder):
    with pytest.raises(NotFoundError):
        await finder.find("missing")


@pytest.mark.asyncio
async def test_traversal_rejected(finder):
    with pytest.raises(InvalidPathError):
        await finder.find("../..")


@pytest.mark.asyncio
async def test_directory_link_cycle_visited_once(finder, content_dir):
    """A link back to an ancestor does not trap the search"""
    (content_dir / "empty").mkdir()
    (content_dir / "empty" / "_meta.yml").write_text("order: 0\n")
    (content_dir / "empty" / "loop").symlink_to("..")
    (content_dir / "intro.md").unlink()

    assert await finder.find() == "guide/setup.md"


@pytest.mark.asyncio
async def test_cycle_without_documents(finder, content_dir):
    cycle = content_dir / "cycle"
    cycle.mkdir()
    (cycle / "again").symlink_to(cycle)

    assert await finder.find("cycle") is None
