"""Tests for SidecarMetadataReader"""
import pytest

from errors import MetadataParseError
from metadata import SidecarMetadataReader


@pytest.fixture
def reader():
    return SidecarMetadataReader(("_meta.yml", "_meta.yaml", ".meta"))


def test_directory_without_sidecar_is_empty(reader, tmp_path):
    metadata = reader.read(tmp_path)

    assert metadata.order is None
    assert metadata.title is None
    assert metadata.raw == {}


def test_yaml_sidecar(reader, tmp_path):
    (tmp_path / "_meta.yml").write_text("title: API Reference\norder: 3\ntags: [api]\n")

    metadata = reader.read(tmp_path)

    assert metadata.title == "API Reference"
    assert metadata.order == 3
    assert metadata.tags == ("api",)


def test_first_configured_filename_wins(reader, tmp_path):
    (tmp_path / ".meta").write_text("order: 9\n")
    (tmp_path / "_meta.yml").write_text("order: 1\n")

    assert reader.read(tmp_path).order == 1


def test_plain_key_value_sidecar(reader, tmp_path):
    """Invalid YAML is read line by line"""
    (tmp_path / ".meta").write_text("title: Setup: Linux\norder: 2\n")

    metadata = reader.read(tmp_path)

    assert metadata.title == "Setup: Linux"
    assert metadata.order == 2


def test_empty_sidecar(reader, tmp_path):
    (tmp_path / "_meta.yml").write_text("\n")

    assert reader.read(tmp_path).raw == {}


def test_sidecar_without_pairs_raises(reader, tmp_path):
    (tmp_path / "_meta.yml").write_text("- one\n- two\n")

    with pytest.raises(MetadataParseError):
        reader.read(tmp_path)


def test_find_ignores_sidecar_directories(reader, tmp_path):
    (tmp_path / "_meta.yml").mkdir()
    assert reader.find(tmp_path) is None
