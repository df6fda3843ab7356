"""Tests for MetadataNormalizer and the lenient line parser"""
import pytest

from errors import MetadataParseError
from metadata import MetadataNormalizer
from metadata.normalizer import split_key_value_lines


@pytest.fixture
def normalizer():
    return MetadataNormalizer()


class TestParseOrder:

    @pytest.mark.parametrize("value,expected", [
        (3, 3),
        (0, 0),
        (-1, -1),
        (2.0, 2),
        ("7", 7),
        (" 4 ", 4),
        ("'5'", 5),
        ("1.0", 1),
        (None, None),
    ])
    def test_valid_orders(self, value, expected):
        assert MetadataNormalizer.parse_order(value) == expected

    @pytest.mark.parametrize("value", ["first", "1.5", 2.5, True, [1], {"a": 1}])
    def test_invalid_orders(self, value):
        with pytest.raises(MetadataParseError):
            MetadataNormalizer.parse_order(value)


class TestNormalizeTags:

    def test_list_kept_in_order(self):
        assert MetadataNormalizer.normalize_tags(["b", "a"]) == ["b", "a"]

    def test_comma_string_split(self):
        assert MetadataNormalizer.normalize_tags("python, api ,docs") == ["python", "api", "docs"]

    def test_scalar_becomes_single_tag(self):
        assert MetadataNormalizer.normalize_tags(2024) == ["2024"]

    def test_duplicates_and_blanks_removed(self):
        assert MetadataNormalizer.normalize_tags(["a", "", "a", " b ", None]) == ["a", "b"]

    def test_missing_tags(self):
        assert MetadataNormalizer.normalize_tags(None) is None

    def test_mapping_rejected(self):
        with pytest.raises(MetadataParseError):
            MetadataNormalizer.normalize_tags({"a": 1})


class TestNormalize:

    def test_full_mapping(self, normalizer):
        metadata = normalizer.normalize({"title": " Guide ", "order": 2, "tags": ["x"], "extra": 1})

        assert metadata.title == "Guide"
        assert metadata.order == 2
        assert metadata.tags == ("x",)
        assert metadata.raw == {"title": " Guide ", "order": 2, "tags": ["x"], "extra": 1}
        assert metadata.error is None

    def test_empty_mapping(self, normalizer):
        metadata = normalizer.normalize({})

        assert metadata.title is None
        assert metadata.order is None
        assert metadata.tags is None

    def test_blank_title_is_none(self, normalizer):
        assert normalizer.normalize({"title": "   "}).title is None

    def test_keys_become_strings(self, normalizer):
        metadata = normalizer.normalize({2024: "released", "title": "Dated"})

        assert metadata.raw == {"2024": "released", "title": "Dated"}
        assert metadata.title == "Dated"

    def test_all_problems_collected(self, normalizer):
        metadata = normalizer.normalize({"order": "soon", "tags": {"a": 1}, "title": "Kept"})

        assert metadata.title == "Kept"
        assert metadata.order is None
        assert metadata.tags is None
        assert "order" in metadata.error
        assert "Tags" in metadata.error


class TestSplitKeyValueLines:

    def test_simple_pairs(self):
        data, skipped = split_key_value_lines("title: Hello\norder: 3\n")

        assert data == {"title": "Hello", "order": "3"}
        assert skipped == 0

    def test_inline_list_and_quotes(self):
        data, _ = split_key_value_lines("tags: [a, 'b', \"c\"]\ntitle: \"Quoted: yes\"")

        assert data["tags"] == ["a", "b", "c"]
        assert data["title"] == "Quoted: yes"

    def test_comments_and_blank_lines_ignored(self):
        data, skipped = split_key_value_lines("# comment\n\ntitle: T\n")

        assert data == {"title": "T"}
        assert skipped == 0

    def test_malformed_lines_counted(self):
        data, skipped = split_key_value_lines("just words\n: no key\ntitle: T")

        assert data == {"title": "T"}
        assert skipped == 2
