"""Tests for the schema cache."""

import json

import pytest

from gql_term.core.cache import SchemaCache
from gql_term.core.errors import SchemaCacheError


@pytest.fixture
def cache(tmp_path):
    return SchemaCache(tmp_path / "home" / "schema.json")


class TestSchemaCache:
    """Tests for SchemaCache load/save."""

    def test_load_missing(self, cache):
        assert cache.load() is None
        assert not cache.exists()

    def test_round_trip(self, cache, schema_document):
        cache.save(schema_document)
        assert cache.load() == schema_document

    def test_save_creates_parent_directory(self, cache, schema_document):
        cache.save(schema_document)
        assert cache.path.parent.is_dir()

    def test_pretty_printed(self, cache):
        cache.save({"data": {"__schema": {"types": []}}})
        text = cache.path.read_text()
        assert text == json.dumps({"data": {"__schema": {"types": []}}}, indent=2) + "\n"

    def test_overwrites_previous(self, cache):
        cache.save({"version": 1})
        cache.save({"version": 2})
        assert cache.load() == {"version": 2}

    def test_no_temp_files_left(self, cache):
        cache.save({"version": 1})
        assert [p.name for p in cache.path.parent.iterdir()] == ["schema.json"]

    def test_corrupt_file_is_an_error(self, cache):
        cache.path.parent.mkdir(parents=True)
        cache.path.write_text("{not json")
        with pytest.raises(SchemaCacheError, match="not valid JSON"):
            cache.load()

    def test_non_object_is_an_error(self, cache):
        cache.path.parent.mkdir(parents=True)
        cache.path.write_text("[1, 2]")
        with pytest.raises(SchemaCacheError):
            cache.load()

    def test_undecodable_file_is_an_error(self, cache):
        cache.path.parent.mkdir(parents=True)
        cache.path.write_bytes(b"\xff\xfe{}")
        with pytest.raises(SchemaCacheError, match="--refresh-schema"):
            cache.load()

    def test_unwritable_path_is_an_error(self, cache):
        cache.path.mkdir(parents=True)
        with pytest.raises(SchemaCacheError, match="cannot write cached schema"):
            cache.save({"version": 1})
        assert [p.name for p in cache.path.parent.iterdir()] == ["schema.json"]
