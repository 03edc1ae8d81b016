"""Unit tests for alias configuration."""

from pathlib import Path

import pytest

from admin.aliases import AliasStore, split_aliased_url
from common.models.cluster import AliasConfig


class TestSplitAliasedURL:
    def test_alias_only(self):
        assert split_aliased_url("myminio") == ("myminio", "")

    def test_alias_with_path(self):
        assert split_aliased_url("myminio/bucket/prefix") == ("myminio", "bucket/prefix")

    def test_trailing_slash(self):
        assert split_aliased_url("myminio/") == ("myminio", "")


class TestAliasStore:
    """Tests for AliasStore."""

    def test_get(self, config_dir: Path):
        store = AliasStore(config_dir / "config.yaml")

        config = store.get("myminio")

        assert config.url == "http://localhost:9000"
        assert config.api_key == "test-api-key"

    def test_unknown_alias(self, config_dir: Path):
        store = AliasStore(config_dir / "config.yaml")

        with pytest.raises(ValueError, match="No such alias"):
            store.get("other")

    def test_missing_file(self, temp_dir: Path):
        store = AliasStore(temp_dir / "missing.yaml")

        with pytest.raises(ValueError):
            store.get("myminio")

    def test_invalid_alias_entry(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("aliases:\n  broken:\n    access_key: admin\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            AliasStore(path).get("broken")

    def test_set_replaces_alias(self, config_dir: Path):
        store = AliasStore(config_dir / "config.yaml")

        store.set("myminio", AliasConfig(url="https://minio.example.net"))

        assert store.get("myminio").url == "https://minio.example.net"
        assert store.get("myminio").api_key is None
        assert store.get("unregistered").url == "http://localhost:9001"
