"""Alias configuration lookup."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from common.models.cluster import AliasConfig
from common.utils import load_yaml, save_yaml

logger = logging.getLogger(__name__)

RESERVED_ALIASES = ("drive", "net", "object")


def split_aliased_url(aliased_url: str) -> tuple[str, str]:
    """Split 'alias/bucket/prefix' into the alias and the remaining path."""
    aliased_url = aliased_url.strip().strip("/")
    alias, _, path = aliased_url.partition("/")
    return alias, path


class AliasStore:
    """Aliases kept in a YAML file under an ``aliases`` mapping.

    Example::

        aliases:
          myminio:
            url: https://minio.example.net:9000
            access_key: admin
            secret_key: secret
            api_key: 5f2c...
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        return load_yaml(self.path).get("aliases") or {}

    def get(self, alias: str) -> AliasConfig:
        """Look up an alias. Raises ValueError if unknown or malformed."""
        aliases = self._load()
        if alias not in aliases:
            raise ValueError(f"No such alias `{alias}` in {self.path}")
        try:
            return AliasConfig.model_validate(aliases[alias])
        except ValidationError as e:
            raise ValueError(f"Invalid configuration for alias `{alias}`: {e}") from e

    def set(self, alias: str, config: AliasConfig) -> None:
        """Add or replace an alias."""
        data = load_yaml(self.path) if self.path.exists() else {}
        aliases = data.setdefault("aliases", {}) or {}
        aliases[alias] = config.model_dump(exclude_none=True)
        data["aliases"] = aliases
        save_yaml(self.path, data)
        logger.debug(f"Saved alias {alias} to {self.path}")
