"""Logic for loading, merging and validating configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from tfdoc.deep_merge import deep_merge
from tfdoc.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".tfdoc.yml"

DEFAULT_CONFIG: dict[str, Any] = {
    "parser": {
        "comment_prefixes": ["#", "//"],
        "title_filter": True,
        "title_marker": "Title: ",
    },
    "render": {
        "table": False,
        "omit_empty_resources": False,
        "include_files": True,
    },
    "extensions": [".tf"],
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            try:
                user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except (yaml.YAMLError, UnicodeDecodeError) as exc:
                msg = f"{p}: invalid YAML: {exc}"
                raise ConfigError(msg) from exc
            if not isinstance(user_config, dict):
                msg = f"{p}: configuration must be a mapping"
                raise ConfigError(msg)
            config = deep_merge(config, user_config)
            validate_config(config, p)
            logger.info("Loaded configuration from %s", p)
    return config


def validate_config(config: dict[str, Any], source: Path | None = None) -> None:
    """Check the shape of a merged configuration, raising ConfigError."""
    where = f"{source}: " if source else ""
    for section in ("parser", "render"):
        if not isinstance(config.get(section), dict):
            msg = f"{where}'{section}' must be a mapping"
            raise ConfigError(msg)

    for key, value in (
        ("extensions", config.get("extensions")),
        ("parser.comment_prefixes", config["parser"].get("comment_prefixes")),
    ):
        if not isinstance(value, list) or not all(
            isinstance(v, str) and v for v in value
        ):
            msg = f"{where}'{key}' must be a list of non-empty strings"
            raise ConfigError(msg)

    if not isinstance(config["parser"].get("title_marker"), str):
        msg = f"{where}'parser.title_marker' must be a string"
        raise ConfigError(msg)

    for key, value in (
        ("parser.title_filter", config["parser"].get("title_filter")),
        ("render.table", config["render"].get("table")),
        ("render.omit_empty_resources", config["render"].get("omit_empty_resources")),
        ("render.include_files", config["render"].get("include_files")),
    ):
        if not isinstance(value, bool):
            msg = f"{where}'{key}' must be true or false"
            raise ConfigError(msg)
