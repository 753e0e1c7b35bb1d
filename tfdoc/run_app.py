"""Orchestration logic for scanning a directory and rendering its documentation."""

import argparse
import logging
from pathlib import Path
from typing import Any

from tfdoc.doc_item import DocItem
from tfdoc.list_tf_files import list_tf_files
from tfdoc.load_config import CONFIG_FILENAME, load_config
from tfdoc.parse_hcl import parse_hcl
from tfdoc.render import render, render_files

logger = logging.getLogger(__name__)


def run_app(args: argparse.Namespace) -> int:
    """Execute the full scan and print the resulting Markdown."""
    print(build_document(args.path, _init_config(args)), end="")
    return 0


def build_document(path: Path, config: dict[str, Any]) -> str:
    """Scan ``path`` and return the complete Markdown document.

    Nothing is returned if any file fails, so callers never emit partial output.
    """
    tf_files = list_tf_files(path, config["extensions"])
    if not tf_files:
        logger.warning(
            "No %s files found under: %s", "/".join(config["extensions"]), path
        )

    items: list[DocItem] = []
    for tf_file in tf_files:
        items.extend(parse_hcl(tf_file, config))
    logger.debug("Collected %d items from %d files", len(items), len(tf_files))

    render_cfg = config["render"]
    sections = [
        render(
            items,
            as_table=render_cfg["table"],
            omit_empty_resources=render_cfg["omit_empty_resources"],
            title_marker=config["parser"]["title_marker"],
        )
    ]
    if render_cfg["include_files"]:
        sections.append(render_files(tf_files, as_table=render_cfg["table"]))
    return "\n".join(s for s in sections if s)


def _init_config(args: argparse.Namespace) -> dict[str, Any]:
    """Load configuration and apply command-line overrides."""
    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            logger.warning("Config file not found: %s", config_path)
    else:
        config_path = args.path / CONFIG_FILENAME
    config = load_config(config_path)

    if args.table:
        config["render"]["table"] = True
    if args.no_title_filter:
        config["parser"]["title_filter"] = False
    if args.no_files:
        config["render"]["include_files"] = False
    return config
