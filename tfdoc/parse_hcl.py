"""Logic for parsing a single Terraform file into documentation items."""

import logging
from pathlib import Path
from typing import Any

from tfdoc.block_accumulator import BlockAccumulator
from tfdoc.doc_item import DocItem
from tfdoc.errors import MalformedHeaderError, SourceDecodeError
from tfdoc.filter_title_items import filter_title_items
from tfdoc.load_config import DEFAULT_CONFIG

logger = logging.getLogger(__name__)


def parse_hcl(path: Path, config: dict[str, Any] | None = None) -> list[DocItem]:
    """Read a file and return its finished documentation items.

    OSError propagates unchanged and invalid UTF-8 raises SourceDecodeError.
    A malformed header is re-raised with the file path and line number attached.
    """
    parser_cfg = (config or DEFAULT_CONFIG)["parser"]
    accumulator = BlockAccumulator(parser_cfg["comment_prefixes"])

    with path.open(encoding="utf-8") as f:
        try:
            for lineno, raw in enumerate(f, start=1):
                line = raw.rstrip("\r\n")
                try:
                    accumulator.feed(line)
                except MalformedHeaderError as exc:
                    raise MalformedHeaderError(exc.line, path, lineno) from exc
        except UnicodeDecodeError as exc:
            raise SourceDecodeError(path, exc.reason) from exc

    items = accumulator.finish()
    if parser_cfg["title_filter"]:
        items = filter_title_items(items, parser_cfg["title_marker"])

    logger.debug("Parsed %s: %d items", path, len(items))
    return items
