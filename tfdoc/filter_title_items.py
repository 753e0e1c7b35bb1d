"""Post-pass that drops incidental comment blocks."""

from tfdoc.block_type import BlockType
from tfdoc.doc_item import DocItem

TITLE_MARKER = "Title: "


def filter_title_items(
    items: list[DocItem], marker: str = TITLE_MARKER
) -> list[DocItem]:
    """Keep non-comment items and comment items whose first line is a title."""
    kept = []
    for item in items:
        if item.category is BlockType.COMMENT and not (
            item.description and item.description[0].startswith(marker)
        ):
            continue
        kept.append(item)
    return kept
