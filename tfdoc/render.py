"""Logic for rendering documentation items as Markdown."""

from collections.abc import Sequence
from pathlib import Path

from tfdoc.block_type import BlockType
from tfdoc.doc_item import DocItem
from tfdoc.filter_title_items import TITLE_MARKER
from tfdoc.md_table import md_table

# (category, list heading, table column label)
SECTIONS = (
    (BlockType.RESOURCE, "Resources", "Resource"),
    (BlockType.VARIABLE, "Inputs", "Input"),
    (BlockType.OUTPUT, "Outputs", "Output"),
)


def render(
    items: Sequence[DocItem],
    *,
    as_table: bool = False,
    omit_empty_resources: bool = False,
    title_marker: str = TITLE_MARKER,
) -> str:
    """Render items as a Markdown document: title blocks, then one section per kind.

    Every comment item becomes an H1, so without the title filter a document
    can carry several H1 headings.
    """
    parts: list[str] = []
    for item in items:
        if item.category is BlockType.COMMENT and item.description:
            parts.extend(_title_block(item.description, title_marker))

    for category, heading, label in SECTIONS:
        entries = [i for i in items if i.category is category]
        if category is BlockType.RESOURCE and omit_empty_resources:
            entries = [i for i in entries if i.description]
        if not entries:
            continue
        parts += [f"## {heading}", ""]
        if as_table:
            rows = [[f"`{i.name}`", " ".join(i.description)] for i in entries]
            parts.append(md_table([label, "Description"], rows))
        else:
            parts.extend(_list_entry(i) for i in entries)
        parts.append("")

    if not parts:
        return ""
    return "\n".join(parts).rstrip() + "\n"


def render_files(paths: Sequence[Path], *, as_table: bool = False) -> str:
    """Render the names of the scanned files as a Markdown section."""
    if not paths:
        return ""
    names = [p.name for p in paths]
    parts = ["## Files", ""]
    if as_table:
        parts.append(md_table(["File"], [[f"`{n}`"] for n in names]))
    else:
        parts.extend(f"* `{n}`" for n in names)
    return "\n".join(parts) + "\n"


def _title_block(description: list[str], marker: str) -> list[str]:
    title = description[0]
    if title.startswith(marker):
        title = title[len(marker) :]
    lines = [f"# {title}", ""]
    if len(description) > 1:
        lines += [*description[1:], ""]
    return lines


def _list_entry(item: DocItem) -> str:
    if item.description:
        return f"* {item}"
    return f"* `{item.name}`"
