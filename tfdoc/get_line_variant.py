"""Logic for classifying a raw line into a block category."""

from collections.abc import Sequence

from tfdoc.block_type import BlockType

COMMENT_PREFIXES = ("#", "//")

KEYWORD_PREFIXES = (
    ("resource ", BlockType.RESOURCE),
    ("variable ", BlockType.VARIABLE),
    ("output ", BlockType.OUTPUT),
)


def get_line_variant(
    line: str, comment_prefixes: Sequence[str] = COMMENT_PREFIXES
) -> BlockType:
    """Return the block category implied by the prefix of a line.

    Headers must start at column 0; leading whitespace is not trimmed.
    Keywords take precedence over comment markers. Empty comment prefixes
    never match.
    """
    for prefix, category in KEYWORD_PREFIXES:
        if line.startswith(prefix):
            return category
    if any(p and line.startswith(p) for p in comment_prefixes):
        return BlockType.COMMENT
    return BlockType.NONE
