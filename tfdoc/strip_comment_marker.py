"""Utility for removing comment markers from a line."""

from collections.abc import Sequence

from tfdoc.get_line_variant import COMMENT_PREFIXES


def strip_comment_marker(
    line: str, comment_prefixes: Sequence[str] = COMMENT_PREFIXES
) -> str:
    """Remove the leading comment marker (repeated, e.g. ``##``) and whitespace.

    Empty prefixes are ignored.
    """
    for prefix in comment_prefixes:
        if prefix and line.startswith(prefix):
            while line.startswith(prefix):
                line = line[len(prefix) :]
            break
    return line.strip()
