"""Single-slot state machine turning classified lines into documentation items."""

from collections.abc import Callable, Iterable, Sequence

from tfdoc.block_type import BlockType
from tfdoc.directive import Directive
from tfdoc.doc_item import DocItem
from tfdoc.extract_identifier import extract_identifier
from tfdoc.extract_quoted_value import extract_quoted_value
from tfdoc.extract_resource import extract_resource
from tfdoc.get_line_variant import COMMENT_PREFIXES, get_line_variant
from tfdoc.strip_comment_marker import strip_comment_marker

HEADER_EXTRACTORS: dict[BlockType, Callable[[str], str]] = {
    BlockType.RESOURCE: extract_resource,
    BlockType.VARIABLE: extract_identifier,
    BlockType.OUTPUT: extract_identifier,
}

BLOCK_CLOSE = "}"
DESCRIPTION_KEYWORD = "description"


class BlockAccumulator:
    """Accumulates lines into one in-progress DocItem and collects finished ones.

    Comment runs close on the first blank line; resource, variable and output
    blocks close on a line starting with ``}`` or immediately when the header
    itself ends with ``}``.
    """

    def __init__(self, comment_prefixes: Sequence[str] = COMMENT_PREFIXES) -> None:
        """Start with an empty in-progress item and no finished items."""
        self.comment_prefixes = tuple(comment_prefixes)
        self.current = DocItem()
        self.items: list[DocItem] = []

    def feed(self, line: str) -> Directive:
        """Process one line and finalize the current item on Stop."""
        directive = self._parse_line(line)
        if directive is Directive.STOP:
            self.items.append(self.current)
            self.current = DocItem()
        return directive

    def feed_all(self, lines: Iterable[str]) -> list[DocItem]:
        """Feed every line and return the finished items."""
        for line in lines:
            self.feed(line)
        return self.finish()

    def finish(self) -> list[DocItem]:
        """Return the finished items, discarding the unterminated trailing item."""
        self.current = DocItem()
        return list(self.items)

    def _parse_line(self, line: str) -> Directive:
        category = get_line_variant(line, self.comment_prefixes)
        if category in HEADER_EXTRACTORS:
            return self._parse_header(line, category)
        if category is BlockType.COMMENT:
            self._parse_comment(line)
            return Directive.CONTINUE
        return self._parse_body(line)

    def _parse_header(self, line: str, category: BlockType) -> Directive:
        self.current.category = category
        self.current.name = HEADER_EXTRACTORS[category](line)
        if line.strip().endswith(BLOCK_CLOSE):
            return Directive.STOP
        return Directive.CONTINUE

    def _parse_comment(self, line: str) -> None:
        text = strip_comment_marker(line, self.comment_prefixes)
        if text:
            self.current.category = BlockType.COMMENT
            self.current.description.append(text)

    def _parse_body(self, line: str) -> Directive:
        item = self.current
        if line.startswith(BLOCK_CLOSE) and item.category is not BlockType.NONE:
            return Directive.STOP
        if not line.strip() and item.category is BlockType.COMMENT:
            return Directive.STOP
        if item.category in (
            BlockType.VARIABLE,
            BlockType.OUTPUT,
        ) and line.strip().startswith(DESCRIPTION_KEYWORD):
            value = extract_quoted_value(line)
            if value is not None:
                item.description.append(value)
        return Directive.CONTINUE
