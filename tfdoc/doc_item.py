"""Data model for a single documentation fragment."""

from dataclasses import dataclass, field

from tfdoc.block_type import BlockType


@dataclass
class DocItem:
    """Represents a documented entity (comment, resource, variable, output)."""

    category: BlockType = BlockType.NONE
    name: str = ""
    description: list[str] = field(default_factory=list)  # comments or descriptions

    def __str__(self) -> str:
        """Format the item as it appears in a Markdown list entry."""
        if self.name:
            return f"`{self.name}`: {' '.join(self.description)}"
        return " ".join(self.description)
