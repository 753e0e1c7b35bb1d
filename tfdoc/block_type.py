"""Enumeration of the block categories recognized in Terraform files."""

from enum import Enum


class BlockType(Enum):
    """Kinds of blocks a line can open or belong to."""

    NONE = "none"
    COMMENT = "comment"
    RESOURCE = "resource"
    VARIABLE = "variable"
    OUTPUT = "output"
