"""Per-line outcome of the block accumulator."""

from enum import Enum


class Directive(Enum):
    """Whether the current block keeps accumulating or is finalized."""

    CONTINUE = "continue"
    STOP = "stop"
