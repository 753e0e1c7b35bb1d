"""Extractor for `variable` and `output` header names."""

from tfdoc.header_tokens import header_tokens


def extract_identifier(line: str) -> str:
    """Return the name from a ``variable "name" {`` or ``output "name" {`` line."""
    return header_tokens(line, 1)[0]
