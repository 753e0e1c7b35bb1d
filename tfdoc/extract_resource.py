"""Extractor for `resource` header names."""

from tfdoc.header_tokens import header_tokens


def extract_resource(line: str) -> str:
    """Return ``type.local_name`` from a ``resource "type" "local_name" {`` line."""
    return ".".join(header_tokens(line, 2))
