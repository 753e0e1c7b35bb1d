"""Utility for pulling the quoted identifiers out of a block header line."""

from tfdoc.errors import MalformedHeaderError


def header_tokens(line: str, count: int) -> list[str]:
    """Return the ``count`` tokens following the keyword, unquoted.

    Raises MalformedHeaderError when the header is too short or a token is
    empty or is the opening brace.
    """
    tokens = [t.strip('"') for t in line.split()[1 : count + 1]]
    if len(tokens) < count or any(not t or t.startswith("{") for t in tokens):
        raise MalformedHeaderError(line)
    return tokens
