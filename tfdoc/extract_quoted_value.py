"""Extractor for quoted attribute values such as `description`."""


def extract_quoted_value(line: str) -> str | None:
    """Return the text from the first quote to the end, without outer quotes."""
    start = line.find('"')
    if start == -1:
        return None
    return line[start:].strip('"')
