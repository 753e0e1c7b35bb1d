"""Exceptions raised while scanning Terraform files."""

from pathlib import Path


class TfdocError(Exception):
    """Base class for tfdoc failures."""


class MalformedHeaderError(TfdocError, ValueError):
    """A header line matched a block keyword but lacks the expected identifiers."""

    def __init__(
        self,
        line: str,
        path: Path | None = None,
        lineno: int | None = None,
    ) -> None:
        """Record the offending line and, when known, where it was found."""
        self.line = line
        self.path = path
        self.lineno = lineno
        where = ""
        if path is not None:
            where = f"{path}:{lineno}: " if lineno is not None else f"{path}: "
        super().__init__(f"{where}malformed block header: {line.strip()!r}")


class ConfigError(TfdocError):
    """A configuration file could not be parsed or has the wrong shape."""


class SourceDecodeError(TfdocError):
    """A Terraform file is not valid UTF-8."""

    def __init__(self, path: Path, reason: str) -> None:
        """Record the file that could not be decoded."""
        self.path = path
        super().__init__(f"{path}: not valid UTF-8: {reason}")
