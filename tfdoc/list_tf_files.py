"""Logic for discovering Terraform files in a directory."""

from collections.abc import Iterable
from pathlib import Path

TF_EXTENSIONS = (".tf",)


def list_tf_files(path: Path, extensions: Iterable[str] = TF_EXTENSIONS) -> list[Path]:
    """List files directly under ``path`` with a matching extension, sorted by name.

    Raises OSError when ``path`` cannot be listed.
    """
    suffixes = set(extensions)
    return sorted(
        (p for p in path.iterdir() if not p.is_dir() and p.suffix in suffixes),
        key=lambda p: p.name,
    )
