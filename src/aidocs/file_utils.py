"""File-system helpers for discovering and copying markdown files."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


def find_markdown_files(dir_path: Path) -> list[Path]:
    """Recursively collect every markdown file below a directory.

    Traversal is depth-first and the order of the result carries no meaning;
    callers sort before use.

    Args:
        dir_path: Root directory to search.

    Returns:
        Paths of all files whose name ends in ``.md``, at any depth.

    Raises:
        FileNotFoundError: If ``dir_path`` does not exist.
        NotADirectoryError: If ``dir_path`` is not a directory.
    """
    results: list[Path] = []
    for item in Path(dir_path).iterdir():
        if item.is_dir():
            results.extend(find_markdown_files(item))
        elif item.name.endswith(MARKDOWN_SUFFIX):
            results.append(item)
    return results


def copy_single_file(source_path: Path, target_file: str, sections_dir: Path) -> str | None:
    """Copy one markdown file into the sections directory unchanged.

    Args:
        source_path: File to copy.
        target_file: Name to give the copy inside ``sections_dir``.
        sections_dir: Destination directory.

    Returns:
        ``target_file`` when the copy was written, ``None`` when the source
        is missing.
    """
    source_path = Path(source_path)
    if not source_path.is_file():
        logger.warning("Source file not found: %s", source_path)
        return None

    target_path = Path(sections_dir) / target_file
    shutil.copyfile(source_path, target_path)
    logger.info("Copied file: %s", target_path)
    return target_file
