"""Consolidate a directory of markdown files into one titled section file."""

from __future__ import annotations

import logging
from pathlib import Path

from aidocs.file_utils import find_markdown_files
from aidocs.markdown import combine_markdown_files, title_from_file_name

logger = logging.getLogger(__name__)


def consolidate_directory(source_dir: Path, target_file: str, sections_dir: Path) -> str | None:
    """Merge all markdown below ``source_dir`` into ``sections_dir/target_file``.

    The section gets a level-1 title derived from ``target_file``
    (``best-practices.md`` becomes ``# Best Practices``) followed by the
    merged content of every markdown file found, at any depth.

    Args:
        source_dir: Directory to consolidate.
        target_file: Name of the section file to write.
        sections_dir: Directory the section file is written into.

    Returns:
        ``target_file`` when a section was written, ``None`` when the source
        directory is missing or holds no markdown.
    """
    source_dir = Path(source_dir)
    if not source_dir.is_dir():
        logger.warning("Source directory not found: %s", source_dir)
        return None

    files = find_markdown_files(source_dir)
    if not files:
        logger.warning("No markdown files found in directory: %s", source_dir)
        return None

    title = title_from_file_name(target_file)
    content = f"# {title}\n\n" + combine_markdown_files(files)
    target_path = Path(sections_dir) / target_file
    target_path.write_text(content, encoding="utf-8")
    logger.info(
        "Created consolidated file: %s from %d markdown files", target_path, len(files)
    )
    return target_file
