"""Build a table of contents over the generated section files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from aidocs.markdown import extract_title, is_file_marker, level_two_headings, slugify

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Angular Documentation - Table of Contents"
DEFAULT_MAIN_DOC_LABEL = "Complete Angular Documentation"
SECTIONS_HEADING = "Documentation Sections"


def generate_table_of_contents(
    section_files: Sequence[str],
    sections_dir: Path,
    main_doc_path: Path,
    output_path: Path,
    *,
    title: str = DEFAULT_TITLE,
    main_doc_label: str = DEFAULT_MAIN_DOC_LABEL,
) -> Path:
    """Write a nested link list of every section and its level-2 headings.

    Headings are read from the section files themselves, not from the
    assembled document, so anchors point into ``sections/<file>``. File
    marker headings are left out.

    Args:
        section_files: Section file names in the order they should be listed.
        sections_dir: Directory holding the section files.
        main_doc_path: The assembled document; linked by base name.
        output_path: Where to write the table of contents.
        title: Level-1 heading of the table of contents.
        main_doc_label: Link text for the assembled document.

    Returns:
        ``output_path``.
    """
    logger.info("Generating table of contents...")
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    lines = [
        f"# {title}",
        "",
        f"- [{main_doc_label}]({Path(main_doc_path).name})",
        "",
        f"## {SECTIONS_HEADING}",
        "",
    ]

    for section_file in section_files:
        section_path = Path(sections_dir) / section_file
        if not section_path.is_file():
            logger.warning("Section file not found: %s", section_path)
            continue

        section_content = section_path.read_text(encoding="utf-8")
        section_title = extract_title(section_content, section_file)
        lines.append(f"- [{section_title}](sections/{section_file})")

        for heading in level_two_headings(section_content):
            if is_file_marker(heading):
                continue
            lines.append(f"  - [{heading}](sections/{section_file}#{slugify(heading)})")

    output_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    logger.info("Created table of contents file: %s", output_path)
    return output_path
