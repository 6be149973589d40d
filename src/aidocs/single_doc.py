"""Assemble section files into one comprehensive markdown document."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from aidocs.markdown import SECTION_DIVIDER, extract_title, shift_headings, strip_title

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Angular Complete Documentation"
DEFAULT_INTRO = (
    "This is a comprehensive collection of Angular documentation consolidated "
    "into a single file for easier reference."
)


def generate_single_doc_file(
    section_files: Sequence[str],
    sections_dir: Path,
    output_path: Path,
    *,
    title: str = DEFAULT_TITLE,
    intro: str = DEFAULT_INTRO,
) -> Path:
    """Concatenate section files, in order, into a single document.

    Each section is introduced by a divider and a level-2 heading holding its
    title. The section's own level-1 title line is dropped and its remaining
    headings are nested one level deeper.

    Args:
        section_files: Section file names in the order they should appear.
        sections_dir: Directory holding the section files.
        output_path: Where to write the assembled document.
        title: Level-1 heading of the document.
        intro: Sentence placed under the title.

    Returns:
        ``output_path``.
    """
    logger.info("Generating single comprehensive documentation file...")
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    content = f"# {title}\n\n{intro}\n\n"

    for section_file in section_files:
        section_path = Path(sections_dir) / section_file
        if not section_path.is_file():
            logger.warning("Section file not found: %s", section_path)
            continue

        logger.debug("Processing %s for inclusion in single doc file", section_file)
        section_content = section_path.read_text(encoding="utf-8")
        section_title = extract_title(section_content, section_file)

        content += f"\n\n{SECTION_DIVIDER}\n\n"
        content += f"## {section_title}\n\n"
        content += shift_headings(strip_title(section_content)).strip()

    output_path.write_text(content, encoding="utf-8")
    logger.info("Created single documentation file: %s", output_path)
    return output_path
