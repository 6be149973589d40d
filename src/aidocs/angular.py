"""Generate AI-friendly documentation from an Angular docs checkout."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from aidocs.consolidate import consolidate_directory
from aidocs.file_utils import MARKDOWN_SUFFIX, copy_single_file
from aidocs.schemas import GenerationResult
from aidocs.single_doc import generate_single_doc_file
from aidocs.toc import generate_table_of_contents

logger = logging.getLogger(__name__)

SECTIONS_DIR_NAME = "sections"
FULL_DOC_NAME = "angular-full.md"
TOC_NAME = "toc.md"
GUIDE_DIR_NAME = "guide"


@dataclass(frozen=True)
class SectionSource:
    """One entry of the fixed section plan.

    Attributes:
        kind: ``"directory"`` to consolidate a tree, ``"file"`` to copy as is.
        source: Path relative to the docs root.
        target_file: Name of the section file to produce.
    """

    kind: Literal["directory", "file"]
    source: str
    target_file: str


ANGULAR_SECTIONS: tuple[SectionSource, ...] = (
    SectionSource("directory", "cli", "cli.md"),
    SectionSource("directory", "ecosystem/rxjs-interop", "rxjs-interop.md"),
    SectionSource("directory", "ecosystem/service-workers", "service-workers.md"),
    SectionSource("file", "ecosystem/custom-build-pipeline.md", "custom-build-pipeline.md"),
    SectionSource("file", "ecosystem/web-workers.md", "web-workers.md"),
    SectionSource("directory", "introduction", "introduction.md"),
    SectionSource("directory", "reference", "reference.md"),
    SectionSource("directory", "tools/cli", "cli-tools.md"),
    SectionSource("directory", "tools/libraries", "libraries.md"),
    SectionSource("file", "tools/devtools.md", "devtools.md"),
    SectionSource("file", "tools/language-service.md", "language-service.md"),
    SectionSource("directory", "best-practices", "best-practices.md"),
)


def generate_ai_friendly_angular_docs(source_dir: Path, target_dir: Path) -> GenerationResult:
    """Rebuild the AI-friendly documentation layout from scratch.

    Any previous output in ``target_dir`` is removed first. Sections are
    produced in the order of ``ANGULAR_SECTIONS`` followed by every entry of
    the ``guide`` directory, then assembled into ``angular-full.md`` and
    indexed in ``toc.md``.

    Args:
        source_dir: Root of the Angular documentation content.
        target_dir: Directory to write the generated documentation into.

    Returns:
        The section list and output paths of this run.
    """
    source_dir = Path(source_dir)
    target_dir = Path(target_dir)
    logger.info("Starting AI-friendly Angular documentation generation...")

    sections_dir = target_dir / SECTIONS_DIR_NAME
    full_doc_path = target_dir / FULL_DOC_NAME
    toc_path = target_dir / TOC_NAME

    if target_dir.exists():
        logger.info("Removing existing target directory: %s", target_dir)
        shutil.rmtree(target_dir)
    sections_dir.mkdir(parents=True)
    logger.info("Created sections directory: %s", sections_dir)

    section_files = _process_planned_sections(source_dir, sections_dir, ANGULAR_SECTIONS)
    section_files += _process_guide(source_dir / GUIDE_DIR_NAME, sections_dir)
    logger.info("Produced %d section files", len(section_files))

    generate_single_doc_file(section_files, sections_dir, full_doc_path)
    generate_table_of_contents(section_files, sections_dir, full_doc_path, toc_path)

    return GenerationResult(
        section_files=section_files,
        sections_dir=sections_dir,
        full_doc_path=full_doc_path,
        toc_path=toc_path,
    )


def _process_planned_sections(
    source_dir: Path, sections_dir: Path, plan: tuple[SectionSource, ...]
) -> tuple[str, ...]:
    produced: list[str] = []
    for entry in plan:
        source_path = source_dir / entry.source
        if entry.kind == "directory":
            written = consolidate_directory(source_path, entry.target_file, sections_dir)
        else:
            written = copy_single_file(source_path, entry.target_file, sections_dir)
        if written:
            produced.append(written)
    return tuple(produced)


def _process_guide(guide_dir: Path, sections_dir: Path) -> tuple[str, ...]:
    """Turn each guide sub-directory into a section and copy loose guide pages."""
    if not guide_dir.is_dir():
        logger.warning("Guide directory not found: %s", guide_dir)
        return ()

    produced: list[str] = []
    for item in sorted(guide_dir.iterdir(), key=lambda p: p.name):
        if item.is_dir():
            written = consolidate_directory(item, f"guide-{item.name}.md", sections_dir)
        elif item.name.endswith(MARKDOWN_SUFFIX):
            written = copy_single_file(item, item.name, sections_dir)
        else:
            continue
        if written:
            produced.append(written)
    return tuple(produced)
