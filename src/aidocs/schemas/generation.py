"""Documentation generation output model."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class GenerationResult(BaseModel):
    """Files produced by one documentation generation run.

    Attributes:
        section_files: Section file names in processing order. Drives both
            the assembled document and the table of contents.
        sections_dir: Directory holding the section files.
        full_doc_path: Path of the assembled single-file document.
        toc_path: Path of the table of contents.
    """

    model_config = ConfigDict(frozen=True)

    section_files: tuple[str, ...]
    sections_dir: Path
    full_doc_path: Path
    toc_path: Path

