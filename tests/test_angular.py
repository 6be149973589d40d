"""End-to-end tests for the Angular documentation orchestrator."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from aidocs.angular import (
    ANGULAR_SECTIONS,
    FULL_DOC_NAME,
    TOC_NAME,
    generate_ai_friendly_angular_docs,
)


@pytest.fixture
def docs_root(tmp_path: Path, write_file) -> Path:
    """Minimal Angular docs tree with a few planned sections and a guide."""
    root = tmp_path / "content"
    write_file(root / "cli" / "build.md", "# Build\nng build")
    write_file(root / "cli" / "serve.md", "# Serve\nng serve")
    write_file(root / "ecosystem" / "web-workers.md", "# Web Workers\nworkers")
    write_file(root / "tools" / "libraries" / "creating.md", "# Creating Libraries\nlibs")
    write_file(root / "guide" / "a.md", "# A\ntext")
    write_file(root / "guide" / "sub" / "b.md", "# B\nmore")
    write_file(root / "guide" / "notes.txt", "ignored")
    return root


class TestGenerateAiFriendlyAngularDocs:
    """Tests for generate_ai_friendly_angular_docs function."""

    def test_guide_directory_and_file_sections(self, tmp_path: Path, docs_root: Path) -> None:
        """Guide sub-directories are consolidated, guide pages copied as is."""
        target = tmp_path / "out"

        result = generate_ai_friendly_angular_docs(docs_root, target)

        guide_sub = (target / "sections" / "guide-sub.md").read_text(encoding="utf-8")
        assert guide_sub.startswith("# Guide Sub\n\n")
        assert "(From b.md)\n\n## B\nmore" in guide_sub
        assert (target / "sections" / "a.md").read_text(encoding="utf-8") == "# A\ntext"
        assert "notes.txt" not in result.section_files

    def test_section_list_only_holds_written_files(self, tmp_path: Path, docs_root: Path) -> None:
        """Skipped sections do not appear in the returned section list."""
        result = generate_ai_friendly_angular_docs(docs_root, tmp_path / "out")

        assert result.section_files == (
            "cli.md",
            "web-workers.md",
            "libraries.md",
            "a.md",
            "guide-sub.md",
        )
        assert sorted(p.name for p in result.sections_dir.iterdir()) == sorted(
            result.section_files
        )

    def test_writes_full_doc_and_toc(self, tmp_path: Path, docs_root: Path) -> None:
        target = tmp_path / "out"

        result = generate_ai_friendly_angular_docs(docs_root, target)

        assert result.full_doc_path == target / FULL_DOC_NAME
        assert result.toc_path == target / TOC_NAME
        full_doc = result.full_doc_path.read_text(encoding="utf-8")
        assert re.findall(r"^## (.+)$", full_doc, re.MULTILINE) == [
            "Cli",
            "Web Workers",
            "Libraries",
            "A",
            "Guide Sub",
        ]
        assert "\n### B\n" in full_doc

        toc = result.toc_path.read_text(encoding="utf-8")
        assert "- [Complete Angular Documentation](angular-full.md)" in toc
        assert "- [Guide Sub](sections/guide-sub.md)" in toc
        assert "  - [B](sections/guide-sub.md#b)" in toc

    def test_removes_previous_output(self, tmp_path: Path, docs_root: Path, write_file) -> None:
        """Stale files from an earlier run are deleted."""
        target = tmp_path / "out"
        stale = write_file(target / "sections" / "stale.md", "# Old")

        generate_ai_friendly_angular_docs(docs_root, target)

        assert not stale.exists()

    def test_missing_source_tree_still_produces_layout(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Nothing to process is not an error; empty outputs are written."""
        target = tmp_path / "out"

        result = generate_ai_friendly_angular_docs(tmp_path / "nothing", target)

        assert result.section_files == ()
        assert result.full_doc_path.is_file()
        assert result.toc_path.is_file()
        assert "Guide directory not found" in caplog.text

    def test_plan_order(self) -> None:
        """The fixed plan starts with the CLI and ends with best practices."""
        targets = [entry.target_file for entry in ANGULAR_SECTIONS]
        assert targets[0] == "cli.md"
        assert targets[-1] == "best-practices.md"
        assert len(targets) == len(set(targets))
