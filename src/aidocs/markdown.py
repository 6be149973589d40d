"""Markdown text transforms: heading shift, titles, slugs and file merging."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable

# Levels 1-5 only; a level-6 heading has nowhere deeper to go.
_HEADING_SHIFT_RE = re.compile(r"^(#{1,5}) ", re.MULTILINE)
# Heading text never includes the \r of a CRLF line ending.
_TITLE_RE = re.compile(r"^# ([^\r\n]+)", re.MULTILINE)
_TITLE_LINE_RE = re.compile(r"^# [^\r\n]+", re.MULTILINE)
_H2_RE = re.compile(r"^## ([^\r\n]+)", re.MULTILINE)
# Word characters are ASCII only; accented letters are dropped from anchors.
_SLUG_STRIP_RE = re.compile(r"[^A-Za-z0-9_\s-]")
_WHITESPACE_RE = re.compile(r"\s+")

FILE_MARKER_PREFIX = "From "
SECTION_DIVIDER = "---"


def shift_headings(text: str) -> str:
    """Nest every heading of levels 1-5 one level deeper."""
    return _HEADING_SHIFT_RE.sub(r"#\1 ", text)


def file_marker(file_name: str) -> str:
    """Return the line that announces which source file follows."""
    return f"({FILE_MARKER_PREFIX}{file_name})"


def is_file_marker(heading_text: str) -> bool:
    """Tell whether a heading is a per-file marker rather than real structure."""
    return heading_text.lstrip("(").startswith(FILE_MARKER_PREFIX)


def extract_title(content: str, file_name: str) -> str:
    """Return the first level-1 heading of ``content``, else the file stem."""
    match = _TITLE_RE.search(content)
    if match:
        return match.group(1)
    return Path(file_name).stem


def strip_title(content: str) -> str:
    """Remove the first level-1 heading line from ``content``."""
    return _TITLE_LINE_RE.sub("", content, count=1)


def level_two_headings(content: str) -> list[str]:
    """Return the text of every level-2 heading, in document order."""
    return _H2_RE.findall(content)


def slugify(text: str) -> str:
    """Derive a URL anchor from heading text.

    >>> slugify("Bar Baz")
    'bar-baz'
    >>> slugify("What's new in v19?")
    'whats-new-in-v19'
    """
    slug = _SLUG_STRIP_RE.sub("", text.lower())
    return _WHITESPACE_RE.sub("-", slug)


def title_from_file_name(file_name: str) -> str:
    """Turn ``rxjs-interop.md`` into ``Rxjs Interop``."""
    stem = Path(file_name).name
    if stem.endswith(".md"):
        stem = stem[: -len(".md")]
    return " ".join(word[:1].upper() + word[1:] for word in stem.split("-"))


def combine_markdown_files(files: Iterable[Path]) -> str:
    """Merge markdown files into a single string.

    Files are sorted by path so the result does not depend on input order.
    Each file's headings are shifted one level deeper, and the file is
    preceded by a ``(From <name>)`` marker line and followed by a divider.

    Args:
        files: Markdown files to merge.

    Returns:
        The merged markdown, trimmed.
    """
    combined = ""
    for path in sorted((Path(f) for f in files), key=str):
        content = shift_headings(path.read_text(encoding="utf-8"))
        combined += f"\n\n{file_marker(path.name)}\n\n"
        combined += content.strip()
        combined += f"\n\n{SECTION_DIVIDER}\n"
    return combined.strip()
