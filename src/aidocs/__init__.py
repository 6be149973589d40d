"""aidocs: turn documentation trees into AI-friendly Markdown."""

from aidocs.angular import generate_ai_friendly_angular_docs
from aidocs.consolidate import consolidate_directory
from aidocs.exceptions import (
    AidocsError,
    CloneError,
    FetchError,
    IndexingError,
    ReleaseNotFoundError,
)
from aidocs.file_utils import copy_single_file, find_markdown_files
from aidocs.markdown import combine_markdown_files
from aidocs.schemas import GenerationResult, GitHubRelease, MarkdownNode
from aidocs.single_doc import generate_single_doc_file
from aidocs.toc import generate_table_of_contents

__all__ = [
    "AidocsError",
    "CloneError",
    "FetchError",
    "GenerationResult",
    "GitHubRelease",
    "IndexingError",
    "MarkdownNode",
    "ReleaseNotFoundError",
    "combine_markdown_files",
    "consolidate_directory",
    "copy_single_file",
    "find_markdown_files",
    "generate_ai_friendly_angular_docs",
    "generate_single_doc_file",
    "generate_table_of_contents",
]
