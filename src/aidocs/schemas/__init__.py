"""Shared schemas for aidocs."""

from aidocs.schemas.generation import GenerationResult
from aidocs.schemas.github import GitHubRelease
from aidocs.schemas.nodes import MarkdownNode

__all__ = ["GenerationResult", "GitHubRelease", "MarkdownNode"]
