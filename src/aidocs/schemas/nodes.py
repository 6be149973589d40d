"""Indexable markdown node model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class MarkdownNode(BaseModel):
    """A chunk of a markdown document ready for embedding."""

    id: str
    text: str
    metadata: dict[str, str] = Field(default_factory=dict)
