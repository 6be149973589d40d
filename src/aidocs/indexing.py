"""Split markdown files into nodes and persist them in a Chroma collection."""

from __future__ import annotations

import asyncio
import hashlib
import logging
import re
from pathlib import Path
from typing import Any, Iterable

import chromadb
from markdown_it import MarkdownIt

from aidocs.config import AIDOCS_CHROMA_HOST, AIDOCS_CHROMA_PORT
from aidocs.exceptions import IndexingError
from aidocs.schemas import MarkdownNode

logger = logging.getLogger(__name__)

_NEWLINE_RE = re.compile(r"\r\n?")
_MARKDOWN = MarkdownIt("commonmark")

UPSERT_BATCH_SIZE = 100


def split_markdown_nodes(text: str, metadata: dict[str, str] | None = None) -> list[MarkdownNode]:
    """Split a markdown document at every top-level heading.

    Headings are located with a CommonMark parser, so ``#`` lines inside
    fenced or indented code blocks never start a node, whatever the fence
    style or length. Each node carries the heading path leading to it in
    ``header_path`` (``"/"``-joined), plus any metadata passed in.

    Args:
        text: Markdown document.
        metadata: Metadata copied onto every node.

    Returns:
        Non-empty nodes in document order.
    """
    base_metadata = dict(metadata or {})
    source = base_metadata.get("original_file", "")
    lines = _NEWLINE_RE.sub("\n", text).split("\n")

    # (first line, level, title) of each heading in the document's top level.
    headings: list[tuple[int, int, str]] = []
    tokens = _MARKDOWN.parse("\n".join(lines))
    for index, token in enumerate(tokens):
        if token.type == "heading_open" and token.level == 0 and token.map:
            headings.append((token.map[0], int(token.tag[1:]), tokens[index + 1].content))

    nodes: list[MarkdownNode] = []
    path: list[tuple[int, str]] = []
    boundaries = [0] + [start for start, _, _ in headings] + [len(lines)]

    for position, (start, end) in enumerate(zip(boundaries, boundaries[1:])):
        if position > 0:
            _, level, title = headings[position - 1]
            path = [(lvl, name) for lvl, name in path if lvl < level]
            path.append((level, title))
        chunk = "\n".join(lines[start:end]).strip()
        if not chunk:
            continue
        node_metadata = {**base_metadata, "header_path": "/".join(name for _, name in path)}
        digest = hashlib.sha1(f"{source}\0{len(nodes)}\0{chunk}".encode("utf-8")).hexdigest()
        nodes.append(MarkdownNode(id=digest, text=chunk, metadata=node_metadata))
    return nodes


def load_markdown_nodes(files: Iterable[Path]) -> list[MarkdownNode]:
    """Read and split each file, skipping files that fail.

    Args:
        files: Markdown files to load.

    Returns:
        All nodes, tagged with the originating file name.
    """
    nodes: list[MarkdownNode] = []
    for file_path in files:
        file_path = Path(file_path)
        try:
            text = file_path.read_text(encoding="utf-8")
            nodes.extend(split_markdown_nodes(text, {"original_file": file_path.name}))
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Error processing file %s: %s", file_path, exc)
    return nodes


def get_chroma_client(host: str = AIDOCS_CHROMA_HOST, port: int = AIDOCS_CHROMA_PORT) -> Any:
    """Connect to the Chroma server."""
    logger.debug("Connecting to Chroma at %s:%s", host, port)
    return chromadb.HttpClient(host=host, port=port)


async def create_collection_from_markdown_files(
    collection_name: str,
    files: Iterable[Path],
    *,
    client: Any | None = None,
    embedding_function: Any | None = None,
) -> int:
    """Embed markdown files into the named Chroma collection.

    Files that cannot be read are logged and skipped; the rest are still
    indexed. Embeddings are computed by Chroma with its default model
    (all-MiniLM-L6-v2) unless ``embedding_function`` is given.

    Args:
        collection_name: Collection to create or update.
        files: Markdown files to index.
        client: Optional Chroma client. Defaults to an HTTP client for the
            configured host and port.
        embedding_function: Optional Chroma embedding function.

    Returns:
        Number of nodes written.

    Raises:
        IndexingError: If the vector store rejects the collection or nodes.
    """
    nodes = load_markdown_nodes(files)
    logger.info("Loaded %d nodes for collection %s", len(nodes), collection_name)

    try:
        if client is None:
            client = await asyncio.to_thread(get_chroma_client)
        collection_kwargs: dict[str, Any] = {"name": collection_name}
        if embedding_function is not None:
            collection_kwargs["embedding_function"] = embedding_function
        collection = await asyncio.to_thread(
            client.get_or_create_collection, **collection_kwargs
        )

        for start in range(0, len(nodes), UPSERT_BATCH_SIZE):
            batch = nodes[start : start + UPSERT_BATCH_SIZE]
            await asyncio.to_thread(
                collection.upsert,
                ids=[node.id for node in batch],
                documents=[node.text for node in batch],
                metadatas=[node.metadata for node in batch],
            )
    except Exception as exc:
        logger.error("Failed to index collection %s: %s", collection_name, exc)
        raise IndexingError(f"Failed to index collection {collection_name}: {exc}") from exc

    logger.info("Indexed %d nodes into collection %s", len(nodes), collection_name)
    return len(nodes)
