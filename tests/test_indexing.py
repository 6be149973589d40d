"""Tests for markdown node splitting and collection creation."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from aidocs.exceptions import IndexingError
from aidocs.indexing import (
    create_collection_from_markdown_files,
    load_markdown_nodes,
    split_markdown_nodes,
)


class TestSplitMarkdownNodes:
    """Tests for split_markdown_nodes function."""

    def test_splits_at_headings(self) -> None:
        text = "# Title\nintro\n## Part\nbody\n### Sub\ndetail\n## Other\nmore"

        nodes = split_markdown_nodes(text, {"original_file": "doc.md"})

        assert [node.text.splitlines()[0] for node in nodes] == [
            "# Title",
            "## Part",
            "### Sub",
            "## Other",
        ]
        assert [node.metadata["header_path"] for node in nodes] == [
            "Title",
            "Title/Part",
            "Title/Part/Sub",
            "Title/Other",
        ]
        assert all(node.metadata["original_file"] == "doc.md" for node in nodes)

    def test_ignores_headings_in_code_fences(self) -> None:
        text = "# Title\n```bash\n# not a heading\n```\nafter"

        nodes = split_markdown_nodes(text)

        assert len(nodes) == 1
        assert "# not a heading" in nodes[0].text

    def test_tilde_line_inside_backtick_fence(self) -> None:
        """A '~~~' line does not close a backtick fence."""
        text = "# Title\n```\n~~~\n# inside code\n```\nafter"

        nodes = split_markdown_nodes(text)

        assert len(nodes) == 1
        assert nodes[0].metadata["header_path"] == "Title"
        assert "# inside code" in nodes[0].text

    def test_shorter_fence_inside_longer_fence(self) -> None:
        """A ``` line does not close a ```` fence."""
        text = "# Title\n````md\n```ts\n# inside code\n```\n````\nafter"

        nodes = split_markdown_nodes(text)

        assert len(nodes) == 1
        assert nodes[0].text.endswith("after")

    def test_tilde_fence(self) -> None:
        """Headings inside '~~~' fences are code, headings after it split."""
        text = "# Title\n~~~bash\n# comment\n```\n~~~\n## Next\nbody"

        nodes = split_markdown_nodes(text)

        assert [node.metadata["header_path"] for node in nodes] == ["Title", "Title/Next"]
        assert "# comment" in nodes[0].text

    def test_crlf_input(self) -> None:
        nodes = split_markdown_nodes("# Title\r\nintro\r\n## Part\r\nbody\r\n")

        assert [node.metadata["header_path"] for node in nodes] == ["Title", "Title/Part"]
        assert all("\r" not in node.text for node in nodes)

    def test_keeps_preamble_and_drops_blank_chunks(self) -> None:
        nodes = split_markdown_nodes("preamble\n\n# A\n\n# B\ntext")

        assert [node.text for node in nodes] == ["preamble", "# A", "# B\ntext"]
        assert nodes[0].metadata["header_path"] == ""

    def test_ids_are_unique_and_stable(self) -> None:
        text = "# A\nsame\n# A\nsame"

        first = split_markdown_nodes(text, {"original_file": "x.md"})
        second = split_markdown_nodes(text, {"original_file": "x.md"})

        assert len({node.id for node in first}) == 2
        assert [node.id for node in first] == [node.id for node in second]


class TestLoadMarkdownNodes:
    """Tests for load_markdown_nodes function."""

    def test_failed_file_does_not_stop_others(
        self, tmp_path: Path, write_file, caplog: pytest.LogCaptureFixture
    ) -> None:
        good = write_file(tmp_path / "good.md", "# Good\ntext")
        broken = tmp_path / "broken.md"
        broken.mkdir()

        nodes = load_markdown_nodes([broken, good])

        assert [node.metadata["original_file"] for node in nodes] == ["good.md"]
        assert "Error processing file" in caplog.text


class TestCreateCollectionFromMarkdownFiles:
    """Tests for create_collection_from_markdown_files function."""

    @pytest.mark.asyncio
    async def test_upserts_nodes_into_collection(self, tmp_path: Path, write_file) -> None:
        files = [
            write_file(tmp_path / "a.md", "# A\none\n## A2\ntwo"),
            write_file(tmp_path / "b.md", "# B\nthree"),
        ]
        client = MagicMock()
        collection = client.get_or_create_collection.return_value

        count = await create_collection_from_markdown_files("angular-19.2.3", files, client=client)

        assert count == 3
        client.get_or_create_collection.assert_called_once_with(name="angular-19.2.3")
        kwargs = collection.upsert.call_args.kwargs
        assert len(kwargs["ids"]) == 3
        assert kwargs["documents"][0].startswith("# A")
        assert kwargs["metadatas"][2]["original_file"] == "b.md"

    @pytest.mark.asyncio
    async def test_passes_embedding_function(self, tmp_path: Path, write_file) -> None:
        files = [write_file(tmp_path / "a.md", "# A")]
        client = MagicMock()
        embedding_function = MagicMock()

        await create_collection_from_markdown_files(
            "docs", files, client=client, embedding_function=embedding_function
        )

        client.get_or_create_collection.assert_called_once_with(
            name="docs", embedding_function=embedding_function
        )

    @pytest.mark.asyncio
    async def test_batches_large_uploads(self, tmp_path: Path, write_file) -> None:
        text = "\n".join(f"# H{i}\nbody" for i in range(250))
        files = [write_file(tmp_path / "big.md", text)]
        client = MagicMock()
        collection = client.get_or_create_collection.return_value

        count = await create_collection_from_markdown_files("docs", files, client=client)

        assert count == 250
        assert collection.upsert.call_count == 3

    @pytest.mark.asyncio
    async def test_default_client_uses_chroma_http(self, tmp_path: Path, write_file) -> None:
        files = [write_file(tmp_path / "a.md", "# A")]

        with patch("aidocs.indexing.chromadb.HttpClient") as mock_http_client:
            await create_collection_from_markdown_files("docs", files)

        mock_http_client.assert_called_once()
        assert "host" in mock_http_client.call_args.kwargs
        assert "port" in mock_http_client.call_args.kwargs

    @pytest.mark.asyncio
    async def test_vector_store_failure_raises(self, tmp_path: Path, write_file) -> None:
        files = [write_file(tmp_path / "a.md", "# A")]
        client = MagicMock()
        client.get_or_create_collection.side_effect = RuntimeError("connection refused")

        with pytest.raises(IndexingError, match="connection refused"):
            await create_collection_from_markdown_files("docs", files, client=client)
