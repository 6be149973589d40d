"""Command-line entry point for aidocs."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Sequence

from aidocs.angular import SECTIONS_DIR_NAME, generate_ai_friendly_angular_docs
from aidocs.config import (
    AIDOCS_ANGULAR_DOCS_SUBDIR,
    AIDOCS_ANGULAR_OWNER,
    AIDOCS_ANGULAR_REPO,
    AIDOCS_CLONE_DEPTH,
    AIDOCS_OUTPUT_PATH,
    AIDOCS_REPOS_PATH,
)
from aidocs.file_utils import find_markdown_files
from aidocs.github import clone_repository, get_latest_any_release, get_latest_stable_release
from aidocs.indexing import create_collection_from_markdown_files
from aidocs.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aidocs",
        description="Generate AI-friendly documentation and vector collections.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    angular = subparsers.add_parser("angular", help="Process the Angular documentation.")
    version_group = angular.add_mutually_exclusive_group()
    version_group.add_argument("--version", help="Angular version (git tag) to process")
    version_group.add_argument(
        "--latest", action="store_true", help="Use the latest stable release (default)"
    )
    version_group.add_argument(
        "--latest-any",
        action="store_true",
        help="Use the latest release, prereleases included",
    )
    angular.add_argument(
        "--output", type=Path, default=AIDOCS_OUTPUT_PATH, help="Output root directory"
    )
    angular.add_argument(
        "--repos", type=Path, default=AIDOCS_REPOS_PATH, help="Directory for repository checkouts"
    )
    angular.add_argument(
        "--collection", help="Vector collection name (default: angular-<version>)"
    )
    angular.add_argument(
        "--skip-index", action="store_true", help="Only generate markdown, do not embed it"
    )
    angular.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


async def resolve_version(args: argparse.Namespace) -> str:
    if args.version:
        logger.info("Using specified Angular version: %s", args.version)
        return args.version
    if args.latest_any:
        logger.info("Fetching latest Angular release (including prereleases)...")
        return await get_latest_any_release(AIDOCS_ANGULAR_OWNER, AIDOCS_ANGULAR_REPO)
    logger.info("Fetching latest stable Angular release...")
    return await get_latest_stable_release(AIDOCS_ANGULAR_OWNER, AIDOCS_ANGULAR_REPO)


async def run_angular(args: argparse.Namespace) -> None:
    """Resolve a version, clone it, generate docs and optionally index them."""
    version = await resolve_version(args)
    logger.info("Processing Angular version: %s", version)

    repo_dir = Path(args.repos) / f"angular-{version}"
    source_dir = repo_dir / AIDOCS_ANGULAR_DOCS_SUBDIR
    target_dir = Path(args.output) / f"angular-{version}"

    await clone_repository(
        AIDOCS_ANGULAR_OWNER,
        AIDOCS_ANGULAR_REPO,
        version,
        repo_dir,
        depth=AIDOCS_CLONE_DEPTH,
    )
    result = generate_ai_friendly_angular_docs(source_dir, target_dir)
    logger.info("AI-friendly Angular documentation generation completed successfully!")

    if args.skip_index:
        return

    collection_name = args.collection or f"angular-{version}"
    files = sorted(find_markdown_files(target_dir / SECTIONS_DIR_NAME))
    count = await create_collection_from_markdown_files(collection_name, files)
    logger.info(
        "Collection %s generated with %d nodes from %d section files",
        collection_name,
        count,
        len(result.section_files),
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)

    try:
        asyncio.run(run_angular(args))
    except Exception:
        logger.exception("Error during AI-friendly Angular documentation generation")
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
