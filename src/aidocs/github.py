"""GitHub collaborators: latest-release lookup and repository checkout."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import httpx
from pydantic import ValidationError

from aidocs.config import AIDOCS_GITHUB_API_URL, AIDOCS_GITHUB_TOKEN
from aidocs.exceptions import CloneError, FetchError, ReleaseNotFoundError
from aidocs.http_utils import fetch_json
from aidocs.schemas import GitHubRelease

logger = logging.getLogger(__name__)

GITHUB_ACCEPT = "application/vnd.github.v3+json"


def _api_headers() -> dict[str, str]:
    headers = {"Accept": GITHUB_ACCEPT}
    if AIDOCS_GITHUB_TOKEN:
        headers["Authorization"] = f"Bearer {AIDOCS_GITHUB_TOKEN}"
    return headers


async def get_latest_release(
    owner: str,
    repo: str,
    *,
    include_prereleases: bool = False,
    client: httpx.AsyncClient | None = None,
) -> str:
    """Look up the tag of the newest release of a GitHub repository.

    Without prereleases the ``/releases/latest`` endpoint is used, which
    already skips drafts and prereleases. With prereleases the release list
    is fetched and the first non-draft entry wins.

    Args:
        owner: Repository owner or organization.
        repo: Repository name.
        include_prereleases: Whether a prerelease may be returned.
        client: Optional httpx.AsyncClient to reuse.

    Returns:
        The release tag name, e.g. ``"20.0.0"``.

    Raises:
        ReleaseNotFoundError: If the repository has no usable release.
        FetchError: If the API request fails.
    """
    if include_prereleases:
        url = f"{AIDOCS_GITHUB_API_URL}/repos/{owner}/{repo}/releases"
    else:
        url = f"{AIDOCS_GITHUB_API_URL}/repos/{owner}/{repo}/releases/latest"

    logger.info("Fetching latest release for %s/%s...", owner, repo)
    try:
        payload = await fetch_json(
            url,
            client=client,
            headers=_api_headers(),
            on_404=ReleaseNotFoundError,
            on_404_message=f"No releases found for {owner}/{repo}",
        )
        release = _select_release(payload, owner, repo, include_prereleases)
    except FetchError as exc:
        logger.error("Failed to fetch latest release for %s/%s: %s", owner, repo, exc)
        raise

    logger.info(
        "Latest release found: %s (prerelease: %s)", release.tag_name, release.prerelease
    )
    return release.tag_name


def _select_release(
    payload: object, owner: str, repo: str, include_prereleases: bool
) -> GitHubRelease:
    try:
        if include_prereleases:
            if not isinstance(payload, list) or not payload:
                raise ReleaseNotFoundError(f"No releases found for {owner}/{repo}")
            releases = [GitHubRelease.model_validate(item) for item in payload]
            for release in releases:
                if not release.draft:
                    return release
            raise ReleaseNotFoundError(f"No non-draft releases found for {owner}/{repo}")
        return GitHubRelease.model_validate(payload)
    except ValidationError as exc:
        raise ReleaseNotFoundError(
            f"Invalid release data received for {owner}/{repo}"
        ) from exc


async def get_latest_stable_release(owner: str, repo: str) -> str:
    """Latest release tag, excluding prereleases and drafts."""
    return await get_latest_release(owner, repo, include_prereleases=False)


async def get_latest_any_release(owner: str, repo: str) -> str:
    """Latest non-draft release tag, prereleases included."""
    return await get_latest_release(owner, repo, include_prereleases=True)


def build_clone_command(
    owner: str, repo: str, version: str | None, target_dir: Path, depth: int | None = None
) -> list[str]:
    command = ["git", "clone"]
    if depth is not None:
        command += ["--depth", str(depth)]
    if version:
        command += ["--branch", version]
    command += [f"https://github.com/{owner}/{repo}.git", str(target_dir)]
    return command


async def clone_repository(
    owner: str,
    repo: str,
    version: str | None,
    target_dir: Path,
    *,
    depth: int | None = None,
) -> Path:
    """Clone ``owner/repo`` at ``version`` into ``target_dir``.

    Nothing is done when ``target_dir`` already exists.

    Args:
        owner: Repository owner or organization.
        repo: Repository name.
        version: Tag or branch to check out. ``None`` clones the default branch.
        target_dir: Directory to clone into.
        depth: Clone depth; ``1`` for a shallow clone, ``None`` for full history.

    Returns:
        ``target_dir``.

    Raises:
        CloneError: If git exits with a non-zero status.
    """
    target_dir = Path(target_dir)
    target_dir.parent.mkdir(parents=True, exist_ok=True)

    if target_dir.exists():
        logger.info("Target directory already exists, skipping clone: %s", target_dir)
        return target_dir

    command = build_clone_command(owner, repo, version, target_dir, depth)
    logger.info("Cloning %s/%s repository (version %s)...", owner, repo, version)

    process = await asyncio.create_subprocess_exec(
        *command,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    _, stderr = await process.communicate()

    if process.returncode != 0:
        message = stderr.decode("utf-8", errors="replace").strip()
        logger.error("Failed to clone %s/%s repository: %s", owner, repo, message)
        raise CloneError(f"git clone of {owner}/{repo} failed: {message}")

    logger.info("Successfully cloned %s/%s repository to %s", owner, repo, target_dir)
    return target_dir
