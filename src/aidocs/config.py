"""Local configuration for aidocs."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_REPOS_DIR = "cloned-repos"
DEFAULT_OUTPUT_DIR = "ai-friendly-docs"
DEFAULT_ANGULAR_OWNER = "angular"
DEFAULT_ANGULAR_REPO = "angular"
DEFAULT_ANGULAR_DOCS_SUBDIR = "adev/src/content"
DEFAULT_CLONE_DEPTH = 1
DEFAULT_GITHUB_API_URL = "https://api.github.com"
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_USER_AGENT = "aidocs/0.1 (AI-Friendly-Docs-Generator)"
DEFAULT_CHROMA_HOST = "localhost"
DEFAULT_CHROMA_PORT = 8000
DEFAULT_LOG_LEVEL = "INFO"

# Checkouts are kept between runs; an existing checkout is never re-cloned.
AIDOCS_REPOS_PATH = Path(os.getenv("AIDOCS_REPOS_PATH", DEFAULT_REPOS_DIR)).expanduser()
AIDOCS_OUTPUT_PATH = Path(os.getenv("AIDOCS_OUTPUT_PATH", DEFAULT_OUTPUT_DIR)).expanduser()
AIDOCS_ANGULAR_OWNER = os.getenv("AIDOCS_ANGULAR_OWNER", DEFAULT_ANGULAR_OWNER)
AIDOCS_ANGULAR_REPO = os.getenv("AIDOCS_ANGULAR_REPO", DEFAULT_ANGULAR_REPO)
AIDOCS_ANGULAR_DOCS_SUBDIR = os.getenv("AIDOCS_ANGULAR_DOCS_SUBDIR", DEFAULT_ANGULAR_DOCS_SUBDIR)
AIDOCS_CLONE_DEPTH = int(os.getenv("AIDOCS_CLONE_DEPTH", str(DEFAULT_CLONE_DEPTH)))
AIDOCS_GITHUB_API_URL = os.getenv("AIDOCS_GITHUB_API_URL", DEFAULT_GITHUB_API_URL).rstrip("/")
AIDOCS_GITHUB_TOKEN = os.getenv("AIDOCS_GITHUB_TOKEN") or None
AIDOCS_FETCH_TIMEOUT_S = float(os.getenv("AIDOCS_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
AIDOCS_USER_AGENT = os.getenv("AIDOCS_USER_AGENT", DEFAULT_USER_AGENT)
AIDOCS_CHROMA_HOST = os.getenv("AIDOCS_CHROMA_HOST", DEFAULT_CHROMA_HOST)
AIDOCS_CHROMA_PORT = int(os.getenv("AIDOCS_CHROMA_PORT", str(DEFAULT_CHROMA_PORT)))
AIDOCS_LOG_LEVEL = os.getenv("AIDOCS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
