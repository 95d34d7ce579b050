from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Dict

import pytest


def git(path: Path, *args: str) -> None:
    subprocess.run(
        ["git", *args],
        cwd=path,
        check=True,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
    )


def init_repo(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)
    git(path, "init")
    git(path, "config", "user.name", "tester")
    git(path, "config", "user.email", "tester@example.com")
    git(path, "config", "commit.gpgsign", "false")
    git(path, "symbolic-ref", "HEAD", "refs/heads/main")


def commit_content(path: Path, files: Dict[str, str], message: str) -> None:
    for name, content in files.items():
        file_path = path / name
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content)
    git(path, "add", "--all")
    git(path, "commit", "-m", message)


@pytest.fixture
def docs_repo(tmp_path: Path) -> Path:
    """Repository with a content/ directory on main, release-1 and release-2."""
    origin = tmp_path / "origin"
    init_repo(origin)
    commit_content(
        origin,
        {
            "content/_index.md": "main",
            "content/docs/guide.md": "guide for main",
            "README.md": "not documentation",
        },
        "main docs",
    )
    for release in ("release-1", "release-2"):
        git(origin, "checkout", "-b", release, "main")
        commit_content(
            origin,
            {
                "content/_index.md": release,
                "content/docs/guide.md": f"guide for {release}",
            },
            f"{release} docs",
        )
    git(origin, "checkout", "main")
    return origin
