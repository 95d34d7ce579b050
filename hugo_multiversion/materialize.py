from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Dict

from .config import Options
from .gitutils import clone_branch
from .versions import resolve_versions
from .workspace import CopyError, FetchError, Workspace, join_under


def build_content(options: Options) -> Dict[str, Path]:
    """Fetch every configured version and copy its content into the output tree.

    Versions are processed one at a time in the order they were given; the
    first fetch or copy failure aborts the run and leaves whatever was already
    copied in place. Returns the output directory of each version.
    """
    versions = resolve_versions(options.branches, options.latest_branch)
    if not versions:
        logging.info("Nothing to do!")
        return {}

    try:
        options.output_dir.mkdir(mode=0o755, parents=True, exist_ok=True)
    except OSError as exc:
        raise CopyError(f"Error creating output directory {options.output_dir}: {exc}") from exc

    built: Dict[str, Path] = {}
    with Workspace(keep=options.debug) as workspace:
        for version, branch in versions.items():
            logging.info("Adding version to list to generate version=%s branch=%s", version, branch)
            clone_dir = fetch_version(options, workspace, version, branch)
            logging.info(
                "Fetched repository version=%s branch=%s path=%s", version, branch, clone_dir
            )

            src = join_under(clone_dir, options.repo_content_dir)
            dst = join_under(options.output_dir, version)
            logging.info(
                "Copying content to output directory version=%s branch=%s path=%s",
                version,
                branch,
                dst,
            )
            copy_tree(src, dst)
            built[version] = dst

    logging.info("Built content directory %s", options.output_dir)
    return built


def fetch_version(options: Options, workspace: Workspace, version: str, branch: str) -> Path:
    clone_dir = workspace.clone_dir(version)
    logging.info("Fetching repository at revision version=%s branch=%s", version, branch)
    try:
        result = clone_branch(options.repo_url, branch, clone_dir, stream=options.debug)
    except OSError as exc:
        raise FetchError(
            f"Failed to fetch repository for version {version!r} (branch {branch!r}): {exc}"
        ) from exc
    if result.returncode != 0:
        detail = (result.stderr or "").strip() or f"git exited with status {result.returncode}"
        raise FetchError(
            f"Failed to fetch repository for version {version!r} (branch {branch!r}): {detail}"
        )
    return clone_dir


def copy_tree(src: Path, dst: Path) -> None:
    """Recursively copy ``src`` into ``dst``, preserving permission bits.

    Existing destination files are overwritten; files only present in ``dst``
    are left alone.

    Symlinks are followed. A symlinked directory loop is copied level by level
    until the operating system reports ELOOP, which surfaces as a CopyError.
    """
    if not src.is_dir():
        raise CopyError(f"Content directory does not exist: {src}")

    try:
        created = not dst.exists()
        dst.mkdir(parents=True, exist_ok=True)
        children = sorted(src.iterdir())
    except OSError as exc:
        raise CopyError(f"Failed to prepare directory {dst}: {exc}") from exc

    for child in children:
        target = dst / child.name
        if child.is_dir():
            copy_tree(child, target)
        else:
            copy_file(child, target)

    # Applied last so read-only source directories can still be populated.
    if created:
        try:
            shutil.copymode(src, dst)
        except OSError as exc:
            raise CopyError(f"Failed to set permissions on {dst}: {exc}") from exc


def copy_file(src: Path, dst: Path) -> None:
    try:
        shutil.copyfile(src, dst)
        shutil.copymode(src, dst)
    except OSError as exc:
        raise CopyError(f"Failed to copy {src} to {dst}: {exc}") from exc
