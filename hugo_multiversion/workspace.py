from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Optional

WORKSPACE_PREFIX = "hugo-multiversion-"


class MultiversionError(Exception):
    """Base exception for content build errors."""


class ValidationError(MultiversionError):
    """Raised when required flags are missing or empty."""


class FetchError(MultiversionError):
    """Raised when git fails to fetch a branch."""


class CopyError(MultiversionError):
    """Raised when content cannot be copied into the output directory."""


def join_under(root: Path, name: str) -> Path:
    """Join ``name`` onto ``root``, treating an absolute ``name`` as relative to ``root``."""
    return root / name.lstrip("/")


class Workspace:
    """Temporary directory holding one clone per version for a single run.

    The directory is created on enter and removed on exit unless ``keep`` is
    set, which leaves it in place for inspecting a failed fetch or copy.
    """

    def __init__(self, *, keep: bool = False, prefix: str = WORKSPACE_PREFIX) -> None:
        self.keep = keep
        self.prefix = prefix
        self._root: Optional[Path] = None

    @property
    def root(self) -> Path:
        if self._root is None:
            raise MultiversionError("Workspace has not been created")
        return self._root

    def __enter__(self) -> Workspace:
        self._root = Path(tempfile.mkdtemp(prefix=self.prefix))
        logging.debug("Created temporary directory %s", self._root)
        return self

    def __exit__(self, *_: object) -> None:
        self.cleanup()

    def clone_dir(self, version: str) -> Path:
        return join_under(self.root / "repo", version)

    def cleanup(self) -> None:
        if self._root is None:
            return
        if self.keep:
            logging.info("Skipping cleaning up temporary directory directory=%s", self._root)
            return
        try:
            shutil.rmtree(self._root)
        except OSError as exc:
            logging.error(
                "Failed to cleanup temporary directory directory=%s: %s", self._root, exc
            )
            return
        logging.info("Cleaned up temporary directory directory=%s", self._root)
