from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence


def run_command(args: Sequence[str], *, stream: bool = False) -> subprocess.CompletedProcess:
    """Run an external command and return the completed process.

    With ``stream`` the child's output goes straight to the terminal;
    otherwise stdout and stderr are captured for the caller to report.
    """
    args = list(args)
    if stream:
        logging.info("Running command cmd=%s args=%s", args[0], args[1:])
        return subprocess.run(args, check=False)
    logging.debug("Running command cmd=%s args=%s", args[0], args[1:])
    return subprocess.run(
        args,
        check=False,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
    )


def clone_branch(
    repo_url: str,
    branch: str,
    destination: Path,
    *,
    stream: bool = False,
) -> subprocess.CompletedProcess:
    destination.parent.mkdir(parents=True, exist_ok=True)
    return run_command(
        [
            "git",
            "clone",
            "--depth",
            "1",
            "--single-branch",
            "--branch",
            branch,
            repo_url,
            str(destination),
        ],
        stream=stream,
    )
