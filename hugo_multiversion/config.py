from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from .versions import split_branch_list


@dataclass(frozen=True)
class Options:
    repo_url: str
    repo_content_dir: str = "content"
    output_dir: Path = Path("content")
    latest_branch: str = ""
    branches: Tuple[str, ...] = ()
    debug: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> Options:
        return cls(
            repo_url=args.repo_url,
            repo_content_dir=args.repo_content_dir,
            output_dir=Path(args.output_dir).expanduser(),
            latest_branch=args.latest_branch,
            branches=tuple(split_branch_list(args.branches)),
            debug=args.debug,
        )
