from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Sequence

from .config import Options
from .materialize import build_content
from .workspace import MultiversionError, ValidationError

REQUIRED_FLAGS = ("repo_url", "repo_content_dir", "output_dir")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hugo-multiversion",
        description=(
            "Build a Hugo content/ directory from documents contained in "
            "different branches of a single repository."
        ),
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument(
        "--repo-url",
        default="",
        help="Git repository URL of the repository containing a content/ directory.",
    )
    parser.add_argument(
        "--repo-content-dir",
        default="content",
        help=(
            "Path to the 'content' directory in the source git repository. "
            "This must be the same on all branches."
        ),
    )
    parser.add_argument(
        "--output-dir",
        default="content",
        help="Output content/ directory.",
    )
    parser.add_argument(
        "--latest-branch",
        default="",
        help="If set, this branch is also fetched and copied as the 'latest' version.",
    )
    parser.add_argument(
        "--branches",
        action="append",
        default=[],
        help=(
            "Comma-separated version=branch pairs to include in the generated "
            "content/ directory (repeatable)."
        ),
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help=(
            "Do not clean up the temporary directory used for building the output, "
            "and show git output."
        ),
    )
    return parser


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def validate_args(args: argparse.Namespace) -> None:
    missing: List[str] = []
    for name in REQUIRED_FLAGS:
        if not getattr(args, name):
            flag = "--" + name.replace("_", "-")
            logging.error("%s must be specified", flag)
            missing.append(flag)
    if missing:
        raise ValidationError(f"Missing required flags: {', '.join(missing)}")


def run(args: argparse.Namespace) -> int:
    logging.debug("Arguments: %s", args)
    validate_args(args)
    options = Options.from_args(args)
    build_content(options)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    try:
        configure_logging(verbose=False)
    except (OSError, ValueError) as exc:
        print(f"Failed to initialise logging: {exc}", file=sys.stderr)
        return 2

    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    try:
        return run(args)
    except MultiversionError as exc:
        logging.error("Failed to run: %s", exc)
        return 1
    except KeyboardInterrupt:
        logging.error("Interrupted")
        return 130


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
