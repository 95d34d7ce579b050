from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List

LATEST_VERSION = "latest"


@dataclass(frozen=True)
class VersionSpec:
    version: str
    branch: str


def parse_version_spec(token: str) -> VersionSpec:
    """Parse a ``version=branch`` token.

    A token without ``=`` names both the version and the branch. Everything
    after the first ``=`` is joined back together without a separator, so
    ``a=b=c`` maps version ``a`` to branch ``bc``.
    """
    parts = token.split("=")
    if len(parts) == 1:
        return VersionSpec(version=token, branch=token)
    return VersionSpec(version=parts[0], branch="".join(parts[1:]))


def parse_branches(tokens: Iterable[str]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for token in tokens:
        spec = parse_version_spec(token)
        out[spec.version] = spec.branch
    return out


def split_branch_list(values: Iterable[str]) -> List[str]:
    tokens: List[str] = []
    for value in values:
        tokens.extend(part for part in value.split(",") if part)
    return tokens


def resolve_versions(tokens: Iterable[str], latest_branch: str = "") -> Dict[str, str]:
    versions = parse_branches(tokens)
    if latest_branch:
        versions[LATEST_VERSION] = latest_branch
    return versions
