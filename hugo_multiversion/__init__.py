"""
hugo_multiversion package

Provides the CLI entrypoint (`python -m hugo_multiversion`) that builds a Hugo
content/ directory from several branches of a single git repository.
"""

from .cli import main

__all__ = ["main"]
