"""
onelink — content-addressed hard-link deduplication.

Core features:
- Hashes every accepted file under one or more input trees
- Hard-links each unique (content, extension) once into a sharded store
- Duplicate detection through hard-link semantics, safe under concurrency
- Idempotent: re-running over the same inputs only counts duplicates
"""

from importlib.metadata import PackageNotFoundError, version as _version

try:
    __version__ = _version("onelink")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API — only what users should import directly
from onelink.commands import LinkCommand
from onelink.core import (
    LinkParams, LinkStats, LinkError, HashAlgorithmName, FileCandidate)
from onelink.utils.convert_utils import ConvertUtils

__all__ = [
    "LinkCommand",
    "LinkParams",
    "LinkStats",
    "LinkError",
    "HashAlgorithmName",
    "FileCandidate",
    "ConvertUtils",
    "__version__",
]
