"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the link pipeline.
These protocols enforce structural typing using Python's `typing.Protocol` so the
walker, hasher and placer can be swapped or faked in tests.

Key Components:
---------------
- HashAlgorithm: Standardized interface for incremental 256-bit hash functions.
- Hasher: Interface for computing a file's content fingerprint.
- PathFilter: Interface for accept/reject decisions on directory entries.
- FileWalker: Interface for traversing input roots and yielding candidates.
- Placer: Interface for content-addressed placement into the store.
"""

from pathlib import Path
from typing import Protocol, Iterator, Optional, Callable
from onelink.core.models import FileCandidate, LinkOutcome, LinkStats, SkipReason


# ===== Interfaces =====

class HashObject(Protocol):
    def update(self, data: bytes) -> None: ...
    def digest(self) -> bytes: ...


class HashAlgorithm(Protocol):
    """
    Interface for incremental hash algorithms.

    Allows plugging in SHA-256, BLAKE3 or any other 256-bit digest
    without affecting placement or the store layout.
    """
    digest_size: int

    def new(self) -> HashObject:
        """Returns a fresh hash object ready for update() calls."""
        ...


class Hasher(Protocol):
    """Interface for fingerprinting file contents."""
    def compute_fingerprint(self, path: str) -> bytes: ...


class PathFilter(Protocol):
    """
    Pure accept/reject decisions. A None result means "keep going":
    descend into the directory, or accept the file.
    """
    def check_dir(self, name: str) -> Optional[SkipReason]: ...
    def check_file(self, name: str, extension: str) -> Optional[SkipReason]: ...


class FileWalker(Protocol):
    """
    Interface for traversing input roots.

    Methods:
        walk: Yields accepted files, counting skips and accepted files in stats.
    """
    def walk(
        self,
        stats: LinkStats,
        should_stop: Optional[Callable[[], bool]] = None
    ) -> Iterator[FileCandidate]:
        ...


class Placer(Protocol):
    """Interface for linking a fingerprinted file into the content-addressed store."""
    def store_path(self, fingerprint: bytes, extension: str) -> Path: ...

    def place(self, candidate: FileCandidate, fingerprint: bytes, stats: LinkStats) -> LinkOutcome:
        """
        Link candidate into the store.

        Returns:
            LINKED for newly stored content, DUPLICATE when the store already holds it.
        """
        ...
