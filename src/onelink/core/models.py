"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for the link pipeline: candidates, counters and run parameters.
"""

import os
import re
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

from onelink.core.errors import ConfigurationError


# =============================
# Enums
# =============================

class HashAlgorithmName(Enum):
    """
    Content fingerprint algorithm. Both produce 256-bit digests,
    so a store has the same shape whichever is used.
    """
    SHA256 = "sha256"
    BLAKE3 = "blake3"

    @property
    def display_name(self) -> str:
        mapping = {
            HashAlgorithmName.SHA256: "SHA-256",
            HashAlgorithmName.BLAKE3: "BLAKE3",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


class SkipReason(str, Enum):
    SKIP_DIR = "directory matches skip-dir pattern"
    EXTENSION = "extension not allowed"
    SKIP_FILE = "file name matches skip-file pattern"
    SYMLINK = "symbolic link"
    NOT_REGULAR = "not a regular file"
    OUTPUT_DIR = "output store directory"


class LinkOutcome(Enum):
    LINKED = "linked"
    DUPLICATE = "duplicate"


# ======================
#  Core Data Models
# ======================

@dataclass
class FileCandidate:
    """
    A file accepted by the walker and waiting for a worker.
    Basename and lowercase extension are derived from the path when not provided.
    """
    path: str
    name: Optional[str] = None
    extension: Optional[str] = None

    def __post_init__(self):
        if self.name is None:
            self.name = os.path.basename(self.path)

        if self.extension is None:
            _, ext = os.path.splitext(self.name)
            self.extension = ext.lower()  # ".JPG" → ".jpg"

    def __repr__(self):
        return f"<FileCandidate path={self.path}>"


class LinkStats:
    """
    Run totals: skipped, processed and duplicate counts.

    The walker thread bumps skipped/processed while workers bump duplicates,
    so every increment goes through the same lock.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._skipped = 0
        self._processed = 0
        self._duplicates = 0

    def add_skipped(self) -> None:
        with self._lock:
            self._skipped += 1

    def add_processed(self) -> None:
        with self._lock:
            self._processed += 1

    def add_duplicate(self) -> None:
        with self._lock:
            self._duplicates += 1

    @property
    def skipped(self) -> int:
        with self._lock:
            return self._skipped

    @property
    def processed(self) -> int:
        with self._lock:
            return self._processed

    @property
    def duplicates(self) -> int:
        with self._lock:
            return self._duplicates

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return {
                "skipped": self._skipped,
                "processed": self._processed,
                "duplicates": self._duplicates,
            }

    def summary_line(self) -> str:
        data = self.snapshot()
        return f"Skipped: {data['skipped']}, Files: {data['processed']}, Duplicates: {data['duplicates']}"

    def __repr__(self):
        return f"<LinkStats {self.snapshot()}>"


"""
Immutable run configuration with built-in validation.
Built once at startup and passed by reference through the pipeline.
"""

DEFAULT_EXTENSION_PATTERN = r"(jpg|jpeg|tiff|png|avi|mpg|mp4|mov|3gp)"
DEFAULT_SKIP_FILE_PATTERN = r"\.jpg_face(\d+)\."
DEFAULT_SKIP_DIR_PATTERN = r"^(Thumbnails|derivatives|Previews|face)$"
DEFAULT_PARALLELISM = 16
DEFAULT_CHUNK_SIZE = 1024 * 1024


def compile_pattern(option: str, pattern: str) -> re.Pattern:
    """Compile a filter regex, naming the option that holds it on failure."""
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ConfigurationError(f"Invalid {option} pattern '{pattern}'", cause=e) from e


@dataclass(frozen=True)
class LinkParams:
    """Parameters for one link run."""
    output_dir: str
    input_dirs: Tuple[str, ...]
    extension_pattern: re.Pattern = field(default_factory=lambda: re.compile(DEFAULT_EXTENSION_PATTERN))
    skip_file_pattern: re.Pattern = field(default_factory=lambda: re.compile(DEFAULT_SKIP_FILE_PATTERN))
    skip_dir_pattern: re.Pattern = field(default_factory=lambda: re.compile(DEFAULT_SKIP_DIR_PATTERN))
    parallelism: int = DEFAULT_PARALLELISM
    algorithm: HashAlgorithmName = HashAlgorithmName.SHA256
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.output_dir:
            raise ConfigurationError("Output directory cannot be empty")

        # Accept any iterable of paths but store a tuple
        object.__setattr__(self, "input_dirs", tuple(self.input_dirs))
        if not self.input_dirs:
            raise ConfigurationError("At least one input directory is required")
        if any(not d for d in self.input_dirs):
            raise ConfigurationError("Input directory cannot be empty")

        if self.parallelism < 1:
            raise ConfigurationError(f"Parallelism must be a positive integer, got {self.parallelism}")

        if self.chunk_size < 1:
            raise ConfigurationError(f"Chunk size must be positive, got {self.chunk_size}")

    @staticmethod
    def from_patterns(
            output_dir: str,
            input_dirs,
            extension: str = DEFAULT_EXTENSION_PATTERN,
            skip_file: str = DEFAULT_SKIP_FILE_PATTERN,
            skip_dir: str = DEFAULT_SKIP_DIR_PATTERN,
            parallelism: int = DEFAULT_PARALLELISM,
            algorithm: HashAlgorithmName = HashAlgorithmName.SHA256,
            chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> 'LinkParams':
        """
        Factory method to create params from raw pattern strings.
        Useful for CLI argument parsing; raises ConfigurationError on a bad regex.
        """
        return LinkParams(
            output_dir=output_dir,
            input_dirs=tuple(input_dirs),
            extension_pattern=compile_pattern("extension", extension),
            skip_file_pattern=compile_pattern("skip-file", skip_file),
            skip_dir_pattern=compile_pattern("skip-dir", skip_dir),
            parallelism=parallelism,
            algorithm=algorithm,
            chunk_size=chunk_size,
        )
