"""
Core link engine — filter, walker, hasher, placer and worker pool.

This package contains the performance-critical foundation of onelink:
- PathFilterImpl: regex accept/reject decisions for directories and files
- FileWalkerImpl: depth-first traversal of input roots with subtree pruning
- HasherImpl + Sha256AlgorithmImpl / Blake3AlgorithmImpl: 256-bit content fingerprints
- PlacerImpl: content-addressed hard-link placement with duplicate detection
- WorkerPool: fixed thread pool behind a single-slot hand-off queue
- Models: FileCandidate, LinkStats, LinkParams and enums

All components are pure Python with no UI dependencies.
"""

from .errors import LinkError, ConfigurationError, TraversalError, ReadError, PlacementError
from .filters import PathFilterImpl
from .scanner import FileWalkerImpl
from .hasher import HasherImpl, Sha256AlgorithmImpl, Blake3AlgorithmImpl
from .placer import PlacerImpl
from .pool import WorkerPool
from .models import (
    FileCandidate, LinkStats, LinkParams, LinkOutcome, SkipReason, HashAlgorithmName)

__all__ = [
    "LinkError",
    "ConfigurationError",
    "TraversalError",
    "ReadError",
    "PlacementError",
    "PathFilterImpl",
    "FileWalkerImpl",
    "HasherImpl",
    "Sha256AlgorithmImpl",
    "Blake3AlgorithmImpl",
    "PlacerImpl",
    "WorkerPool",
    "FileCandidate",
    "LinkStats",
    "LinkParams",
    "LinkOutcome",
    "SkipReason",
    "HashAlgorithmName",
]
