"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/placer.py
Content-addressed placement of fingerprinted files into the output store.

STORE LAYOUT
------------
<output>/<shard>/<remainder><extension>

  • shard      : first fingerprint byte as two lowercase hex digits (256 shards max)
  • remainder  : the remaining fingerprint bytes as lowercase hex
  • extension  : the source file's lowercase extension, leading dot included

DUPLICATE DETECTION
-------------------
Hard-link creation at a path is atomic. When two workers race for the same store
path exactly one link succeeds and the other sees FileExistsError, which is the
only duplicate signal. No lock protects the store.
"""

import os
from pathlib import Path
import logging

from onelink.core.errors import PlacementError
from onelink.core.interfaces import Placer
from onelink.core.models import FileCandidate, LinkOutcome, LinkStats

logger = logging.getLogger(__name__)


class PlacerImpl(Placer):
    """Links source files into the store under their fingerprint."""

    def __init__(self, output_dir: str):
        self.output_dir = Path(output_dir)

    def store_path(self, fingerprint: bytes, extension: str) -> Path:
        if len(fingerprint) < 2:
            raise ValueError("Fingerprint must be at least two bytes long")
        shard = fingerprint[:1].hex()
        remainder = fingerprint[1:].hex()
        return self.output_dir / shard / f"{remainder}{extension.lower()}"

    def place(self, candidate: FileCandidate, fingerprint: bytes, stats: LinkStats) -> LinkOutcome:
        target = self.store_path(fingerprint, candidate.extension)
        logger.info(f"{target} -> {candidate.path}")

        self._ensure_shard(target.parent)

        try:
            os.link(candidate.path, target)
        except FileExistsError:
            stats.add_duplicate()
            logger.debug(f"Duplicate content: {candidate.path}")
            return LinkOutcome.DUPLICATE
        except OSError as e:
            raise PlacementError(f"Cannot link {candidate.path} into store", path=str(target), cause=e) from e

        return LinkOutcome.LINKED

    @staticmethod
    def _ensure_shard(shard_dir: Path) -> None:
        """Create the shard directory; another worker creating it first is fine."""
        try:
            os.mkdir(shard_dir, 0o777)
        except FileExistsError:
            pass
        except OSError as e:
            raise PlacementError("Cannot create shard directory", path=str(shard_dir), cause=e) from e
