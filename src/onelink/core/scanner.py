"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements input traversal for the link pipeline.
Features:
- Depth-first walk over every input root with os.walk
- Prunes skipped directories before os.walk enters them
- Never follows symbolic links and never walks into the output store
- Counts every rejected entry once and every accepted file once
- Any directory read error aborts the walk
"""

import os
import stat
from pathlib import Path
from typing import Callable, Iterator, List, Optional
import logging

logger = logging.getLogger(__name__)

# Local imports
from onelink.core.errors import TraversalError
from onelink.core.interfaces import FileWalker, PathFilter
from onelink.core.models import FileCandidate, LinkStats, SkipReason


def _raise_traversal_error(error: OSError) -> None:
    """os.walk onerror hook: a directory that cannot be listed is fatal."""
    raise TraversalError("Cannot read directory", path=error.filename, cause=error) from error


class FileWalkerImpl(FileWalker):
    """
    Walks input roots and yields the files that pass the path filter.

    Attributes:
        roots: Input directories, resolved to absolute paths
        path_filter: Accept/reject decisions for names and extensions
        output_dir: Store directory, never descended into even if it lies under a root
    """

    def __init__(
        self,
        roots: List[str],
        path_filter: PathFilter,
        output_dir: Optional[str] = None
    ):
        self.roots = [str(Path(r).resolve()) for r in roots]
        self.path_filter = path_filter
        self.output_dir = os.path.normpath(str(Path(output_dir).resolve())) if output_dir else None

    def walk(self,
             stats: LinkStats,
             should_stop: Optional[Callable[[], bool]] = None) -> Iterator[FileCandidate]:
        """
        Yield every accepted file under every root.
        Skips increment stats.skipped; accepted files increment stats.processed
        right before they are yielded.
        """
        for root in self.roots:
            if should_stop and should_stop():
                logger.debug(f"Walk stopped before root {root}")
                return

            reason = self._check_dir(root, os.path.basename(root))
            if reason:
                self._skip(stats, root, reason)
                continue

            logger.debug(f"Walking input directory: {root}")
            for dirpath, dirs, files in os.walk(root, onerror=_raise_traversal_error):
                if should_stop and should_stop():
                    logger.debug("Walk interrupted")
                    return

                # Pre-filter subdirectories BEFORE os.walk enters them
                kept = []
                for name in dirs:
                    path = os.path.join(dirpath, name)
                    reason = self._check_dir(path, name)
                    if reason:
                        self._skip(stats, path, reason)
                    else:
                        kept.append(name)
                dirs[:] = kept

                for name in files:
                    if should_stop and should_stop():
                        return
                    path = os.path.join(dirpath, name)
                    candidate = self._process_file(path, name, stats)
                    if candidate:
                        stats.add_processed()
                        yield candidate

    def _check_dir(self, path: str, name: str) -> Optional[SkipReason]:
        if os.path.islink(path):
            return SkipReason.SYMLINK
        if self.output_dir and os.path.normpath(path) == self.output_dir:
            return SkipReason.OUTPUT_DIR
        return self.path_filter.check_dir(name)

    def _process_file(self, path: str, name: str, stats: LinkStats) -> Optional[FileCandidate]:
        """
        Examine a single directory entry.
        Returns:
            FileCandidate if the entry is a regular file that passes the filter, else None
        """
        try:
            mode = os.lstat(path).st_mode
        except OSError as e:
            raise TraversalError("Cannot examine entry", path=path, cause=e) from e

        if stat.S_ISLNK(mode):
            self._skip(stats, path, SkipReason.SYMLINK)
            return None
        if not stat.S_ISREG(mode):
            self._skip(stats, path, SkipReason.NOT_REGULAR)
            return None

        candidate = FileCandidate(path=path, name=name)
        reason = self.path_filter.check_file(name, candidate.extension)
        if reason:
            self._skip(stats, path, reason)
            return None

        logger.debug(f"Accepted file: {path}")
        return candidate

    @staticmethod
    def _skip(stats: LinkStats, path: str, reason: SkipReason) -> None:
        stats.add_skipped()
        logger.info(f"skipping {path} ({reason.value})")
