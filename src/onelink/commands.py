"""
Unified command orchestrator for a link run.
This is the SINGLE place that decides whether a run failed — core components only raise.
"""
from typing import Optional, Callable
import logging
import threading

from onelink.core.filters import PathFilterImpl
from onelink.core.hasher import HasherImpl, algorithm_for
from onelink.core.models import FileCandidate, LinkParams, LinkStats
from onelink.core.placer import PlacerImpl
from onelink.core.pool import WorkerPool
from onelink.core.scanner import FileWalkerImpl
from onelink.utils.convert_utils import ConvertUtils

logger = logging.getLogger(__name__)


class LinkCommand:
    """
    Orchestrates the entire link workflow:
    1. Build filter, walker, hasher and placer from params
    2. Start the worker pool and feed it every accepted file
    3. Close the pool, wait for every worker, report the first failure

    Usage:
        params = LinkParams.from_patterns(output_dir, [input_dir])
        stats = LinkCommand().execute(params)
        print(stats.summary_line())
    """

    def __init__(self):
        self._stats = LinkStats()

    def execute(
            self,
            params: LinkParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> LinkStats:
        """
        Execute a link run with given parameters.

        Args:
            params: Validated run parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None,
                called from worker threads as files finish

        Returns:
            Final counters, read after every worker has joined

        Raises:
            TraversalError: If an input directory cannot be read
            ReadError: If a file cannot be read while hashing
            PlacementError: If the store cannot be written
        """
        stats = self._stats = LinkStats()
        walker = FileWalkerImpl(
            roots=list(params.input_dirs),
            path_filter=PathFilterImpl.from_params(params),
            output_dir=params.output_dir
        )
        hasher = HasherImpl(algorithm_for(params.algorithm), chunk_size=params.chunk_size)
        placer = PlacerImpl(params.output_dir)

        def handle(candidate: FileCandidate) -> None:
            fingerprint = hasher.compute_fingerprint(candidate.path)
            placer.place(candidate, fingerprint, stats)

        on_done = None
        if progress_callback:
            done = _Counter()

            def on_done(_candidate: FileCandidate) -> None:
                progress_callback('linking', done.increment(), None)

        pool = WorkerPool(params.parallelism, handle, on_done=on_done)
        logger.debug(
            f"Linking {len(params.input_dirs)} input(s) into {params.output_dir} "
            f"with {params.parallelism} workers ({params.algorithm.display_name}, "
            f"{ConvertUtils.bytes_to_human(params.chunk_size)} reads)"
        )

        pool.start()
        try:
            for candidate in walker.walk(stats, should_stop=lambda: pool.failed):
                if not pool.submit(candidate):
                    break
        finally:
            # Runs for walker errors too, so no worker is left blocked
            pool.close()
            pool.join()

        if pool.failure is not None:
            raise pool.failure

        return stats

    def get_stats(self) -> LinkStats:
        """Counters of the last execute() call."""
        return self._stats


class _Counter:
    """Thread-safe progress counter for callbacks fired from workers."""

    def __init__(self):
        self._lock = threading.Lock()
        self._value = 0

    def increment(self) -> int:
        with self._lock:
            self._value += 1
            return self._value
