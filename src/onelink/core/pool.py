"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/pool.py
Fixed-size worker pool fed through a bounded hand-off queue.

The queue holds at most one item, so a producer blocks while every worker is busy
and no more than size + 1 items are in flight. A worker that hits an error records
it and keeps draining without processing; the producer sees `failed` and stops
submitting. Whoever owns the pool decides what to do with `failure` after join().
"""

import queue
import threading
from typing import Any, Callable, List, Optional
import logging

from onelink.core.errors import LinkError

logger = logging.getLogger(__name__)

_SENTINEL = object()


class WorkerPool:
    """
    Attributes:
        size: Number of worker threads
        handler: Called once per submitted item, in a worker thread
        on_done: Optional callback invoked after each successfully handled item
    """

    def __init__(
        self,
        size: int,
        handler: Callable[[Any], Any],
        on_done: Optional[Callable[[Any], None]] = None
    ):
        if size < 1:
            raise ValueError("Pool size must be a positive integer")
        self.size = size
        self.handler = handler
        self.on_done = on_done
        self._queue: queue.Queue = queue.Queue(maxsize=1)
        self._threads: List[threading.Thread] = []
        self._failed = threading.Event()
        self._failure_lock = threading.Lock()
        self._failure: Optional[Exception] = None
        self._closed = False

    @property
    def failed(self) -> bool:
        return self._failed.is_set()

    @property
    def failure(self) -> Optional[Exception]:
        with self._failure_lock:
            return self._failure

    def start(self) -> None:
        for index in range(self.size):
            thread = threading.Thread(target=self._worker, name=f"onelink-worker-{index}", daemon=True)
            thread.start()
            self._threads.append(thread)
        logger.debug(f"Started {self.size} workers")

    def submit(self, item: Any) -> bool:
        """
        Hand an item to the next free worker, blocking while all are busy.
        Returns False without queueing once the pool has failed.
        """
        if self._closed:
            raise RuntimeError("Cannot submit to a closed pool")
        if self.failed:
            return False
        self._queue.put(item)
        return True

    def close(self) -> None:
        """No more items: every worker exits after draining."""
        if self._closed:
            return
        self._closed = True
        for _ in self._threads:
            self._queue.put(_SENTINEL)

    def join(self) -> None:
        for thread in self._threads:
            thread.join()
        logger.debug("All workers finished")

    def _record_failure(self, error: Exception) -> None:
        with self._failure_lock:
            if self._failure is None:
                self._failure = error
                logger.debug(f"Worker failed: {error}")
        self._failed.set()

    def _worker(self) -> None:
        while True:
            item = self._queue.get()
            if item is _SENTINEL:
                return
            if self.failed:
                continue  # drain only

            try:
                self.handler(item)
                if self.on_done:
                    self.on_done(item)
            except LinkError as e:
                self._record_failure(e)
            except Exception as e:
                logger.exception(f"Unexpected error while handling {item!r}")
                self._record_failure(e)
