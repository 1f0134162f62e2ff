"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/aggregator.py
Single consumer of the (fingerprint, path) stream.

Only the aggregator thread ever touches the groups dict, so no lock is needed:
every producer talks to it through the queue.
"""
import os
import queue
import threading
import logging
from concurrent.futures import Future
from typing import Dict, List, Optional

from dupwalk.core.exceptions import WalkError
from dupwalk.core.models import File, Pair
from dupwalk.core.results import WalkResults

logger = logging.getLogger(__name__)

_CLOSED = object()


class Aggregator:
    """
    Consumes Pairs on a dedicated thread until close() is called,
    then publishes a WalkResults exactly once through a Future.
    """

    def __init__(self, maxsize: int = 0):
        self._pairs: "queue.Queue" = queue.Queue(maxsize=maxsize)
        self._future: Future = Future()
        self._thread = threading.Thread(target=self._run, name="dupwalk-aggregator", daemon=True)
        self.files = 0
        self.dropped = 0

    def start(self) -> "Aggregator":
        self._thread.start()
        return self

    def send(self, pair: Pair) -> None:
        """Blocks while the queue is full."""
        self._pairs.put(pair)

    def close(self) -> None:
        """No more pairs will be sent."""
        self._pairs.put(_CLOSED)

    def result(self, timeout: Optional[float] = None) -> WalkResults:
        return self._future.result(timeout=timeout)

    def _run(self) -> None:
        groups: Dict[str, List[File]] = {}
        path = None
        try:
            while True:
                item = self._pairs.get()
                if item is _CLOSED:
                    break
                fingerprint, path = item
                try:
                    stats = os.stat(path)
                except FileNotFoundError:
                    # vanished between discovery and now
                    logger.debug(f"File disappeared before aggregation: {path}")
                    self.dropped += 1
                    continue
                groups.setdefault(fingerprint, []).append(File(path=path, stats=stats))
                self.files += 1
        except Exception as e:
            logger.exception("Aggregator failed")
            self._future.set_exception(WalkError(path or "<aggregator>", e))
            self._drain()
            return
        logger.debug(f"Aggregated {self.files} files into {len(groups)} groups")
        self._future.set_result(WalkResults(groups))

    def _drain(self) -> None:
        """Discard pairs until close() so producers never block on a full queue."""
        while self._pairs.get() is not _CLOSED:
            pass
