from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Dict, Iterable, Optional, Tuple, Union

from ..helpers.cards import Card
from ..helpers.equity import DEFAULT_ITERATIONS, EquityResult, prepare, simulate

log = logging.getLogger(__name__)

ResultCallback = Callable[[int, EquityResult], None]


class OddsCalculator:
    """
    Runs simulations for a caller that re-requests on every input change.

    Every submit() gets a sequence number one higher than the last. A
    finished run is published only if its sequence number is still the
    newest one started, so an older request can never overwrite a fresher
    result ("last request started wins").
    """

    def __init__(
        self,
        max_workers: int = 1,
        on_result: Optional[ResultCallback] = None,
    ):
        if max_workers <= 0:
            raise ValueError("max_workers must be positive")
        self._pool = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="odds")
        self._lock = threading.Lock()
        self._on_result = on_result

        self._seq = 0                                   # newest sequence number started
        self._latest: Optional[Tuple[int, EquityResult]] = None
        self._futures: Dict[int, Future] = {}

        self.stale_dropped = 0

    @property
    def current_seq(self) -> int:
        with self._lock:
            return self._seq

    def submit(
        self,
        hero: Iterable[Union[str, Card]],
        board: Iterable[Union[str, Card]] = (),
        opponents: int = 1,
        iterations: int = DEFAULT_ITERATIONS,
        seed: Optional[int] = None,
    ) -> int:
        # validate on the caller's thread so input errors surface here
        sim = prepare(hero, board, opponents, iterations)

        with self._lock:
            self._seq += 1
            seq = self._seq
            # anything still queued is already superseded
            for old_seq, fut in list(self._futures.items()):
                if fut.cancel():
                    del self._futures[old_seq]
                    self.stale_dropped += 1
                    log.debug("cancelled queued request %d", old_seq)
            fut = self._pool.submit(
                simulate, sim.hero, sim.board,
                opponents=sim.opponents, iterations=sim.iterations, seed=seed,
            )
            self._futures[seq] = fut

        fut.add_done_callback(lambda f, s=seq: self._finish(s, f))
        return seq

    def _finish(self, seq: int, fut: Future) -> None:
        if fut.cancelled():
            return
        result = fut.result()
        with self._lock:
            self._futures.pop(seq, None)
            if seq != self._seq:
                self.stale_dropped += 1
                log.debug("dropping stale result %d (current %d)", seq, self._seq)
                return
            self._latest = (seq, result)
        if self._on_result is not None:
            self._on_result(seq, result)

    def latest(self) -> Optional[Tuple[int, EquityResult]]:
        with self._lock:
            return self._latest

    def wait(self, seq: int, timeout: Optional[float] = None) -> Optional[EquityResult]:
        """
        Block until request `seq` is done. Returns its result only if it is
        still the newest request, else None.
        """
        with self._lock:
            fut = self._futures.get(seq)
            latest = self._latest
        if fut is not None:
            if fut.cancelled():
                return None
            result = fut.result(timeout=timeout)
        elif latest is not None and latest[0] == seq:
            return latest[1]
        else:
            return None
        with self._lock:
            return result if seq == self._seq else None

    def close(self) -> None:
        self._pool.shutdown(wait=True, cancel_futures=True)

    def __enter__(self) -> "OddsCalculator":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
