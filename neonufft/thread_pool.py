"""A small pool of worker threads that runs blocked parallel loops."""

from __future__ import annotations

import os
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Optional, Union

from neonufft.errors import InternalError

__all__ = ["BlockRange", "ThreadPool"]


@dataclass(frozen=True)
class BlockRange:
    """Half-open range of loop iterations ``[begin, end)``."""

    begin: int = 0
    end: int = 0

    def __len__(self) -> int:
        return max(0, self.end - self.begin)


RangeLike = Union[BlockRange, tuple]
LoopBody = Callable[[int, BlockRange], None]


def _as_range(block_range: RangeLike) -> BlockRange:
    if isinstance(block_range, BlockRange):
        return block_range
    begin, end = block_range
    return BlockRange(int(begin), int(end))


class _LoopState:
    """Shared state of one parallel loop: hands out blocks one at a time."""

    def __init__(self, block_range: BlockRange, iter_block_size: int, func: LoopBody) -> None:
        self.range = block_range
        self.iter_block_size = iter_block_size
        self.func = func
        self._next_block = 0
        self._lock = threading.Lock()

    def _claim(self) -> Optional[BlockRange]:
        with self._lock:
            block_id = self._next_block
            self._next_block += 1
        begin = self.range.begin + block_id * self.iter_block_size
        end = min(begin + self.iter_block_size, self.range.end)
        return BlockRange(begin, end) if end > begin else None

    def run(self, thread_id: int) -> None:
        while (block := self._claim()) is not None:
            self.func(thread_id, block)


class ThreadPool:
    """Runs loop bodies over blocks of an iteration range on several threads.

    The calling thread takes part as thread 0; workers have ids
    ``1 .. num_threads - 1``. A value below 1 selects the number of CPUs.
    """

    def __init__(self, num_threads: int = 0) -> None:
        num_threads = int(num_threads)
        if num_threads < 1:
            num_threads = os.cpu_count() or 1
        self._num_threads = num_threads
        self._executor: Optional[ThreadPoolExecutor] = None
        self._closed = False
        if num_threads > 1:
            self._executor = ThreadPoolExecutor(
                max_workers=num_threads - 1, thread_name_prefix="neonufft"
            )

    def num_threads(self) -> int:
        """Number of threads that take part in a loop, the caller included."""
        return self._num_threads

    def parallel_for(
        self,
        block_range: RangeLike,
        func: LoopBody,
        iter_block_size: Optional[int] = None,
    ) -> None:
        """Call ``func(thread_id, block)`` for blocks covering ``block_range``.

        Without ``iter_block_size`` the range is split so that each thread
        gets at most one block. The first exception raised by any thread,
        in order of thread id, is re-raised once every thread has finished.
        """
        block_range = _as_range(block_range)
        if block_range.begin >= block_range.end:
            return

        n_iter = block_range.end - block_range.begin
        if iter_block_size is None:
            iter_block_size = (n_iter + self._num_threads - 1) // self._num_threads
        iter_block_size = int(iter_block_size)
        if iter_block_size < 1:
            raise InternalError("parallel_for: iter_block_size < 1")

        if self._num_threads <= 1 or iter_block_size >= n_iter:
            func(0, block_range)
            return

        if self._closed or self._executor is None:
            raise InternalError("parallel_for: thread pool is closed")

        state = _LoopState(block_range, iter_block_size, func)
        worker_futures: list[Future] = [
            self._executor.submit(state.run, thread_id)
            for thread_id in range(1, self._num_threads)
        ]

        main_error: Optional[BaseException] = None
        try:
            state.run(0)
        except BaseException as exc:  # re-raised below, after the workers finish
            main_error = exc

        worker_errors = [future.exception() for future in worker_futures]

        if main_error is not None:
            raise main_error
        for error in worker_errors:
            if error is not None:
                raise error

    def close(self) -> None:
        """Stop the worker threads; the pool cannot run parallel loops afterwards."""
        if self._closed:
            return
        self._closed = True
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"ThreadPool(num_threads={self._num_threads})"