"""Per-world executor thread.

All shop state of a world is mutated on one thread. Code running elsewhere
(command handlers, network callbacks) hands work over with `run`, which
blocks until the world thread has executed it.

Usage:
    executor = WorldExecutor("overworld")
    enabled = executor.run(world.admin.toggle, player_id)
    executor.close()
"""

from __future__ import annotations

import asyncio
import threading
from collections.abc import Callable
from concurrent.futures import Future
from typing import Any, TypeVar

T = TypeVar("T")


class WorldExecutor:
    """Thread running an asyncio loop on which one world's mutations happen.

    The thread starts lazily on first use. Calls made from the world thread
    itself run inline, so nested hand-offs cannot deadlock.

    Args:
        name: World name, used for the thread name.
    """

    def __init__(self, name: str = "world") -> None:
        self._name = name
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()

    def _start(self) -> asyncio.AbstractEventLoop:
        with self._lock:
            if self._loop is None:
                loop = asyncio.new_event_loop()
                self._thread = threading.Thread(
                    target=loop.run_forever,
                    daemon=True,
                    name=f"world-{self._name}",
                )
                self._thread.start()
                self._loop = loop
            return self._loop

    @property
    def running(self) -> bool:
        return self._loop is not None and self._loop.is_running()

    def in_world_thread(self) -> bool:
        return self._thread is not None and threading.current_thread() is self._thread

    def submit(self, fn: Callable[..., T], *args: Any) -> Future[T]:
        """Schedule `fn(*args)` on the world thread without waiting."""
        loop = self._start()

        async def invoke() -> T:
            return fn(*args)

        return asyncio.run_coroutine_threadsafe(invoke(), loop)

    def run(self, fn: Callable[..., T], *args: Any, timeout: float | None = None) -> T:
        """Execute `fn(*args)` on the world thread and return its result.

        Args:
            fn: Callable to execute.
            *args: Positional arguments for `fn`.
            timeout: Seconds to wait; None waits indefinitely.

        Returns:
            Whatever `fn` returned.

        Raises:
            Exception: Whatever `fn` raised is re-raised in the caller.
            TimeoutError: If `timeout` elapsed first.
        """
        if self.in_world_thread():
            return fn(*args)
        return self.submit(fn, *args).result(timeout)

    def close(self) -> None:
        """Stop the loop and join the thread. Safe to call more than once."""
        with self._lock:
            loop, thread = self._loop, self._thread
            self._loop = None
            self._thread = None
        if loop is None:
            return
        loop.call_soon_threadsafe(loop.stop)
        if thread is not None:
            thread.join()
        loop.close()
