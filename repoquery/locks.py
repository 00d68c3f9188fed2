"""Per-repository locks serialising repoquery invocations."""

from __future__ import annotations

import asyncio
import threading
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class RepoLockRegistry:
    """Hands out one lock per repository id.

    Locks are keyed by the id's string value, created on first use and shared
    by every thread and event loop in the process. Waiting happens in a worker
    thread so the calling loop keeps running.
    """

    def __init__(self) -> None:
        self._locks: dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def lock_for(self, repo_id: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(repo_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[repo_id] = lock
            return lock

    @asynccontextmanager
    async def hold(self, repo_id: str) -> AsyncIterator[None]:
        lock = self.lock_for(repo_id)
        acquiring = asyncio.ensure_future(asyncio.to_thread(lock.acquire))
        try:
            await asyncio.shield(acquiring)
        except asyncio.CancelledError:
            # The worker thread still takes the lock; hand it back once it does.
            def release_when_acquired(future: asyncio.Future[bool]) -> None:
                if not future.cancelled() and future.exception() is None:
                    lock.release()

            acquiring.add_done_callback(release_when_acquired)
            raise
        try:
            yield
        finally:
            lock.release()

    def __contains__(self, repo_id: object) -> bool:
        with self._guard:
            return repo_id in self._locks

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)


_LOCKS: RepoLockRegistry | None = None
_LOCKS_GUARD = threading.Lock()


def get_lock_registry() -> RepoLockRegistry:
    global _LOCKS
    with _LOCKS_GUARD:
        if _LOCKS is None:
            _LOCKS = RepoLockRegistry()
        return _LOCKS
