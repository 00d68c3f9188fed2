import asyncio
import threading

import pytest

from repoquery.locks import RepoLockRegistry, get_lock_registry


def test_lock_is_created_once_per_repo_id():
    locks = RepoLockRegistry()

    first = locks.lock_for("repo-1")
    again = locks.lock_for("".join(["repo", "-1"]))
    other = locks.lock_for("repo-2")

    assert first is again
    assert first is not other
    assert "repo-1" in locks
    assert len(locks) == 2


def test_default_registry_is_shared():
    assert get_lock_registry() is get_lock_registry()


def test_concurrent_threads_get_the_same_lock():
    locks = RepoLockRegistry()
    barrier = threading.Barrier(8)
    seen = []

    def grab():
        barrier.wait()
        seen.append(locks.lock_for("repo"))

    threads = [threading.Thread(target=grab) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len({id(lock) for lock in seen}) == 1


@pytest.mark.asyncio
async def test_hold_excludes_concurrent_holders():
    locks = RepoLockRegistry()
    events: list[str] = []

    async def hold(name: str):
        async with locks.hold("repo"):
            events.append(f"{name}:enter")
            await asyncio.sleep(0.01)
            events.append(f"{name}:exit")

    await asyncio.gather(hold("a"), hold("b"))

    assert events in (
        ["a:enter", "a:exit", "b:enter", "b:exit"],
        ["b:enter", "b:exit", "a:enter", "a:exit"],
    )
    assert not locks.lock_for("repo").locked()


@pytest.mark.asyncio
async def test_hold_releases_on_error():
    locks = RepoLockRegistry()

    with pytest.raises(RuntimeError):
        async with locks.hold("repo"):
            raise RuntimeError("query failed")

    assert not locks.lock_for("repo").locked()


@pytest.mark.asyncio
async def test_cancelled_waiter_does_not_leak_the_lock():
    locks = RepoLockRegistry()
    lock = locks.lock_for("repo")
    lock.acquire()

    async def wait_for_lock():
        async with locks.hold("repo"):
            pass

    waiter = asyncio.ensure_future(wait_for_lock())
    await asyncio.sleep(0.05)
    waiter.cancel()
    with pytest.raises(asyncio.CancelledError):
        await waiter

    lock.release()
    for _ in range(100):
        await asyncio.sleep(0.01)
        if not lock.locked():
            break
    assert not lock.locked()


def test_registry_survives_separate_event_loops():
    locks = RepoLockRegistry()
    events: list[str] = []

    async def hold(name: str):
        async with locks.hold("repo"):
            events.append(name)
            await asyncio.sleep(0.01)

    async def pair(prefix: str):
        await asyncio.gather(hold(f"{prefix}1"), hold(f"{prefix}2"))

    asyncio.run(pair("a"))
    asyncio.run(pair("b"))

    assert sorted(events) == ["a1", "a2", "b1", "b2"]
    assert not locks.lock_for("repo").locked()
