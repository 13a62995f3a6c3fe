"""Tests for delayed callback schedulers."""

import asyncio
import threading
import time

import pytest

from chimprompt.engine import AsyncioScheduler, ThreadingScheduler


@pytest.mark.unit
def test_threading_scheduler_runs_callback():
    fired = threading.Event()
    ThreadingScheduler().call_later(0.01, fired.set)

    assert fired.wait(timeout=2.0)


@pytest.mark.unit
def test_threading_scheduler_cancel():
    fired = threading.Event()
    call = ThreadingScheduler().call_later(0.05, fired.set)
    call.cancel()

    time.sleep(0.1)
    assert not fired.is_set()


@pytest.mark.unit
def test_asyncio_scheduler_uses_running_loop():
    async def main():
        fired = asyncio.Event()
        AsyncioScheduler().call_later(0.01, fired.set)
        await asyncio.wait_for(fired.wait(), timeout=2.0)
        return fired.is_set()

    assert asyncio.run(main())


@pytest.mark.unit
def test_asyncio_scheduler_cancel():
    async def main():
        calls = []
        handle = AsyncioScheduler().call_later(0.01, lambda: calls.append(1))
        handle.cancel()
        await asyncio.sleep(0.05)
        return calls

    assert asyncio.run(main()) == []
