import asyncio
import time

from contentconv import delay


def test_delay_waits_at_least_duration():
    async def run():
        start = time.monotonic()
        await delay(50)
        return time.monotonic() - start

    elapsed = asyncio.run(run())
    assert elapsed >= 0.045

def test_delay_returns_none():
    assert asyncio.run(delay(1)) is None

def test_delay_zero_is_not_synchronous():
    async def run():
        task = asyncio.create_task(delay(0))
        # Creating the task runs nothing; it only completes after we yield
        assert not task.done()
        await task
        return task.done()

    assert asyncio.run(run())

def test_delay_zero_yields_to_other_tasks():
    order = []

    async def other():
        order.append("other")

    async def run():
        t = asyncio.create_task(other())
        await delay(0)
        order.append("after delay")
        await t

    asyncio.run(run())
    assert order == ["other", "after delay"]

def test_negative_duration_treated_as_zero():
    async def run():
        start = time.monotonic()
        await delay(-500)
        return time.monotonic() - start

    assert asyncio.run(run()) < 0.25

def test_concurrent_delays_finish_shortest_first():
    done = []

    async def wait(ms):
        await delay(ms)
        done.append(ms)

    async def run():
        await asyncio.gather(wait(100), wait(10))

    asyncio.run(run())
    assert done == [10, 100]
