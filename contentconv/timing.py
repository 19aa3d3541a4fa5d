import asyncio


async def delay(duration_ms: float) -> None:
    """
    Suspend the calling coroutine for `duration_ms` milliseconds.

    Always yields to the event loop at least once, so delay(0) never
    completes inside the caller's current step. Negative values count as 0.
    """
    await asyncio.sleep(max(duration_ms, 0) / 1000)
