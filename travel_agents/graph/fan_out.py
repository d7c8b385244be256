"""
Concurrent dispatch with a join barrier.
"""

import asyncio
import logging
from typing import Any, Awaitable, Dict


logger = logging.getLogger(__name__)


async def fan_out(calls: Dict[str, Awaitable[Any]]) -> Dict[str, Any]:
    """
    Run the named awaitables concurrently and wait for all of them.

    If any call raises, the calls still running are cancelled and the
    first exception propagates; no partial result is returned.

    Args:
        calls: Awaitables keyed by name

    Returns:
        Results keyed by the same names
    """
    tasks = {name: asyncio.ensure_future(call) for name, call in calls.items()}

    try:
        results = await asyncio.gather(*tasks.values())
    except BaseException:
        pending = [task for task in tasks.values() if not task.done()]
        for task in pending:
            task.cancel()
        if pending:
            logger.warning(
                f"[fan_out] Cancelling {len(pending)} pending call(s): "
                f"{[name for name, task in tasks.items() if task in pending]}"
            )
            await asyncio.gather(*pending, return_exceptions=True)
        raise

    return dict(zip(tasks.keys(), results))
