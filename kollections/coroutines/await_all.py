"""
Join-all waiting over a group of possibly pending values.

``await_all_async`` is the only asynchronous surface of the package. It never
cancels anything and has no timeout: callers that need either wrap the call in
``asyncio.timeout`` themselves.
"""

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Iterable
from typing import Any, cast

from rsb.coroutines.run_sync import run_sync

logger = logging.getLogger(__name__)


async def await_all_async[R](values: Iterable[Awaitable[R] | R]) -> set[R]:
    """
    Waits for every awaitable in ``values`` concurrently and collects the results.

    Values that are not awaitable count as already resolved. The call completes
    only once every awaitable has settled, whether it resolved or failed.

    Args:
        values: Awaitables (coroutines, tasks, futures) and plain values, in any mix.

    Returns:
        set[R]: The distinct resolved values, in no particular order.

    Raises:
        BaseExceptionGroup: If any awaitable failed, carrying every failure, after
            all awaitables have settled.

    Example:
        ```python
        async def fetch(n: int) -> int:
            await asyncio.sleep(0)
            return n % 2

        await await_all_async([fetch(1), fetch(2), fetch(3), 5])  # {0, 1, 5}
        ```
    """
    resolved: set[R] = set()
    pending: list[Awaitable[R]] = []

    for value in values:
        if inspect.isawaitable(value):
            pending.append(cast(Awaitable[R], value))
        else:
            resolved.add(cast(R, value))

    if not pending:
        return resolved

    logger.debug(f"Waiting for {len(pending)} awaitables to settle")
    outcomes: list[Any] = await asyncio.gather(*pending, return_exceptions=True)

    failures: list[BaseException] = []
    for outcome in outcomes:
        if isinstance(outcome, BaseException):
            failures.append(outcome)
        else:
            resolved.add(outcome)

    logger.debug(
        f"{len(pending)} awaitables settled: {len(outcomes) - len(failures)} resolved, "
        + f"{len(failures)} failed"
    )

    if failures:
        raise BaseExceptionGroup(
            f"{len(failures)} of {len(pending)} awaitables failed", failures
        )

    return resolved


def await_all[R](values: Iterable[Awaitable[R] | R]) -> set[R]:
    """Blocking counterpart of ``await_all_async``."""
    return run_sync(await_all_async, values=values)
