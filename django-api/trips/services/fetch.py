"""Joint execution of independent remote reads."""

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable

from django.conf import settings


def fetch_all(*calls: Callable[[], Any]) -> list[Any]:
    """Run independent reads concurrently and return results in call order.

    Waits for every call to settle before returning; the first failure, in
    call order, is re-raised.
    """
    if not calls:
        return []
    workers = min(settings.TAHWISA_FETCH_WORKERS, len(calls))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(call) for call in calls]
    return [future.result() for future in futures]
