"""Helpers for running independent store lookups, optionally on a thread pool."""

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, List, Sequence


def fetch_with(session_factory, query: Callable, *args) -> Any:
    """Run a session-taking store query in its own session."""
    with session_factory() as session:
        return query(session, *args)


def run_lookups(lookups: Sequence[Callable[[], Any]], parallel: bool = False) -> List[Any]:
    """
    Run lookups that do not depend on each other and return their results in order.

    With parallel=True every lookup runs on its own worker thread, so each must open its
    own session. The first failing lookup (in the given order) is re-raised and no
    results are returned.
    """
    if not parallel or len(lookups) < 2:
        return [lookup() for lookup in lookups]

    with ThreadPoolExecutor(max_workers=len(lookups), thread_name_prefix="directory-lookup") as executor:
        futures = [executor.submit(lookup) for lookup in lookups]
        return [future.result() for future in futures]
