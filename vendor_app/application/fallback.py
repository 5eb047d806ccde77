"""
Alternative-source fallback for list resources.

Some resources are served by different endpoints depending on the backend
version. Each candidate is tried in order and the first one that answers
with a JSON array wins. This is not a time-based retry: every candidate is
called at most once.
"""

import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from vendor_app.application.interfaces.vendor_backend import EndpointResult, VendorBackend

logger = logging.getLogger(__name__)

Fetcher = Callable[[], Awaitable[EndpointResult]]


async def fetch_first_available(fetchers: Sequence[Fetcher], resource: str = "items") -> list[Any]:
    """
    Return the items of the first candidate that yields a well-formed array.

    Non-array bodies, HTTP errors and network errors move on to the next
    candidate. When every candidate fails the result is an empty list and
    the condition is logged, never raised.
    """
    for fetch in fetchers:
        result = await fetch()
        items = result.items
        if items is not None:
            logger.info(
                "Fetched %s from %s",
                resource,
                result.path,
                extra={"resource": resource, "path": result.path, "count": len(items)},
            )
            return items

        logger.info(
            "Candidate endpoint for %s unusable, trying next",
            resource,
            extra={
                "resource": resource,
                "path": result.path,
                "error_code": result.error.code if result.error else "NOT_AN_ARRAY",
                "http_status": result.error.status_code if result.error else None,
            },
        )

    logger.warning(
        "No %s found from any endpoint",
        resource,
        extra={"resource": resource, "candidates": len(fetchers)},
    )
    return []


def endpoint_fetchers(backend: VendorBackend, paths: Sequence[str]) -> list[Fetcher]:
    """Bind an ordered list of GET paths to fetchers."""

    def bind(path: str) -> Fetcher:
        async def fetch() -> EndpointResult:
            return await backend.try_get_list(path)

        return fetch

    return [bind(path) for path in paths]
