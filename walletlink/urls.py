"""
URL helpers shared by the sign-in flow and the wallet channel.
"""

from typing import Optional

import httpx


def origin_of(url: str) -> str:
    """Serialize the origin (scheme://host[:port]) of an absolute URL.

    Default ports are dropped and the host is lower-cased, matching how
    browsers report ``event.origin``.
    """
    parsed = httpx.URL(url)
    if not parsed.scheme or not parsed.host:
        raise ValueError(f"URL has no origin: {url!r}")

    host = parsed.host
    if ":" in host:
        host = f"[{host}]"
    if parsed.port is not None:
        return f"{parsed.scheme}://{host}:{parsed.port}"
    return f"{parsed.scheme}://{host}"


def query_param(url: str, name: str) -> Optional[str]:
    """First value of a query parameter, or None when absent."""
    return httpx.URL(url).params.get(name)
