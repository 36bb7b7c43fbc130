"""
Default ports per scheme (IANA registrations).
"""

from types import MappingProxyType
from typing import Mapping, Optional

DEFAULT_PORTS: Mapping[str, int] = MappingProxyType(
    {
        "ftp": 21,
        "telnet": 23,
        "http": 80,
        "gopher": 70,
        "news": 119,
        "nntp": 119,
        "prospero": 191,
        "https": 443,
        "snews": 563,
        "snntp": 563,
    }
)


def default_port(scheme: Optional[str]) -> Optional[int]:
    """
    Look up the default port for a scheme.

    Args:
        scheme: Scheme name (case-insensitive)

    Returns:
        Default port, or None if the scheme has no known default
    """
    if not scheme:
        return None
    return DEFAULT_PORTS.get(scheme.lower())
