"""
Canonical key generation.

Hashes canonical URL strings with xxh3_64 so equivalent URLs share one
integer key (cache keys, dedup indexes, crawl frontiers).
"""

from typing import Optional

import xxhash

from url_normalizer.config import DEFAULT_CONTEXT, NormalizationContext

from .components import normalize_host
from .engine import UriLike, canonicalize, parse_lenient


def _signed_int64(hash_val: int) -> int:
    # xxhash returns unsigned; keep keys in signed int64 range
    if hash_val >= 2**63:
        hash_val -= 2**64
    return hash_val


class CanonicalKeyGenerator:
    """
    Generate stable keys for URLs from their canonical form.

    Usage:
        keys = CanonicalKeyGenerator()
        keys.get_url_key("HTTP://Example.com:80/a/./b") == keys.get_url_key(
            "http://example.com/a/b"
        )  # True
    """

    def __init__(self, context: Optional[NormalizationContext] = None):
        """
        Initialize key generator.

        Args:
            context: Normalization options used to canonicalize (defaults to
                the safe context)
        """
        self.context = context or DEFAULT_CONTEXT

    def get_url_key(self, url: UriLike) -> int:
        """
        Generate the key of a URL.

        Args:
            url: URL string, URI or URL

        Returns:
            64-bit hash of the canonical string as signed int64

        Raises:
            InvalidUriError: If the URL cannot be parsed
        """
        canonical = canonicalize(url, self.context)
        return _signed_int64(xxhash.xxh3_64(canonical.encode("utf-8")).intdigest())

    def get_host_prefix(self, url: UriLike, prefix_chars: int = 2) -> str:
        """
        Get a host prefix for partitioning (first N hex chars of the host hash).

        Host-less URIs hash the empty string.

        Args:
            url: URL string, URI or URL
            prefix_chars: Number of hex characters to use (default: 2)

        Returns:
            Hex prefix string (e.g., 'a7', '3f')
        """
        host = normalize_host(parse_lenient(url), self.context) or ""
        hash_val = xxhash.xxh3_64(host.encode("utf-8")).intdigest()
        hex_str = f"{hash_val:016x}"
        return hex_str[:prefix_chars]
