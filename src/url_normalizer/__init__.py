"""
url-normalizer: canonicalize URIs so equivalent URLs compare equal.
"""

from .config import (
    DEFAULT_CONTEXT,
    SAFE_NORMALIZATIONS,
    UNSAFE_NORMALIZATIONS,
    NormalizationContext,
)
from .exceptions import InvalidUriError, URLNormalizerError
from .normalization import (
    CanonicalKeyGenerator,
    DuplicateTracker,
    canonicalize,
    equivalent,
    normalize,
    resolve,
    urls_equal,
)
from .uri import URI, URL

__version__ = "0.4.0"

__all__ = [
    "DEFAULT_CONTEXT",
    "SAFE_NORMALIZATIONS",
    "UNSAFE_NORMALIZATIONS",
    "CanonicalKeyGenerator",
    "DuplicateTracker",
    "InvalidUriError",
    "NormalizationContext",
    "URI",
    "URL",
    "URLNormalizerError",
    "canonicalize",
    "equivalent",
    "normalize",
    "resolve",
    "urls_equal",
]
