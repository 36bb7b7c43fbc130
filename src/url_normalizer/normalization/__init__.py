"""
URI normalization.

Handles component-wise canonicalization, dot-segment resolution,
percent-encoding normalization and equivalence testing.
"""

from .components import (
    normalize_fragment,
    normalize_host,
    normalize_path,
    normalize_port,
    normalize_query,
    normalize_scheme,
    normalize_user_info,
)
from .dedup import DuplicateTracker
from .encoding import (
    decode_special_characters,
    decode_unreserved,
    upper_case_percent_encoding,
)
from .engine import (
    UriLike,
    canonicalize,
    equivalent,
    normalize,
    parse_lenient,
    urls_equal,
)
from .keys import CanonicalKeyGenerator
from .paths import remove_duplicate_slashes, resolve_path
from .ports import DEFAULT_PORTS, default_port
from .resolve import resolve

__all__ = [
    "CanonicalKeyGenerator",
    "DEFAULT_PORTS",
    "DuplicateTracker",
    "UriLike",
    "canonicalize",
    "decode_special_characters",
    "decode_unreserved",
    "default_port",
    "equivalent",
    "normalize",
    "normalize_fragment",
    "normalize_host",
    "normalize_path",
    "normalize_port",
    "normalize_query",
    "normalize_scheme",
    "normalize_user_info",
    "parse_lenient",
    "remove_duplicate_slashes",
    "resolve",
    "resolve_path",
    "upper_case_percent_encoding",
    "urls_equal",
]
