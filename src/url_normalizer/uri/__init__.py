"""
URI component model and reconstruction.
"""

from .builder import build_uri, build_uri_string
from .model import URI, URL, as_uri

__all__ = ["URI", "URL", "as_uri", "build_uri", "build_uri_string"]
