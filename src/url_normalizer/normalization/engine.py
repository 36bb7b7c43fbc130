"""
URI normalization engine.

Two canonicalization strategies are offered:
- normalize(): resolves the URI against a synthetic 'scheme://host' base,
  rewrites the authority to its canonical form and returns a URI
- canonicalize(): parses leniently and applies the per-component rules,
  returning a string (works for inputs that are not absolute URLs)

Both are pure functions of their input and a NormalizationContext.
"""

import logging
from typing import Union

from url_normalizer.config import DEFAULT_CONTEXT, NormalizationContext
from url_normalizer.exceptions import InvalidUriError
from url_normalizer.uri import URI, URL, as_uri, build_uri

from .components import (
    EMPTY_USER_INFO,
    canonical_port,
    normalize_fragment,
    normalize_host,
    normalize_path,
    normalize_port,
    normalize_query,
    normalize_scheme,
    normalize_user_info,
)
from .encoding import normalize_percent_encoding, upper_case_percent_encoding
from .paths import remove_duplicate_slashes
from .resolve import resolve

logger = logging.getLogger(__name__)

UriLike = Union[str, URI, URL]


def parse_lenient(value: UriLike) -> URI:
    """
    Parse input that may or may not be an absolute URL.

    Strings are first parsed as a URL (illegal characters get
    percent-encoded); if that fails they are parsed as a URI reference.

    Raises:
        InvalidUriError: If the input is neither a URL nor a URI reference
    """
    if not isinstance(value, str):
        return as_uri(value)

    try:
        return URL.parse(value).to_uri()
    except InvalidUriError as e:
        logger.debug(f"Not an absolute URL ({e.reason}), parsing as URI reference")
        return URI.parse(value)


def _canonical_raw(value, context: NormalizationContext):
    if value is not None and context.upper_case_percent_encoding:
        return upper_case_percent_encoding(value)
    return value


def normalize(uri_like: UriLike, context: NormalizationContext = DEFAULT_CONTEXT) -> URI:
    """
    Normalize a URI.

    URIs without a host ('mailto:', 'urn:', relative paths) are returned
    unchanged. Otherwise the path has its percent-encoding canonicalized and
    its dot-segments removed (by resolution against 'scheme://host'), the
    scheme and host are lower-cased, the default port is dropped, and the
    raw user-info, query and fragment are carried over.

    Args:
        uri_like: URI string, URI or URL
        context: Normalization options

    Returns:
        Normalized URI

    Raises:
        InvalidUriError: If the input cannot be parsed

    Example:
        >>> str(normalize("HTTP://Example.COM:80/a/./b/../%7Ec"))
        'http://example.com/a/~c'
    """
    uri = as_uri(uri_like)

    if not uri.host:
        logger.debug(f"No host in {uri}, leaving it unchanged")
        return uri

    # Decode before resolving so '%2E%2E' segments are resolved too
    resolved = uri.replace(path=normalize_percent_encoding(uri.path, context))
    if context.remove_dot_segments:
        base = URI(scheme=uri.scheme, host=uri.host)
        resolved = resolve(base, resolved)

    path = resolved.path
    if context.remove_duplicate_slash:
        path = remove_duplicate_slashes(path)

    user_info = _canonical_raw(uri.user_info, context)
    if context.remove_empty_user_info and user_info in EMPTY_USER_INFO:
        user_info = None

    return build_uri(
        scheme=normalize_scheme(uri, context),
        user_info=user_info,
        host=normalize_host(uri, context),
        port=canonical_port(uri, context),
        path=path,
        query=_canonical_raw(resolved.query, context),
        fragment=(
            None if context.remove_fragment else _canonical_raw(resolved.fragment, context)
        ),
    )


def canonicalize(value: UriLike, context: NormalizationContext = DEFAULT_CONTEXT) -> str:
    """
    Canonicalize a URL or URI reference into a string.

    Args:
        value: URL string, URI reference string, URI or URL
        context: Normalization options

    Returns:
        Canonical string

    Raises:
        InvalidUriError: If the input is neither a URL nor a URI reference

    Example:
        >>> canonicalize("HTTP://Example.COM:80/a b/../c?x=%7e")
        'http://example.com/c?x=%7E'
    """
    uri = parse_lenient(value)

    scheme = normalize_scheme(uri, context)
    user_info = normalize_user_info(uri, context)
    host = normalize_host(uri, context)
    port = normalize_port(uri, context)
    path = normalize_path(uri, context)
    query = normalize_query(uri, context)
    fragment = normalize_fragment(uri, context)

    parts = []
    if host is not None:
        parts.append(f"{scheme}://" if scheme is not None else "//")
        if user_info is not None:
            parts.append(f"{user_info}@")
        parts.append(host)
        if port is not None:
            parts.append(port)
    elif scheme is not None:
        parts.append(f"{scheme}:")
    parts.append(path)
    if query is not None:
        parts.append(query)
    if fragment is not None:
        parts.append(fragment)

    return "".join(parts)


def equivalent(
    a: UriLike, b: UriLike, context: NormalizationContext = DEFAULT_CONTEXT
) -> bool:
    """Return True if two URIs normalize to the same URI."""
    return normalize(a, context) == normalize(b, context)


def urls_equal(
    a: UriLike, b: UriLike, context: NormalizationContext = DEFAULT_CONTEXT
) -> bool:
    """Return True if two URLs canonicalize to the same string."""
    return canonicalize(a, context) == canonicalize(b, context)
