"""
Per-component normalization rules.

Each normalizer takes a URI and a NormalizationContext and returns the
normalized component as it should be written in the canonical string, or
None when the component is absent or dropped. Port, query and fragment are
returned with their delimiters (':8080', '?q', '#top').
"""

from typing import Optional

from url_normalizer.config import DEFAULT_CONTEXT, NormalizationContext
from url_normalizer.uri import URI

from .encoding import normalize_percent_encoding, upper_case_percent_encoding
from .paths import remove_duplicate_slashes, resolve_path
from .ports import default_port

EMPTY_USER_INFO = frozenset({"", ":"})


def _raw_or_decoded(
    raw: Optional[str], decoded: Optional[str], context: NormalizationContext
) -> Optional[str]:
    """Pick the raw form (with canonical hex case) or the decoded form."""
    if not context.encode_illegal_characters:
        return decoded
    if raw is not None and context.upper_case_percent_encoding:
        return upper_case_percent_encoding(raw)
    return raw


def normalize_scheme(
    uri: URI, context: NormalizationContext = DEFAULT_CONTEXT
) -> Optional[str]:
    """Lower-case the scheme (or force 'http')."""
    if uri.scheme is None:
        return None
    if context.force_http:
        return "http"
    if context.lower_case_scheme:
        return uri.scheme.lower()
    return uri.scheme


def normalize_user_info(
    uri: URI, context: NormalizationContext = DEFAULT_CONTEXT
) -> Optional[str]:
    """
    Normalize the user-info.

    None, '' and ':' count as empty and are dropped when
    remove_empty_user_info is set.
    """
    user_info = _raw_or_decoded(uri.user_info, uri.user_info_decoded, context)
    if context.remove_empty_user_info and (
        user_info is None or user_info in EMPTY_USER_INFO
    ):
        return None
    return user_info


def normalize_host(
    uri: URI, context: NormalizationContext = DEFAULT_CONTEXT
) -> Optional[str]:
    """Strip one trailing dot (opt-in), then lower-case the host."""
    host = uri.host
    if host is None:
        return None
    if context.remove_trailing_dot_in_host and host.endswith("."):
        host = host[:-1]
    if context.lower_case_host:
        host = host.lower()
    return host


def canonical_port(
    uri: URI, context: NormalizationContext = DEFAULT_CONTEXT
) -> Optional[int]:
    """
    Return the port to keep, or None when it is absent or the scheme default.

    The default is that of the emitted scheme, so with force_http an explicit
    ':443' on an https URL survives as 'http://host:443'.
    """
    port = uri.port
    if port is None or port < 0:
        return None
    scheme = normalize_scheme(uri, context)
    if context.remove_default_port and port == default_port(scheme):
        return None
    return port


def normalize_port(
    uri: URI, context: NormalizationContext = DEFAULT_CONTEXT
) -> Optional[str]:
    """Render the port as ':<port>', or None when it is dropped."""
    port = canonical_port(uri, context)
    if port is None:
        return None
    return f":{port}"


def normalize_path(uri: URI, context: NormalizationContext = DEFAULT_CONTEXT) -> str:
    """
    Normalize the path.

    Steps, in order:
    1. empty path -> '/' when the URI has an authority (add_trailing_slash)
    2. percent-encoding canonicalization (hex case, unreserved decoding)
    3. dot-segment removal (hierarchical paths only)
    4. duplicate slash removal (opt-in)
    """
    path = uri.path
    if context.add_trailing_slash and path == "" and uri.has_authority:
        path = "/"
    path = normalize_percent_encoding(path, context)
    if context.remove_dot_segments and not uri.is_opaque:
        path = resolve_path(path)
    if context.remove_duplicate_slash:
        path = remove_duplicate_slashes(path)
    return path


def normalize_query(
    uri: URI, context: NormalizationContext = DEFAULT_CONTEXT
) -> Optional[str]:
    """
    Render the query as '?<query>'.

    An absent query stays absent. An empty query ('?' alone) is kept unless
    remove_empty_query is set.
    """
    query = _raw_or_decoded(uri.query, uri.query_decoded, context)
    if query is None:
        return None
    if context.remove_empty_query and query == "":
        return None
    return f"?{query}"


def normalize_fragment(
    uri: URI, context: NormalizationContext = DEFAULT_CONTEXT
) -> Optional[str]:
    """Render the fragment as '#<fragment>', or None when absent or removed."""
    if context.remove_fragment:
        return None
    fragment = _raw_or_decoded(uri.fragment, uri.fragment_decoded, context)
    if fragment is None:
        return None
    return f"#{fragment}"
