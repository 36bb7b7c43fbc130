"""
URI reconstruction.

Assembles (normalized) components back into a URI string. Absent fields are
simply skipped, so relative and host-less results are legal output.
"""

from typing import Optional

from .model import URI


def build_uri_string(
    scheme: Optional[str] = None,
    user_info: Optional[str] = None,
    host: Optional[str] = None,
    port: Optional[int] = None,
    path: Optional[str] = None,
    query: Optional[str] = None,
    fragment: Optional[str] = None,
) -> str:
    """
    Build a URI string from components.

    The authority ('scheme://user-info@host:port') is only written when a
    host is given. The path always starts with '/'.

    Args:
        scheme: Scheme without ':'
        user_info: Raw user-info without '@'
        host: Host name or IP literal
        port: Port number, omitted when None or negative
        path: Raw path
        query: Raw query without '?'
        fragment: Raw fragment without '#'

    Returns:
        URI string

    Example:
        >>> build_uri_string(scheme="http", host="example.com", path="a")
        'http://example.com/a'
    """
    parts = []

    if host is not None:
        parts.append(f"{scheme}://" if scheme is not None else "//")
        if user_info is not None:
            parts.append(f"{user_info}@")
        parts.append(host)
        if port is not None and port >= 0:
            parts.append(f":{port}")

    if path is None or not path.startswith("/"):
        parts.append("/")
    if path is not None:
        parts.append(path)

    if query is not None:
        parts.append(f"?{query}")
    if fragment is not None:
        parts.append(f"#{fragment}")

    return "".join(parts)


def build_uri(**components) -> URI:
    """
    Build and parse a URI from components (see build_uri_string).

    Raises:
        InvalidUriError: If a component holds characters illegal in a URI
    """
    return URI.parse(build_uri_string(**components))
