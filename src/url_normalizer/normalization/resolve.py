"""
Relative reference resolution (RFC 3986 §5.2).

Merges a reference with a base URI component by component; dot-segments
are removed with resolve_path().
"""

from url_normalizer.uri import URI, as_uri

from .paths import resolve_path


def _merge_paths(base: URI, reference_path: str) -> str:
    """Merge a relative-path reference with the base path (§5.2.3)."""
    if base.has_authority and base.path == "":
        return f"/{reference_path}"
    directory, slash, _ = base.path.rpartition("/")
    return f"{directory}{slash}{reference_path}"


def resolve(base, reference) -> URI:
    """
    Resolve a URI reference against a base URI.

    Args:
        base: Base URI (str, URI or URL)
        reference: Reference to resolve (str, URI or URL)

    Returns:
        Target URI

    Raises:
        InvalidUriError: If either argument cannot be parsed

    Example:
        >>> str(resolve("http://a/b/c/d;p?q", "../g"))
        'http://a/b/g'
    """
    base = as_uri(base)
    reference = as_uri(reference)

    if reference.scheme is not None:
        return reference.replace(path=resolve_path(reference.path))

    if reference.has_authority:
        return reference.replace(
            scheme=base.scheme, path=resolve_path(reference.path)
        )

    if reference.path == "":
        path = base.path
        query = reference.query if reference.query is not None else base.query
    else:
        if reference.path.startswith("/"):
            path = resolve_path(reference.path)
        else:
            path = resolve_path(_merge_paths(base, reference.path))
        query = reference.query

    return URI(
        scheme=base.scheme,
        user_info=base.user_info,
        host=base.host,
        port=base.port,
        path=path,
        query=query,
        fragment=reference.fragment,
    )
