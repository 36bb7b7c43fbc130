"""
Path segment resolution.

Removes '.' and '..' segments from a path the way a browser or cache
interprets them (RFC 3986 §5.2.4), working purely on the text.
"""

import re

_DOT_SEGMENTS = frozenset({"", ".", ".."})
_DUPLICATE_SLASH_REGEX = re.compile(r"/{2,}")


def resolve_path(path: str) -> str:
    """
    Remove dot-segments from a path.

    '..' never climbs above the first segment, and a trailing '', '.' or
    '..' segment leaves the result ending in '/'. Interior empty segments
    ('//') are kept; see remove_duplicate_slashes().

    Args:
        path: Raw path

    Returns:
        Path without dot-segments

    Example:
        >>> resolve_path("/a/b/../c")
        '/a/c'
        >>> resolve_path("/a/..")
        '/'
    """
    if not path:
        return path

    segments = path.split("/")
    last = len(segments) - 1
    resolved: list[str] = []

    for index, segment in enumerate(segments):
        if segment == "":
            # The trailing empty segment is re-added below
            if not resolved or index != last:
                resolved.append(segment)
        elif segment == ".":
            continue
        elif segment == "..":
            if len(resolved) > 1:
                resolved.pop()
        else:
            resolved.append(segment)

    if segments[-1] in _DOT_SEGMENTS:
        resolved.append("")

    return "/".join(resolved)


def remove_duplicate_slashes(path: str) -> str:
    """Collapse runs of '/' into a single '/'."""
    return _DUPLICATE_SLASH_REGEX.sub("/", path)
