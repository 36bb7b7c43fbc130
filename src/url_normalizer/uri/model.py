"""
URI component model.

Implements the value types the normalization rules operate over:
- URI: a generic URI reference holding raw (percent-encoded) components
- URL: an absolute, authority-qualified URL parsed leniently, convertible
  to a URI with illegal characters percent-encoded

Lexing follows the regular expression of RFC 3986 Appendix B rather than
urllib.parse.urlsplit, which lower-cases the scheme and so would defeat
lower_case_scheme=False. Decoded accessors use urllib.parse.unquote.
"""

import re
from dataclasses import dataclass, replace
from typing import Optional
from urllib.parse import quote, unquote

from url_normalizer.exceptions import InvalidUriError

# RFC 3986 Appendix B
_URI_REFERENCE_REGEX = re.compile(
    r"^(?:([^:/?#]+):)?(?://([^/?#]*))?([^?#]*)(?:\?([^#]*))?(?:#(.*))?$", re.DOTALL
)
_SCHEME_REGEX = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")

# Characters that may never appear literally in a URI reference
_ILLEGAL_CHARS_REGEX = re.compile(r'[\x00-\x20\x7f"<>\\^`{|}]')
_BRACKETS_REGEX = re.compile(r"[\[\]]")

_SUB_DELIMS = "!$&'()*+,;="
_USER_INFO_SAFE = _SUB_DELIMS + ":%"
_PATH_SAFE = _SUB_DELIMS + ":@/%"
_QUERY_SAFE = _SUB_DELIMS + ":@/?%"


def _split_authority(
    text: str, authority: str
) -> tuple[Optional[str], str, Optional[int]]:
    """Split an authority into (user_info, host, port)."""
    user_info: Optional[str] = None
    if "@" in authority:
        user_info, _, host_port = authority.rpartition("@")
    else:
        host_port = authority

    if host_port.startswith("["):
        end = host_port.find("]")
        if end == -1:
            raise InvalidUriError(text, "unterminated IP literal in host")
        host = host_port[: end + 1]
        rest = host_port[end + 1 :]
        if rest and not rest.startswith(":"):
            raise InvalidUriError(text, "unexpected characters after IP literal")
        port_text = rest[1:] if rest else ""
    else:
        host, _, port_text = host_port.partition(":")
        if "[" in host or "]" in host:
            raise InvalidUriError(text, "brackets are only allowed around IP literals")

    if not port_text:
        return user_info, host, None
    if not port_text.isascii() or not port_text.isdigit():
        raise InvalidUriError(text, f"invalid port {port_text!r}")
    return user_info, host, int(port_text)


def _match_reference(text: str) -> tuple:
    match = _URI_REFERENCE_REGEX.match(text)
    if match is None:  # pragma: no cover - the expression matches any string
        raise InvalidUriError(text, "not a URI reference")
    scheme, authority, path, query, fragment = match.groups()
    if scheme is not None and not _SCHEME_REGEX.match(scheme):
        raise InvalidUriError(text, f"invalid scheme {scheme!r}")
    return scheme, authority, path, query, fragment


@dataclass(frozen=True)
class _Components:
    """
    The seven components of a URI reference.

    Attributes:
        scheme: Scheme as written (None for relative references)
        user_info: Raw user-info (None when absent)
        host: Host as written (None when there is no authority)
        port: Port number (None when unspecified)
        path: Raw path, never None
        query: Raw query (None when there is no '?')
        fragment: Raw fragment (None when there is no '#')
    """

    scheme: Optional[str] = None
    user_info: Optional[str] = None
    host: Optional[str] = None
    port: Optional[int] = None
    path: str = ""
    query: Optional[str] = None
    fragment: Optional[str] = None

    @property
    def has_authority(self) -> bool:
        return self.host is not None

    @property
    def authority(self) -> Optional[str]:
        """Raw authority ('user@host:port'), or None."""
        if self.host is None:
            return None
        authority = self.host
        if self.user_info is not None:
            authority = f"{self.user_info}@{authority}"
        if self.port is not None:
            authority = f"{authority}:{self.port}"
        return authority

    @property
    def is_absolute(self) -> bool:
        return self.scheme is not None

    @property
    def is_opaque(self) -> bool:
        """True for absolute URIs like 'mailto:a@b' whose path is not hierarchical."""
        return (
            self.scheme is not None
            and self.host is None
            and not self.path.startswith("/")
        )

    def replace(self, **changes):
        """Return a copy with the given components replaced."""
        return replace(self, **changes)

    def to_string(self) -> str:
        """Recompose the components (RFC 3986 §5.3)."""
        parts = []
        if self.scheme is not None:
            parts.append(f"{self.scheme}:")
        if self.host is not None:
            parts.append(f"//{self.authority}")
        parts.append(self.path)
        if self.query is not None:
            parts.append(f"?{self.query}")
        if self.fragment is not None:
            parts.append(f"#{self.fragment}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True)
class URI(_Components):
    """
    A parsed URI reference with raw components.

    Usage:
        uri = URI.parse("http://user@Example.COM:8080/a%7Eb?q#top")
        uri.host           # 'Example.COM'
        uri.path_decoded   # '/a~b'
    """

    @classmethod
    def parse(cls, text: str) -> "URI":
        """
        Parse a URI reference (absolute or relative).

        Malformed percent sequences are kept as written.

        Args:
            text: URI reference string

        Returns:
            URI with raw components

        Raises:
            InvalidUriError: If text is not a syntactically valid URI reference
        """
        if not isinstance(text, str):
            raise InvalidUriError(text, f"expected str, got {type(text).__name__}")

        illegal = _ILLEGAL_CHARS_REGEX.search(text)
        if illegal:
            raise InvalidUriError(
                text, f"illegal character {illegal.group()!r} at index {illegal.start()}"
            )

        scheme, authority, path, query, fragment = _match_reference(text)

        user_info, host, port = None, None, None
        if authority is not None:
            user_info, host, port = _split_authority(text, authority)

        for name, value in (
            ("user-info", user_info),
            ("path", path),
            ("query", query),
            ("fragment", fragment),
        ):
            if value is not None and _BRACKETS_REGEX.search(value):
                raise InvalidUriError(text, f"brackets are not allowed in the {name}")
        if fragment is not None and "#" in fragment:
            raise InvalidUriError(text, "more than one '#'")

        if scheme is None and authority is None:
            first_segment = path.split("/", 1)[0]
            if ":" in first_segment:
                raise InvalidUriError(text, "':' in the first segment of a relative path")

        return cls(
            scheme=scheme,
            user_info=user_info,
            host=host,
            port=port,
            path=path,
            query=query,
            fragment=fragment,
        )

    @property
    def user_info_decoded(self) -> Optional[str]:
        return None if self.user_info is None else unquote(self.user_info)

    @property
    def path_decoded(self) -> str:
        return unquote(self.path)

    @property
    def query_decoded(self) -> Optional[str]:
        return None if self.query is None else unquote(self.query)

    @property
    def fragment_decoded(self) -> Optional[str]:
        return None if self.fragment is None else unquote(self.fragment)


@dataclass(frozen=True)
class URL(_Components):
    """
    An absolute URL with an authority, as typed by a user.

    Parsing is strict about structure (a scheme and '//authority' are
    required) and lenient about characters: spaces, brackets and other
    characters illegal in a URI are accepted and percent-encoded by to_uri().
    """

    @classmethod
    def parse(cls, text: str) -> "URL":
        """
        Parse an absolute URL.

        Raises:
            InvalidUriError: If text has no scheme or authority, the scheme is
                invalid, or the authority is malformed
        """
        if not isinstance(text, str):
            raise InvalidUriError(text, f"expected str, got {type(text).__name__}")

        text = text.strip()
        scheme, authority, path, query, fragment = _match_reference(text)

        if scheme is None:
            raise InvalidUriError(text, "no scheme")
        if authority is None:
            raise InvalidUriError(text, "no authority")
        if _ILLEGAL_CHARS_REGEX.search(authority):
            raise InvalidUriError(text, "illegal character in authority")

        user_info, host, port = _split_authority(text, authority)
        if not host:
            raise InvalidUriError(text, "no host")

        return cls(
            scheme=scheme,
            user_info=user_info,
            host=host,
            port=port,
            path=path,
            query=query,
            fragment=fragment,
        )

    def to_uri(self) -> URI:
        """Convert to a URI, percent-encoding characters illegal in each component."""
        return URI(
            scheme=self.scheme,
            user_info=(
                None
                if self.user_info is None
                else quote(self.user_info, safe=_USER_INFO_SAFE)
            ),
            host=self.host,
            port=self.port,
            path=quote(self.path, safe=_PATH_SAFE),
            query=None if self.query is None else quote(self.query, safe=_QUERY_SAFE),
            fragment=(
                None if self.fragment is None else quote(self.fragment, safe=_QUERY_SAFE)
            ),
        )


def as_uri(value) -> URI:
    """
    Coerce a URI-like value to a URI.

    str is parsed as a URI reference, URL is converted with illegal
    characters encoded, URI is returned unchanged.

    Raises:
        InvalidUriError: If the value is not URI-like or cannot be parsed
    """
    if isinstance(value, URI):
        return value
    if isinstance(value, URL):
        return value.to_uri()
    if isinstance(value, str):
        return URI.parse(value)
    raise InvalidUriError(value, f"expected str, URI or URL, got {type(value).__name__}")
